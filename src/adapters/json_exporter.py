"""Exportación JSON de resultados tipados.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Los enums extensibles se serializan con su valor crudo del backend.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from pydantic import BaseModel


def export_models_json(*, models: BaseModel | Iterable[BaseModel], output_path: Path) -> Path:
    """Exporta uno o varios modelos a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(models, BaseModel):
        payload: object = models.model_dump(mode="json")
    else:
        payload = [model.model_dump(mode="json") for model in models]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
