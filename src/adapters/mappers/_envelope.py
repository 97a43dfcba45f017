"""Helpers compartidos por los mappers."""

from __future__ import annotations

import json
from typing import Any


def load_json(response: bytes) -> Any:
    return json.loads(response)


def unwrap_data(response: bytes) -> Any:
    """Extrae la carga útil del sobre `{"data": ...}` del túnel Jetpack."""

    payload = load_json(response)
    if not isinstance(payload, dict) or "data" not in payload:
        raise ValueError("response is not a Jetpack data envelope")
    return payload["data"]


def expect_list(value: Any, what: str) -> list[Any]:
    if not isinstance(value, list):
        raise ValueError(f"{what}: expected a JSON array, got {type(value).__name__}")
    return value


def expect_dict(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{what}: expected a JSON object, got {type(value).__name__}")
    return value
