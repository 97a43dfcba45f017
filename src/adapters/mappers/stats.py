"""Mappers de estadísticas de WordPress.com.

Las stats no vienen en el sobre Jetpack: la respuesta es una tabla
`fields` (cabecera) + `data` (filas) que se convierte en items tipados.
"""

from __future__ import annotations

from typing import Any

from adapters.mappers._envelope import expect_dict, expect_list, load_json
from core.domain.models import OrderStats, SiteVisitStats


def _rows(payload: dict[str, Any]) -> list[dict[str, Any]]:
    fields = expect_list(payload.get("fields"), "stats fields")
    rows = expect_list(payload.get("data", []), "stats data")
    out: list[dict[str, Any]] = []
    for row in rows:
        values = expect_list(row, "stats row")
        if len(values) != len(fields):
            raise ValueError(f"stats row has {len(values)} values for {len(fields)} fields")
        out.append(dict(zip(fields, values)))
    return out


class OrderStatsMapper:
    def __init__(self, *, site_id: int) -> None:
        self.site_id = site_id

    def map(self, response: bytes) -> OrderStats:
        payload = expect_dict(load_json(response), "order stats")
        data = {k: v for k, v in payload.items() if k not in ("fields", "data")}
        return OrderStats.model_validate({**data, "site_id": self.site_id, "items": _rows(payload)})


class SiteVisitStatsMapper:
    def __init__(self, *, site_id: int) -> None:
        self.site_id = site_id

    def map(self, response: bytes) -> SiteVisitStats:
        payload = expect_dict(load_json(response), "site visit stats")
        data = {k: v for k, v in payload.items() if k not in ("fields", "data")}
        return SiteVisitStats.model_validate({**data, "site_id": self.site_id, "items": _rows(payload)})
