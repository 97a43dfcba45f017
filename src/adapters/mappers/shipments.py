"""Mappers de shipment trackings."""

from __future__ import annotations

from typing import Any

from adapters.mappers._envelope import expect_dict, expect_list, unwrap_data
from core.domain.models import (
    ShipmentTracking,
    ShipmentTrackingProvider,
    ShipmentTrackingProviderGroup,
)


def _tracking(raw: Any, *, site_id: int, order_id: int) -> ShipmentTracking:
    data = expect_dict(raw, "shipment tracking")
    return ShipmentTracking.model_validate({**data, "site_id": site_id, "order_id": order_id})


class ShipmentTrackingListMapper:
    """Lista de trackings de un pedido, en el orden de la respuesta."""

    def __init__(self, *, site_id: int, order_id: int) -> None:
        self.site_id = site_id
        self.order_id = order_id

    def map(self, response: bytes) -> list[ShipmentTracking]:
        items = expect_list(unwrap_data(response), "shipment trackings")
        return [_tracking(item, site_id=self.site_id, order_id=self.order_id) for item in items]


class NewShipmentTrackingMapper:
    """Tracking único (creado o eliminado)."""

    def __init__(self, *, site_id: int, order_id: int) -> None:
        self.site_id = site_id
        self.order_id = order_id

    def map(self, response: bytes) -> ShipmentTracking:
        return _tracking(unwrap_data(response), site_id=self.site_id, order_id=self.order_id)


class ShipmentTrackingProviderListMapper:
    """`{"<grupo>": {"<transportista>": "<url>"}}` -> grupos ordenados."""

    def __init__(self, *, site_id: int) -> None:
        self.site_id = site_id

    def map(self, response: bytes) -> list[ShipmentTrackingProviderGroup]:
        groups = expect_dict(unwrap_data(response), "tracking providers")
        out: list[ShipmentTrackingProviderGroup] = []
        for group_name, raw_providers in groups.items():
            providers = expect_dict(raw_providers, f"providers of {group_name!r}")
            out.append(
                ShipmentTrackingProviderGroup(
                    site_id=self.site_id,
                    name=group_name,
                    providers=[
                        ShipmentTrackingProvider(site_id=self.site_id, name=name, url=url)
                        for name, url in providers.items()
                    ],
                )
            )
        return out
