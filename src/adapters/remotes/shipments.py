"""ShipmentsRemote: endpoints de seguimiento de envíos.

Usa `wc/v2`: el endpoint de shipment trackings no existe en `wc/v3`.
"""

from __future__ import annotations

from adapters.mappers.shipments import (
    NewShipmentTrackingMapper,
    ShipmentTrackingListMapper,
    ShipmentTrackingProviderListMapper,
)
from adapters.remotes.base import Remote
from adapters.requests import HTTPMethod, JetpackRequest, WooAPIVersion
from core.domain.models import ShipmentTracking, ShipmentTrackingProviderGroup

ORDERS_PATH = "orders"
SHIPMENT_PATH = "shipment-trackings"
PROVIDERS_PATH = "providers"


class ParameterKeys:
    CUSTOM_TRACKING_LINK = "custom_tracking_link"
    CUSTOM_TRACKING_PROVIDER = "custom_tracking_provider"
    TRACKING_NUMBER = "tracking_number"
    TRACKING_PROVIDER = "tracking_provider"


def _trackings_path(order_id: int) -> str:
    return f"{ORDERS_PATH}/{order_id}/{SHIPMENT_PATH}/"


class ShipmentsRemote(Remote):
    async def load_shipment_trackings(self, site_id: int, order_id: int) -> list[ShipmentTracking]:
        """Todos los trackings de un pedido."""

        request = JetpackRequest(
            WooAPIVersion.MARK2,
            HTTPMethod.GET,
            site_id,
            _trackings_path(order_id),
        )
        mapper = ShipmentTrackingListMapper(site_id=site_id, order_id=order_id)
        return await self.enqueue(request, mapper)

    async def create_shipment_tracking(
        self,
        site_id: int,
        order_id: int,
        tracking_provider: str,
        tracking_number: str,
    ) -> ShipmentTracking:
        parameters = {
            ParameterKeys.TRACKING_NUMBER: tracking_number,
            ParameterKeys.TRACKING_PROVIDER: tracking_provider,
        }
        request = JetpackRequest(
            WooAPIVersion.MARK2,
            HTTPMethod.POST,
            site_id,
            _trackings_path(order_id),
            parameters,
        )
        mapper = NewShipmentTrackingMapper(site_id=site_id, order_id=order_id)
        return await self.enqueue(request, mapper)

    async def create_shipment_tracking_with_custom_provider(
        self,
        site_id: int,
        order_id: int,
        tracking_provider: str,
        tracking_number: str,
        tracking_link: str,
    ) -> ShipmentTracking:
        """Alta con transportista propio: solo se envían las claves `custom_*`."""

        parameters = {
            ParameterKeys.TRACKING_NUMBER: tracking_number,
            ParameterKeys.CUSTOM_TRACKING_LINK: tracking_link,
            ParameterKeys.CUSTOM_TRACKING_PROVIDER: tracking_provider,
        }
        request = JetpackRequest(
            WooAPIVersion.MARK2,
            HTTPMethod.POST,
            site_id,
            _trackings_path(order_id),
            parameters,
        )
        mapper = NewShipmentTrackingMapper(site_id=site_id, order_id=order_id)
        return await self.enqueue(request, mapper)

    async def delete_shipment_tracking(
        self,
        site_id: int,
        order_id: int,
        tracking_id: str,
    ) -> ShipmentTracking:
        request = JetpackRequest(
            WooAPIVersion.MARK2,
            HTTPMethod.DELETE,
            site_id,
            _trackings_path(order_id) + tracking_id,
        )
        mapper = NewShipmentTrackingMapper(site_id=site_id, order_id=order_id)
        return await self.enqueue(request, mapper)

    async def load_shipment_tracking_provider_groups(
        self,
        site_id: int,
        order_id: int,
    ) -> list[ShipmentTrackingProviderGroup]:
        request = JetpackRequest(
            WooAPIVersion.MARK2,
            HTTPMethod.GET,
            site_id,
            _trackings_path(order_id) + PROVIDERS_PATH,
        )
        mapper = ShipmentTrackingProviderListMapper(site_id=site_id)
        return await self.enqueue(request, mapper)
