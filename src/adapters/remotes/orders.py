"""OrdersRemote: endpoints de pedidos (`wc/v3`)."""

from __future__ import annotations

from adapters.mappers.orders import OrderListMapper, OrderMapper
from adapters.remotes.base import Remote
from adapters.requests import HTTPMethod, JetpackRequest, WooAPIVersion
from core.domain.extensible import OrderStatus
from core.domain.models import Order

ORDERS_PATH = "orders"

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 25
STATUS_ANY = "any"


class OrdersRemote(Remote):
    async def load_all_orders(
        self,
        site_id: int,
        status_key: str | None = None,
        page_number: int = DEFAULT_PAGE_NUMBER,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[Order]:
        """Pedidos de un sitio; sin `status_key` se piden todos los estados."""

        parameters = {
            "page": str(page_number),
            "per_page": str(page_size),
            "status": status_key or STATUS_ANY,
        }
        request = JetpackRequest(WooAPIVersion.MARK3, HTTPMethod.GET, site_id, ORDERS_PATH, parameters)
        return await self.enqueue(request, OrderListMapper(site_id=site_id))

    async def load_order(self, site_id: int, order_id: int) -> Order:
        request = JetpackRequest(WooAPIVersion.MARK3, HTTPMethod.GET, site_id, f"{ORDERS_PATH}/{order_id}")
        return await self.enqueue(request, OrderMapper(site_id=site_id))

    async def update_order_status(self, site_id: int, order_id: int, status: OrderStatus) -> Order:
        request = JetpackRequest(
            WooAPIVersion.MARK3,
            HTTPMethod.POST,
            site_id,
            f"{ORDERS_PATH}/{order_id}",
            {"status": status.raw_value},
        )
        return await self.enqueue(request, OrderMapper(site_id=site_id))
