"""Mappers de respuesta (cuerpo crudo -> modelos del dominio).

Cada mapper recibe en su constructor los identificadores de contexto que el
JSON no trae (`site_id`, `order_id`) e implementa `core.interfaces.mapper.Mapper`.
"""

from adapters.mappers.orders import OrderListMapper, OrderMapper
from adapters.mappers.products import ProductListMapper, ProductMapper, ProductSkuMapper
from adapters.mappers.shipments import (
	NewShipmentTrackingMapper,
	ShipmentTrackingListMapper,
	ShipmentTrackingProviderListMapper,
)
from adapters.mappers.stats import OrderStatsMapper, SiteVisitStatsMapper

__all__ = [
	"NewShipmentTrackingMapper",
	"OrderListMapper",
	"OrderMapper",
	"OrderStatsMapper",
	"ProductListMapper",
	"ProductMapper",
	"ProductSkuMapper",
	"ShipmentTrackingListMapper",
	"ShipmentTrackingProviderListMapper",
	"SiteVisitStatsMapper",
]
