"""Remotes (un accesor por familia de recursos del backend).

Todos heredan de `adapters.remotes.base.Remote` y reciben el `Network` por
constructor.
"""

from adapters.remotes.base import Remote
from adapters.remotes.orders import OrdersRemote
from adapters.remotes.products import ProductsRemote
from adapters.remotes.shipments import ShipmentsRemote
from adapters.remotes.stats import StatsRemote

__all__ = [
	"OrdersRemote",
	"ProductsRemote",
	"Remote",
	"ShipmentsRemote",
	"StatsRemote",
]
