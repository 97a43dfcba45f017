"""Resumen de un periodo del dashboard (visitas, pedidos, ingresos)."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import date, datetime, timezone

import structlog

from adapters.remotes.stats import StatsRemote
from core.domain.models import OrderStats, SiteVisitStats, StatGranularity
from core.services.order_stats import currency_symbol, friendly_number

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PeriodSummary:
    granularity: StatGranularity
    visitors: int
    orders: int
    revenue: str
    updated_at: datetime

    @property
    def title(self) -> str:
        return self.granularity.pluralized

    @property
    def updated_label(self) -> str:
        return f"Updated {self.updated_at.strftime('%b %d, %Y %H:%M')}."


def summarize_period(
    *,
    granularity: StatGranularity,
    order_stats: OrderStats | None,
    site_stats: SiteVisitStats | None,
    updated_at: datetime | None = None,
) -> PeriodSummary:
    """Valores mostrados en la tarjeta del periodo; datos ausentes cuentan como 0."""

    orders = order_stats.total_orders if order_stats else 0
    symbol = currency_symbol(order_stats) if order_stats else ""
    gross = order_stats.total_gross_sales if order_stats else 0.0
    visitors = site_stats.total_visitors if site_stats else 0
    return PeriodSummary(
        granularity=granularity,
        visitors=visitors,
        orders=orders,
        revenue=f"{symbol}{friendly_number(gross)}",
        updated_at=updated_at or datetime.now(timezone.utc),
    )


async def load_period_summary(
    stats_remote: StatsRemote,
    *,
    site_id: int,
    granularity: StatGranularity,
    today: date,
    quantity: int = 1,
) -> PeriodSummary:
    """Carga stats de pedidos y visitas en paralelo y compone el resumen.

    Si cualquiera de las dos llamadas falla, se propaga su `RemoteError`.
    """

    logger.debug("period_summary.load", site_id=site_id, granularity=granularity.value)
    order_stats, site_stats = await asyncio.gather(
        stats_remote.load_order_stats(site_id, granularity, today, quantity),
        stats_remote.load_site_visit_stats(site_id, granularity, today, quantity),
    )
    return summarize_period(
        granularity=granularity,
        order_stats=order_stats,
        site_stats=site_stats,
    )
