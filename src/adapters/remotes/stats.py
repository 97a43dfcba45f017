"""StatsRemote: estadísticas de pedidos y visitas (API de WordPress.com)."""

from __future__ import annotations

from datetime import date

from adapters.mappers.stats import OrderStatsMapper, SiteVisitStatsMapper
from adapters.remotes.base import Remote
from adapters.requests import DotcomRequest, HTTPMethod, WordPressAPIVersion
from core.domain.models import OrderStats, SiteVisitStats, StatGranularity


def _stats_parameters(granularity: StatGranularity, latest_date_to_include: date, quantity: int) -> dict[str, str]:
    return {
        "unit": granularity.value,
        "date": granularity.format_date(latest_date_to_include),
        "quantity": str(quantity),
    }


class StatsRemote(Remote):
    async def load_order_stats(
        self,
        site_id: int,
        granularity: StatGranularity,
        latest_date_to_include: date,
        quantity: int,
    ) -> OrderStats:
        request = DotcomRequest(
            WordPressAPIVersion.MARK1_1,
            HTTPMethod.GET,
            f"sites/{site_id}/stats/orders/",
            _stats_parameters(granularity, latest_date_to_include, quantity),
        )
        return await self.enqueue(request, OrderStatsMapper(site_id=site_id))

    async def load_site_visit_stats(
        self,
        site_id: int,
        granularity: StatGranularity,
        latest_date_to_include: date,
        quantity: int,
    ) -> SiteVisitStats:
        parameters = _stats_parameters(granularity, latest_date_to_include, quantity)
        parameters["stat_fields"] = "visitors"
        request = DotcomRequest(
            WordPressAPIVersion.MARK1_1,
            HTTPMethod.GET,
            f"sites/{site_id}/stats/visits/",
            parameters,
        )
        return await self.enqueue(request, SiteVisitStatsMapper(site_id=site_id))
