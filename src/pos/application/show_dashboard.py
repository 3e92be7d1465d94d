"""Application service: dashboard metrics query."""

from __future__ import annotations

from pos.domain.model.dashboard import DashboardStats
from pos.domain.repository.dashboard_repository import DashboardRepository


class GetInventoryStatsHandler:

    def __init__(self, dashboard_repo: DashboardRepository) -> None:
        self._dashboard_repo = dashboard_repo

    def handle(self) -> DashboardStats:
        return self._dashboard_repo.get_stats()
