"""Abstract repository for dashboard metrics."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.dashboard import DashboardStats


class DashboardRepository(ABC):

    @abstractmethod
    def get_stats(self) -> DashboardStats:
        """Return the consolidated inventory and sales metrics."""
