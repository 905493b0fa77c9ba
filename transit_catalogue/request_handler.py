"""Read-only queries over a transport catalogue."""

from __future__ import annotations

from .catalogue import TransportCatalogue
from .domain import Bus, BusStat

__all__ = ["RequestHandler"]


class RequestHandler:
    """Answers questions about buses and stops by name."""

    def __init__(self, db: TransportCatalogue) -> None:
        self._db = db

    def get_bus_stat(self, bus_name: str) -> BusStat:
        """Statistics of a bus; all zero when the bus is unknown."""
        return self._db.bus_stat(bus_name)

    def get_buses_by_stop(self, stop_name: str) -> frozenset[Bus]:
        """Buses passing through the named stop; empty if none or unknown."""
        return self._db.buses_by_stop(self._db.get_stop(stop_name))