"""Geographic coordinates and the core records of the transport catalogue."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

__all__ = [
    "Coordinates",
    "compute_distance",
    "Stop",
    "Bus",
    "BusStat",
    "RouteSettings",
    "StopId",
]

_EARTH_RADIUS = 6371000
_DEGREE = 3.1415926535 / 180.0


@dataclass(frozen=True)
class Coordinates:
    """A point on the globe in degrees."""

    lat: float
    lng: float


def compute_distance(from_: Coordinates, to: Coordinates) -> float:
    """Great-circle distance in metres between two points."""
    if from_ == to:
        return 0.0
    cosine = (
        math.sin(from_.lat * _DEGREE) * math.sin(to.lat * _DEGREE)
        + math.cos(from_.lat * _DEGREE)
        * math.cos(to.lat * _DEGREE)
        * math.cos(abs(from_.lng - to.lng) * _DEGREE)
    )
    if not -1.0 <= cosine <= 1.0:
        return math.nan
    return math.acos(cosine) * _EARTH_RADIUS


@dataclass(eq=False)
class Stop:
    """A named stop; stops compare and hash by identity."""

    name: str
    coordinates: Coordinates


@dataclass(eq=False)
class Bus:
    """A bus route through an ordered list of stops."""

    name: str
    stops: list[Stop] = field(default_factory=list)
    is_roundtrip: bool = False


@dataclass
class BusStat:
    """Summary figures of a bus route."""

    total_stops: int = 0
    unique_stops: int = 0
    route_length: float = 0.0
    curvature: float = 0.0


@dataclass
class RouteSettings:
    """Waiting time at a stop in minutes and bus speed in km/h."""

    bus_wait_time: float = 0.0
    bus_velocity: float = 0.0


@dataclass
class StopId:
    """Graph vertices for arriving at and departing from a stop."""

    input_id: int = 0
    output_id: int = 0