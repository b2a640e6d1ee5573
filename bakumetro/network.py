"""Static description of the metro lines and the distances between stations."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Route:
    """One metro line: its ordered stops, its hub station and its capacity."""

    stops: tuple[str, ...]
    hub: str
    platform_count: int
    track_count: int
    is_shuttle: bool = False


_ROUTES: dict[str, Route] = {
    "Red": Route(
        stops=(
            "Icheri Sheher", "Sahil", "28 May", "Ganjlik", "Nariman Narimanov",
            "Bakmil", "Ulduz", "Koroglu", "Kara Karaev", "Neftchilar",
            "Khalglar Dostlugu", "Ahmedli", "Azi Aslanov",
        ),
        hub="Bakmil",
        platform_count=13,
        track_count=12,
    ),
    "Green": Route(
        stops=(
            "Darnagul", "Azadlig Prospekti", "Nasimi", "Memar Ajami", "20 January",
            "Inshaatchilar", "Elmlar Akademiyasy", "Nizami", "28 May",
            "Ganjlik", "Nariman Narimanov", "Bakmil", "Ulduz", "Koroglu",
            "Kara Karaev", "Neftchilar", "Khalglar Dostlugu", "Ahmedli", "Azi Aslanov",
        ),
        hub="Bakmil",
        platform_count=19,
        track_count=18,
    ),
    "Purple": Route(
        stops=("Khojasan", "Avtovagzal", "Memar Acemi 2", "8 Noyabr"),
        hub="Khojasan",
        platform_count=4,
        track_count=3,
    ),
    "Light Green": Route(
        stops=("Jafar Jabbarly", "Hatai"),
        hub="Hatai",
        platform_count=2,
        track_count=1,
        is_shuttle=True,
    ),
}

# Each segment is listed once; lookups work in both directions.
_DISTANCES: dict[tuple[str, str], float] = {
    ("Icheri Sheher", "Sahil"): 0.9,
    ("Sahil", "28 May"): 0.5,
    ("28 May", "Ganjlik"): 1.6,
    ("Ganjlik", "Nariman Narimanov"): 2.1,
    ("Nariman Narimanov", "Bakmil"): 1.3,
    ("Bakmil", "Ulduz"): 1.9,
    ("Ulduz", "Koroglu"): 2.3,
    ("Koroglu", "Kara Karaev"): 1.8,
    ("Kara Karaev", "Neftchilar"): 1.2,
    ("Neftchilar", "Khalglar Dostlugu"): 1.1,
    ("Khalglar Dostlugu", "Ahmedli"): 1.6,
    ("Ahmedli", "Azi Aslanov"): 1.3,
    ("Nizami", "Elmlar Akademiyasy"): 1.2,
    ("Elmlar Akademiyasy", "Inshaatchilar"): 0.9,
    ("Inshaatchilar", "20 January"): 1.3,
    ("20 January", "Memar Ajami"): 1.8,
    ("Memar Ajami", "Nasimi"): 2.66,
    ("Nasimi", "Azadlig Prospekti"): 2.1,
    ("Azadlig Prospekti", "Darnagul"): 1.1,
    ("28 May", "Nizami"): 1.7,
    ("Khojasan", "Avtovagzal"): 2.0,
    ("Avtovagzal", "Memar Acemi 2"): 2.0,
    ("Memar Acemi 2", "8 Noyabr"): 1.5,
    ("Jafar Jabbarly", "Hatai"): 1.0,
}


class TransitNetwork:
    """The metro network: its lines and the track lengths between stations."""

    def __init__(self) -> None:
        self._routes = dict(_ROUTES)
        self._distances = dict(_DISTANCES)

    @property
    def routes(self) -> Mapping[str, Route]:
        """Read-only mapping of line name to route."""
        return MappingProxyType(self._routes)

    def route(self, name: str) -> Route:
        """Return the route called ``name``; raise KeyError if there is none."""
        try:
            return self._routes[name]
        except KeyError:
            raise KeyError(f"Route {name} not found") from None

    def distance_between(self, start: str, end: str) -> float:
        """Kilometres between two adjacent stations, or 0.0 if unknown."""
        distance = self._distances.get((start, end))
        if distance is None:
            distance = self._distances.get((end, start), 0.0)
        return distance