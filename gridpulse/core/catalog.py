from __future__ import annotations
from typing import Dict, List, Optional, Sequence

from .types import City
from ..exceptions import NotFound

CITIES: Sequence[City] = (
    City(id="nyc", name="New York", region="NY", tz="America/New_York"),
    City(id="chi", name="Chicago", region="IL", tz="America/Chicago"),
    City(id="la", name="Los Angeles", region="CA", tz="America/Los_Angeles"),
    City(id="hou", name="Houston", region="TX", tz="America/Chicago"),
    City(id="phx", name="Phoenix", region="AZ", tz="America/Phoenix"),
    City(id="phi", name="Philadelphia", region="PA", tz="America/New_York"),
    City(id="san", name="San Antonio", region="TX", tz="America/Chicago"),
    City(id="sd", name="San Diego", region="CA", tz="America/Los_Angeles"),
    City(id="dal", name="Dallas", region="TX", tz="America/Chicago"),
    City(id="sj", name="San Jose", region="CA", tz="America/Los_Angeles"),
)


class CityCatalog:
    """Static, read-only lookup of supported cities keyed by id."""

    def __init__(self, cities: Sequence[City] = CITIES):
        self._cities: tuple[City, ...] = tuple(cities)
        self._by_id: Dict[str, City] = {c.id: c for c in self._cities}

    def resolve(self, city_id: str) -> Optional[City]:
        """Return the City, or None for an unknown id."""
        return self._by_id.get(city_id)

    def require(self, city_id: str) -> City:
        city = self.resolve(city_id)
        if city is None:
            raise NotFound(
                f"Unknown city {city_id!r}. Available cities: {', '.join(self._by_id)}"
            )
        return city

    def list(self) -> List[City]:
        return list(self._cities)

    def __contains__(self, city_id: object) -> bool:
        return city_id in self._by_id

    def __len__(self) -> int:
        return len(self._cities)


catalog = CityCatalog()


def resolve(city_id: str) -> Optional[City]:
    return catalog.resolve(city_id)


def list_cities() -> List[City]:
    return catalog.list()


def tz_for(city_id: str, default: str) -> str:
    """Time zone of a known city, else `default`."""
    city = catalog.resolve(city_id)
    return city.tz if city is not None else default
