"""Tests for the static city catalog."""

import pytest

from gridpulse.core import catalog
from gridpulse.exceptions import NotFound


def test_list_has_ten_cities_in_order():
    cities = catalog.list_cities()
    assert len(cities) == 10
    assert [c.id for c in cities][:3] == ["nyc", "chi", "la"]
    assert len({c.id for c in cities}) == 10


def test_resolve_known_city():
    city = catalog.resolve("nyc")
    assert city is not None
    assert city.name == "New York"
    assert city.region == "NY"
    assert city.tz == "America/New_York"


def test_resolve_unknown_returns_none():
    """Unknown but well-formed ids are 'no data', not an error."""
    assert catalog.resolve("atlantis") is None
    assert catalog.resolve("") is None


def test_require_raises_not_found():
    with pytest.raises(NotFound):
        catalog.catalog.require("atlantis")
    # NotFound is also a LookupError for generic callers
    with pytest.raises(LookupError):
        catalog.catalog.require("atlantis")


def test_cities_are_immutable():
    city = catalog.resolve("chi")
    with pytest.raises(Exception):
        city.name = "Gotham"


def test_tz_for_falls_back_to_default():
    assert catalog.tz_for("la", "UTC") == "America/Los_Angeles"
    assert catalog.tz_for("atlantis", "UTC") == "UTC"


def test_membership_and_size():
    assert "sd" in catalog.catalog
    assert "atlantis" not in catalog.catalog
    assert len(catalog.catalog) == 10
