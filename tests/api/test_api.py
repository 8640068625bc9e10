# topmark:header:start
#
#   project      : OutFormat
#   file         : test_api.py
#   file_relpath : tests/api/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public API facade."""

from __future__ import annotations

import pytest

from outformat import api
from outformat.core.diagnostics import CollectingSink
from outformat.drivers.registry import DriverRegistry
from tests.conftest import make_driver, make_registry


def test_public_names() -> None:
    """The facade exports its stable surface."""
    assert set(api.__all__) == {
        "DriverRegistry",
        "DriverResolutionError",
        "resolve_drivers",
        "resolve_raster_driver",
    }


def test_defaults_to_builtin_catalog() -> None:
    """Without a registry the built-in catalog is used."""
    assert api.resolve_drivers("out.nc", raster=True) == ("netCDF", "GMT")
    assert api.resolve_raster_driver("out.tif") == "GTiff"
    assert api.resolve_raster_driver("noext") == "GTiff"


def test_explicit_registry() -> None:
    """A caller-supplied registry replaces the catalog entirely."""
    reg = make_registry(make_driver("DriverA", "foo"))
    sink = CollectingSink()

    assert api.resolve_drivers("out.foo", raster=True, registry=reg) == ("DriverA",)
    assert api.resolve_raster_driver("out.foo", registry=reg, sink=sink) == "DriverA"
    assert api.resolve_drivers("out.tif", raster=True, registry=reg) == ()
    assert sink.debug_messages == ("Using DriverA driver",)


def test_empty_registry_is_not_replaced_by_catalog() -> None:
    """An empty registry is honored, not mistaken for a missing one."""
    with pytest.raises(api.DriverResolutionError):
        api.resolve_raster_driver("out.tif", registry=DriverRegistry())


def test_vector_resolution() -> None:
    """Vector candidates come from the same entry point."""
    assert api.resolve_drivers("roads.shp.zip", vector=True) == ("ESRI Shapefile",)
    assert api.resolve_drivers("out.gpkg", raster=True, vector=True) == ("GPKG",)
