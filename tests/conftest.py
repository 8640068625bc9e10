# topmark:header:start
#
#   project      : OutFormat
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the OutFormat test suite.

This file sets up global fixtures, customizes the logging configuration for
test runs and provides small factories for synthetic drivers and registries.

Notes:
    Resolution functions take an explicit registry snapshot. Tests should
    build the smallest registry that exercises the behavior under test with
    `make_driver` / `make_registry` rather than relying on the built-in
    catalog, unless the catalog itself is what is being tested.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from outformat.config import logging
from outformat.config.options import ConfigOptions
from outformat.drivers.base import Driver, DriverCapabilities
from outformat.drivers.registry import DriverRegistry

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_outformat_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure OutFormat's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    OUTFORMAT_LOG_LEVEL, OUTFORMAT_DEBUG or OUTFORMAT_REGISTRY in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("OUTFORMAT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("OUTFORMAT_DEBUG", raising=False)
    monkeypatch.delenv("OUTFORMAT_REGISTRY", raising=False)


@pytest.fixture(autouse=True)
def clean_config_options() -> Iterator[None]:
    """Start and end every test with an empty config option store."""
    ConfigOptions.clear()
    yield
    ConfigOptions.clear()


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_driver(
    name: str,
    *extensions: str,
    create: bool = True,
    create_copy: bool = False,
    raster: bool = True,
    vector: bool = False,
    vector_translate_from: bool = False,
    prefix: str | None = None,
) -> Driver:
    """Return a `Driver` for tests; by default a raster driver that can create.

    Args:
        name (str): Driver short name.
        *extensions (str): Extensions the driver writes.
        create (bool): Create support.
        create_copy (bool): Create-copy support.
        raster (bool): Raster support.
        vector (bool): Vector support.
        vector_translate_from (bool): Vector-translate support.
        prefix (str | None): Connection prefix.

    Returns:
        Driver: The driver.
    """
    return Driver(
        name=name,
        capabilities=DriverCapabilities(
            create=create,
            create_copy=create_copy,
            raster=raster,
            vector=vector,
            vector_translate_from=vector_translate_from,
        ),
        extensions=frozenset(extensions),
        connection_prefix=prefix,
    )


def make_registry(*drivers: Driver) -> DriverRegistry:
    """Return a registry snapshot holding ``drivers`` in the given order."""
    return DriverRegistry(drivers)

