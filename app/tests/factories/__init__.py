"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_lingua_settings,
    make_locale_signals,
    make_resource_bundle,
    make_resource_store,
)

__all__ = [
    "make_lingua_settings",
    "make_locale_signals",
    "make_resource_bundle",
    "make_resource_store",
]
