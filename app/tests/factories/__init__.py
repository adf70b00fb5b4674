"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    FakeFetcher,
    make_bundle,
    make_missing_params,
    make_translation_key,
)

__all__ = [
    "FakeFetcher",
    "make_bundle",
    "make_missing_params",
    "make_translation_key",
]
