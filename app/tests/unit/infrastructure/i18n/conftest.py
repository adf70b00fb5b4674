"""Feature-level fixtures for i18n system tests.

Provides fetchers, resolvers and YAML translation directories for lazy
namespace loading scenarios.
"""

import pytest
import yaml

from infrastructure.i18n import MissingKeyResolver, TemplateInterpolator
from tests.factories.i18n import FakeFetcher, make_bundle


@pytest.fixture
def sample_bundles():
    """Bundles keyed by (language, namespace)."""
    return {
        ("en", "core"): make_bundle("core", {"firstname": "Hello {{name}}", "lastname": "Last name"}),
        ("fr", "core"): make_bundle("core", {"firstname": "Bonjour {{name}}", "lastname": "Nom"}),
        ("en", "validations"): make_bundle("validations", {"min_length": "At least {{min}}"}),
        ("en", "admin_module"): make_bundle(
            "admin_module",
            {"configuration.sub": "Flat sub", "settings": {"title": "Nested title"}},
        ),
    }


@pytest.fixture
def fetcher(sample_bundles):
    """Fetcher that answers immediately."""
    return FakeFetcher(bundles=sample_bundles)


@pytest.fixture
def blocked_fetcher(sample_bundles):
    """Fetcher that waits for release() before answering."""
    return FakeFetcher(bundles=sample_bundles, blocked=True)


@pytest.fixture
def resolver(fetcher, registry):
    """Resolver over the immediate fetcher."""
    return MissingKeyResolver(fetcher, registry, interpolator=TemplateInterpolator())


@pytest.fixture
def blocked_resolver(blocked_fetcher, registry):
    """Resolver over the blocked fetcher."""
    return MissingKeyResolver(blocked_fetcher, registry)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - core.en.yml
    - core.fr.yml
    - validations.en.yml
    """
    en_core = {
        "core": {
            "firstname": "Hello {{name}}",
            "lastname": "Last name",
        }
    }
    with open(tmp_path / "core.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_core, f)

    fr_core = {
        "core": {
            "firstname": "Bonjour {{name}}",
            "lastname": "Nom de famille",
        }
    }
    with open(tmp_path / "core.fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr_core, f, allow_unicode=True)

    en_validations = {
        "validations": {
            "min_length": "Must be at least {{min}} characters",
        }
    }
    with open(tmp_path / "validations.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_validations, f)

    return tmp_path
