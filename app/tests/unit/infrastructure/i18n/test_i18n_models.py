"""Tests for infrastructure.i18n.models module."""

import pytest

from infrastructure.i18n.errors import MalformedKeyError
from infrastructure.i18n.models import (
    LoadState,
    LoadStatus,
    MissingTranslationParams,
    TranslationCatalog,
    TranslationKey,
    find_template,
)
from tests.factories.i18n import make_bundle, make_translation_key


@pytest.mark.unit
class TestTranslationKey:
    """Tests for TranslationKey model."""

    def test_translation_key_creation(self):
        """TranslationKey can be created with namespace and message_key."""
        key = TranslationKey(namespace="core", message_key="firstname")
        assert key.namespace == "core"
        assert key.message_key == "firstname"

    def test_translation_key_str_representation(self):
        """__str__() returns the full key path."""
        key = make_translation_key("core", "firstname")
        assert str(key) == "core.firstname"

    def test_from_string_splits_on_first_separator(self):
        """from_string() keeps later separators in the message key."""
        key = TranslationKey.from_string("admin_module.configuration.sub")
        assert key.namespace == "admin_module"
        assert key.message_key == "configuration.sub"

    def test_from_string_round_trips_full_key(self):
        """str() of a parsed key is the original string."""
        assert str(TranslationKey.from_string("admin_module.configuration.sub")) == (
            "admin_module.configuration.sub"
        )

    def test_from_string_custom_separator(self):
        """from_string() honours a custom separator."""
        key = TranslationKey.from_string("core:greeting.formal", separator=":")
        assert key.namespace == "core"
        assert key.message_key == "greeting.formal"
        assert str(key) == "core:greeting.formal"

    @pytest.mark.parametrize("bad_key", ["firstname", "core.", ".firstname", ""])
    def test_from_string_malformed(self, bad_key):
        """from_string() raises MalformedKeyError without a usable split."""
        with pytest.raises(MalformedKeyError):
            TranslationKey.from_string(bad_key)

    def test_malformed_key_is_value_error(self):
        """MalformedKeyError stays catchable as ValueError."""
        with pytest.raises(ValueError):
            TranslationKey.from_string("firstname")

    def test_translation_key_hashable(self):
        """TranslationKey is frozen and hashable."""
        keys = {make_translation_key(), make_translation_key()}
        assert len(keys) == 1

    def test_translation_key_immutable(self):
        """TranslationKey fields cannot be reassigned."""
        key = make_translation_key()
        with pytest.raises(AttributeError):
            key.namespace = "other"  # type: ignore[misc]


@pytest.mark.unit
class TestFindTemplate:
    """Tests for find_template()."""

    def test_flat_lookup(self):
        bundle = make_bundle("core", {"firstname": "Hello"})
        assert find_template(bundle, "core", "firstname") == "Hello"

    def test_flat_key_containing_separator(self):
        bundle = make_bundle("admin_module", {"configuration.sub": "Flat"})
        assert find_template(bundle, "admin_module", "configuration.sub") == "Flat"

    def test_nested_lookup(self):
        bundle = make_bundle("admin_module", {"configuration": {"sub": "Nested"}})
        assert find_template(bundle, "admin_module", "configuration.sub") == "Nested"

    def test_missing_key(self):
        bundle = make_bundle("validations", {"min_length": "x"})
        assert find_template(bundle, "validations", "required_field") is None

    def test_missing_namespace(self):
        assert find_template(make_bundle("core"), "validations", "required_field") is None

    def test_non_string_value(self):
        bundle = make_bundle("admin_module", {"configuration": {"sub": "Nested"}})
        assert find_template(bundle, "admin_module", "configuration") is None

    def test_nested_path_through_string(self):
        bundle = make_bundle("core", {"firstname": "Hello"})
        assert find_template(bundle, "core", "firstname.extra") is None


@pytest.mark.unit
class TestLoadState:
    """Tests for LoadState variants."""

    def test_absent(self):
        state = LoadState.absent()
        assert state.status is LoadStatus.ABSENT
        assert state.is_absent
        assert state.future is None

    def test_loading_carries_future(self):
        marker = object()
        state = LoadState.loading(marker)  # type: ignore[arg-type]
        assert state.is_loading
        assert state.future is marker

    def test_loaded(self):
        state = LoadState.loaded()
        assert state.is_loaded
        assert not state.is_absent
        assert state.future is None


@pytest.mark.unit
class TestTranslationCatalog:
    """Tests for TranslationCatalog model."""

    def test_get_template(self):
        catalog = TranslationCatalog(language="en", messages=make_bundle())
        assert catalog.get_template(make_translation_key()) == "Hello {{name}}"

    def test_merge_adds_namespace(self):
        catalog = TranslationCatalog(language="en", messages=make_bundle("core"))
        catalog.merge(make_bundle("validations", {"min_length": "x"}))
        assert catalog.has_namespace("core")
        assert catalog.has_namespace("validations")

    def test_merge_updates_keys(self):
        catalog = TranslationCatalog(language="en", messages=make_bundle("core"))
        catalog.merge(make_bundle("core", {"firstname": "Hi {{name}}"}))
        assert catalog.messages["core"]["firstname"] == "Hi {{name}}"
        assert catalog.messages["core"]["lastname"] == "Last name"

    def test_replace_drops_other_namespaces(self):
        catalog = TranslationCatalog(language="en", messages=make_bundle("core"))
        catalog.replace(make_bundle("validations", {"min_length": "x"}))
        assert not catalog.has_namespace("core")
        assert catalog.has_namespace("validations")

    def test_merge_rejects_invalid_namespace_without_partial_write(self):
        catalog = TranslationCatalog(language="en", messages=make_bundle("core"))
        before = {ns: dict(messages) for ns, messages in catalog.messages.items()}

        with pytest.raises(ValueError, match="admin_module"):
            catalog.merge({"validations": {"min_length": "x"}, "admin_module": "oops"})

        assert catalog.messages == before

    def test_replace_rejects_invalid_namespace(self):
        catalog = TranslationCatalog(language="en", messages=make_bundle("core"))

        with pytest.raises(ValueError):
            catalog.replace({"core": ["firstname"]})

        assert catalog.has_namespace("core")


@pytest.mark.unit
class TestMissingTranslationParams:
    """Tests for MissingTranslationParams."""

    def test_explicit_language_wins(self, registry):
        params = MissingTranslationParams(key="core.firstname", registry=registry, language="fr")
        assert params.resolve_language() == "fr"

    def test_language_from_registry(self, registry):
        registry.use("de")
        params = MissingTranslationParams(key="core.firstname", registry=registry)
        assert params.resolve_language() == "de"

    def test_no_language_available(self):
        params = MissingTranslationParams(key="core.firstname")
        with pytest.raises(ValueError):
            params.resolve_language()
