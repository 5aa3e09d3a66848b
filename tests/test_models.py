"""Tests for the DeepSeek model catalog."""

from dataclasses import replace

import pytest

from deepseek_catalog.exceptions import CatalogValidationError, UnknownModelError
from deepseek_catalog.models import (
    ALL_MODELS,
    DEEPSEEK_BASE_URL,
    DEEPSEEK_DEFAULT_COST,
    DEEPSEEK_DEFAULT_MODEL_ID,
    DEEPSEEK_DEFAULT_MODEL_REF,
    DEEPSEEK_MODEL_CATALOG,
    DEEPSEEK_PROVIDER,
    MODELS_BY_ID,
    CatalogEntry,
    DeepSeek,
    get_model,
    validate_catalog,
)
from deepseek_catalog.types import ModelCost


class TestCatalogEntry:
    """Tests for the CatalogEntry dataclass."""

    def test_entry_creation(self):
        entry = CatalogEntry(
            id="test-model",
            name="Test Model",
            reasoning=False,
            input=("text",),
            context_window=8192,
            max_tokens=4096,
        )
        assert entry.id == "test-model"
        assert entry.name == "Test Model"
        assert entry.reasoning is False
        assert entry.input == ("text",)
        assert entry.context_window == 8192
        assert entry.max_tokens == 4096

    def test_entry_immutable(self):
        with pytest.raises((AttributeError, TypeError)):
            DeepSeek.CHAT.max_tokens = 1


class TestCatalogConstants:
    """Tests for the provider-level constants."""

    def test_base_url(self):
        assert DEEPSEEK_BASE_URL == "https://api.deepseek.com"

    def test_default_model_id(self):
        assert DEEPSEEK_DEFAULT_MODEL_ID == "deepseek-chat"

    def test_default_model_ref(self):
        assert DEEPSEEK_PROVIDER == "deepseek"
        assert DEEPSEEK_DEFAULT_MODEL_REF == "deepseek/deepseek-chat"

    def test_default_model_is_in_catalog(self):
        assert DEEPSEEK_DEFAULT_MODEL_ID in MODELS_BY_ID

    def test_default_cost_is_zero(self):
        assert DEEPSEEK_DEFAULT_COST == ModelCost(input=0, output=0, cache_read=0, cache_write=0)


class TestCatalogContents:
    """Tests for the two DeepSeek entries."""

    def test_catalog_order(self):
        assert [entry.id for entry in DEEPSEEK_MODEL_CATALOG] == [
            "deepseek-chat",
            "deepseek-reasoner",
        ]

    def test_chat(self):
        model = DeepSeek.CHAT
        assert model.id == "deepseek-chat"
        assert model.name == "DeepSeek Chat"
        assert model.reasoning is False
        assert model.input == ("text",)
        assert model.context_window == 64000
        assert model.max_tokens == 8192

    def test_reasoner(self):
        model = DeepSeek.REASONER
        assert model.id == "deepseek-reasoner"
        assert model.name == "DeepSeek Reasoner (思考模式)"
        assert model.reasoning is True
        assert model.input == ("text",)
        assert model.context_window == 64000
        assert model.max_tokens == 8192

    def test_catalog_is_tuple(self):
        assert isinstance(DEEPSEEK_MODEL_CATALOG, tuple)


class TestCatalogInvariants:
    """Invariants every catalog entry must satisfy."""

    def test_unique_ids(self):
        ids = [entry.id for entry in DEEPSEEK_MODEL_CATALOG]
        assert len(ids) == len(set(ids))

    @pytest.mark.parametrize("entry", DEEPSEEK_MODEL_CATALOG, ids=lambda e: e.id)
    def test_max_tokens_fit_context(self, entry):
        assert entry.context_window >= entry.max_tokens

    @pytest.mark.parametrize("entry", DEEPSEEK_MODEL_CATALOG, ids=lambda e: e.id)
    def test_numeric_fields_non_negative(self, entry):
        assert entry.context_window >= 0
        assert entry.max_tokens >= 0

    def test_cost_fields_non_negative(self):
        for value in DEEPSEEK_DEFAULT_COST.to_dict().values():
            assert value >= 0

    def test_shipped_catalog_validates(self):
        validate_catalog(DEEPSEEK_MODEL_CATALOG)


class TestValidateCatalog:
    """Tests for validate_catalog() rejecting malformed catalogs."""

    def test_duplicate_id(self):
        with pytest.raises(CatalogValidationError) as exc_info:
            validate_catalog([DeepSeek.CHAT, DeepSeek.CHAT])
        assert exc_info.value.entry_id == "deepseek-chat"
        assert exc_info.value.field == "id"
        assert "duplicate" in exc_info.value.issue

    def test_empty_id(self):
        with pytest.raises(CatalogValidationError) as exc_info:
            validate_catalog([replace(DeepSeek.CHAT, id="")])
        assert exc_info.value.field == "id"

    def test_max_tokens_exceeds_context(self):
        bad = replace(DeepSeek.CHAT, max_tokens=128000)
        with pytest.raises(CatalogValidationError) as exc_info:
            validate_catalog([bad])
        assert exc_info.value.field == "max_tokens"
        assert "128000" in str(exc_info.value)

    def test_negative_context_window(self):
        bad = replace(DeepSeek.CHAT, context_window=-1, max_tokens=-5)
        with pytest.raises(CatalogValidationError) as exc_info:
            validate_catalog([bad])
        assert exc_info.value.field == "context_window"

    @pytest.mark.parametrize("field", ["context_window", "max_tokens"])
    def test_nan_limit_rejected(self, field):
        bad = replace(DeepSeek.CHAT, **{field: float("nan")})
        with pytest.raises(CatalogValidationError) as exc_info:
            validate_catalog([bad])
        assert exc_info.value.field == field
        assert "nan" in exc_info.value.issue

    def test_empty_input(self):
        with pytest.raises(CatalogValidationError) as exc_info:
            validate_catalog([replace(DeepSeek.CHAT, input=())])
        assert exc_info.value.field == "input"

    def test_empty_catalog_is_valid(self):
        validate_catalog([])


class TestLookups:
    """Tests for ALL_MODELS, MODELS_BY_ID and get_model()."""

    def test_all_models_matches_catalog(self):
        assert ALL_MODELS == list(DEEPSEEK_MODEL_CATALOG)

    def test_models_by_id_count(self):
        assert len(MODELS_BY_ID) == len(ALL_MODELS)

    def test_get_model(self):
        assert get_model("deepseek-reasoner") is DeepSeek.REASONER

    def test_get_model_unknown_suggests(self):
        with pytest.raises(UnknownModelError) as exc_info:
            get_model("deepseek-chatt")
        assert exc_info.value.model_id == "deepseek-chatt"
        assert "deepseek-chat" in exc_info.value.suggestions

    def test_get_model_unknown_is_key_error(self):
        with pytest.raises(KeyError):
            get_model("gpt-4o")
