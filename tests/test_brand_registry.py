"""Tests for brand registry resolution."""

import pytest
from pydantic import ValidationError

from web_agent.domain.brands.definitions import BRAND_CONFIGURATIONS
from web_agent.domain.brands.registry import (
    BrandConfiguration,
    BrandId,
    BrandRegistry,
)


class TestBrandRegistry:
    """Test cases for resolve() and its fallback."""

    def test_all_brands_registered(self, registry):
        """Every BrandId has a configuration."""
        assert sorted(registry.brands()) == sorted(b.value for b in BrandId)
        assert len(registry) == 4

    def test_resolve_is_case_insensitive(self, registry):
        """MASTER, Master and master resolve to the same configuration."""
        assert registry.resolve("MASTER") == registry.resolve("master")
        assert registry.resolve("Master").brand == BrandId.MASTER
        assert registry.resolve("WindChasers").brand == BrandId.WINDCHASERS
        assert registry.resolve("BCON").name == "BCON Club"

    @pytest.mark.parametrize("key", ["master", "proxe", "windchasers", "bcon", "unknown-brand-xyz", "ÄÖ", ""])
    def test_resolve_matches_lowercased_key(self, registry, key):
        """resolve(s) == resolve(s.lower()) for arbitrary strings."""
        assert registry.resolve(key) == registry.resolve(key.lower())
        assert registry.resolve(key.upper()) == registry.resolve(key.lower())

    def test_unknown_brand_falls_back_to_master(self, registry):
        """Unknown keys resolve to the default (Master) configuration."""
        config = registry.resolve("unknown-brand-xyz")
        assert config.brand == BrandId.MASTER
        assert config is registry.default

    @pytest.mark.parametrize("key", ["", " ", "nope", "master2", "PROXE-", "windchaser", "🚀"])
    def test_fallback_is_stable(self, registry, key):
        """Every unknown key yields the same fallback configuration."""
        assert registry.resolve(key) is registry.resolve("unknown-brand-xyz")

    @pytest.mark.parametrize("key", [" proxe ", "proxe\n", " MASTER"])
    def test_surrounding_whitespace_is_not_stripped(self, registry, key):
        """Only case is normalized; padded keys are unknown and fall back."""
        assert registry.resolve(key) is registry.resolve("unknown-brand-xyz")
        assert key not in registry

    def test_get_has_no_fallback(self, registry):
        """get() returns None for unknown keys."""
        assert registry.get("unknown") is None
        assert registry.get("BCON").brand == BrandId.BCON

    def test_contains(self, registry):
        """Membership is case-insensitive and rejects non-strings."""
        assert "Windchasers" in registry
        assert "nope" not in registry
        assert 42 not in registry

    def test_prompt_points_at_own_brand(self, registry):
        """Each shipped brand assembles with its own prompt config."""
        for key in registry.brands():
            config = registry.resolve(key)
            assert config.prompt == config.brand


class TestRegistryConstruction:
    """Test cases for building registries."""

    def test_custom_default_brand(self):
        """The default brand can be changed at construction time."""
        registry = BrandRegistry(BRAND_CONFIGURATIONS, default_brand="Windchasers")
        assert registry.resolve("unknown").brand == BrandId.WINDCHASERS

    def test_unknown_default_brand_rejected(self):
        """An unknown default brand is a startup error."""
        with pytest.raises(ValueError, match="Unknown default brand"):
            BrandRegistry(BRAND_CONFIGURATIONS, default_brand="acme")

    def test_table_is_read_only(self, registry):
        """The underlying mapping cannot be mutated."""
        with pytest.raises(TypeError):
            registry._table["acme"] = registry.default

    def test_configuration_is_frozen(self, registry):
        """Brand configurations are immutable."""
        config = registry.resolve("bcon")
        with pytest.raises(ValidationError):
            config.name = "Other"

    def test_configuration_rejects_unknown_brand_id(self):
        """BrandConfiguration only accepts known brand ids."""
        with pytest.raises(ValueError):
            BrandConfiguration(
                brand="acme",
                name="Acme",
                prompt="acme",
                theme="acme",
                primary_color="#000000",
            )
