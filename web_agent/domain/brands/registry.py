"""Brand registry: resolves a brand key to its configuration."""

from collections.abc import Iterable, Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class BrandId(str, Enum):
    """Brands served by this deployment."""

    MASTER = "master"
    PROXE = "proxe"
    WINDCHASERS = "windchasers"
    BCON = "bcon"


class BrandConfiguration(BaseModel):
    """Static configuration for one branded chat widget."""

    model_config = ConfigDict(frozen=True)

    brand: BrandId
    name: str
    prompt: BrandId  # Which prompt base config assembles this brand's system prompt
    theme: str
    primary_color: str
    avatar: str | None = None
    quick_buttons: tuple[str, ...] = ()
    explore_buttons: tuple[str, ...] = ()
    show_quick_buttons: bool = True
    show_follow_up_buttons: bool = True
    max_follow_ups: int = Field(default=3, ge=0)


class BrandRegistry:
    """Read-only mapping of brand key to configuration with a default fallback.

    Lookup is total: any string resolves to a configuration. Keys are matched
    case-insensitively; unknown keys resolve to the default brand.
    """

    def __init__(
        self,
        configurations: Iterable[BrandConfiguration],
        default_brand: str = BrandId.MASTER.value,
    ) -> None:
        table = {config.brand.value: config for config in configurations}
        default_key = _normalize(default_brand)
        if default_key not in table:
            raise ValueError(
                f"Unknown default brand: {default_brand}. Available: {sorted(table)}"
            )
        self._table: Mapping[str, BrandConfiguration] = MappingProxyType(table)
        self._default = table[default_key]

    @property
    def default(self) -> BrandConfiguration:
        """Configuration returned for unknown brand keys."""
        return self._default

    def resolve(self, brand_key: str) -> BrandConfiguration:
        """Resolve a brand key to its configuration, falling back to the default."""
        return self._table.get(_normalize(brand_key), self._default)

    def get(self, brand_key: str) -> BrandConfiguration | None:
        """Exact (case-insensitive) lookup without fallback."""
        return self._table.get(_normalize(brand_key))

    def brands(self) -> list[str]:
        """Registered brand keys."""
        return list(self._table)

    def __contains__(self, brand_key: object) -> bool:
        return isinstance(brand_key, str) and _normalize(brand_key) in self._table

    def __len__(self) -> int:
        return len(self._table)


def _normalize(brand_key: str) -> str:
    return brand_key.lower()


def build_brand_registry(default_brand: str = BrandId.MASTER.value) -> BrandRegistry:
    """Build the registry from the static brand definitions."""
    from web_agent.domain.brands.definitions import BRAND_CONFIGURATIONS

    return BrandRegistry(BRAND_CONFIGURATIONS, default_brand=default_brand)
