"""Brand registry and static brand definitions."""

from web_agent.domain.brands.registry import (
    BrandConfiguration,
    BrandId,
    BrandRegistry,
    build_brand_registry,
)

__all__ = ["BrandConfiguration", "BrandId", "BrandRegistry", "build_brand_registry"]
