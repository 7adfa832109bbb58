"""Base configurations for the supported brands."""

from web_agent.domain.brands.registry import BrandId
from web_agent.domain.prompts.base_configs.base import BrandBaseConfig
from web_agent.domain.prompts.base_configs.bcon import BconBaseConfig
from web_agent.domain.prompts.base_configs.master import MasterBaseConfig
from web_agent.domain.prompts.base_configs.proxe import ProxeBaseConfig
from web_agent.domain.prompts.base_configs.windchasers import WindchasersBaseConfig

# Registry of available base configs by brand
BASE_CONFIG_REGISTRY: dict[BrandId, type[BrandBaseConfig]] = {
    BrandId.MASTER: MasterBaseConfig,
    BrandId.PROXE: ProxeBaseConfig,
    BrandId.WINDCHASERS: WindchasersBaseConfig,
    BrandId.BCON: BconBaseConfig,
}


def get_base_config(brand: BrandId) -> type[BrandBaseConfig]:
    """Get the base config class for a brand."""
    return BASE_CONFIG_REGISTRY[BrandId(brand)]


__all__ = [
    "BrandBaseConfig",
    "BconBaseConfig",
    "MasterBaseConfig",
    "ProxeBaseConfig",
    "WindchasersBaseConfig",
    "BASE_CONFIG_REGISTRY",
    "get_base_config",
]
