from .schema import ANIMATION_DURATION_MS, BurstConfig, IconLayout, ViewConfig
from .loader import dump_config, flatten_config, load_config

__all__ = [
    "ANIMATION_DURATION_MS",
    "BurstConfig",
    "IconLayout",
    "ViewConfig",
    "dump_config",
    "flatten_config",
    "load_config",
]
