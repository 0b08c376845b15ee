from .settings import GeneratorConfig
from .loader import load_config, parse_config_mapping
from .cucumber_options import apply_cucumber_options, parse_cucumber_options

__all__ = [
    "GeneratorConfig",
    "load_config",
    "parse_config_mapping",
    "apply_cucumber_options",
    "parse_cucumber_options",
]
