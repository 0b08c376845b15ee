"""Generate parallel cucumber runner classes from feature files."""

from .config import GeneratorConfig, apply_cucumber_options, load_config
from .generation import RunnerGenerator, RunnerSpec, generate_runners
from .utils.errors import Err, GeneratorError

__all__ = [
    "Err",
    "GeneratorConfig",
    "GeneratorError",
    "RunnerGenerator",
    "RunnerSpec",
    "apply_cucumber_options",
    "generate_runners",
    "load_config",
]
