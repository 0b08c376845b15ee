from .engine import RunnerGenerator, RunnerSpec, generate_runners
from .planner import GenerationPlanner
from .render import RunnerContext, TemplateRenderer, load_template

__all__ = [
    "GenerationPlanner",
    "RunnerContext",
    "RunnerGenerator",
    "RunnerSpec",
    "TemplateRenderer",
    "generate_runners",
    "load_template",
]
