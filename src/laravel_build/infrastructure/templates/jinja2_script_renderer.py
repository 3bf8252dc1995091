from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
)

from laravel_build.core.application.exceptions.build_exceptions import (
    ScriptRenderError,
    ScriptTemplateNotFoundError,
)
from laravel_build.core.application.ports.script_renderer_port import ScriptRendererPort
from laravel_build.core.domain.build.value_objects.script_params import ScriptParams


class Jinja2ScriptRenderer(ScriptRendererPort):
    def __init__(self, template_path: Path):
        """
        Loads and compiles the template once; a missing file fails immediately.
        """
        self.template_path = template_path
        # Shell output, not HTML: no autoescaping. StrictUndefined surfaces missing variables.
        self.jinja_env = Environment(
            loader=FileSystemLoader(template_path.parent),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
        try:
            self.template = self.jinja_env.get_template(template_path.name)
        except TemplateNotFound as e:
            raise ScriptTemplateNotFoundError(
                f"Build script template not found: {template_path}",
                context={"template_path": str(template_path)},
            ) from e

    def render(self, params: ScriptParams) -> str:
        try:
            return self.template.render(**params.as_template_context())
        except TemplateError as e:
            raise ScriptRenderError(
                f"Error rendering {self.template_path.name}: {e}",
                context={"template_path": str(self.template_path)},
            ) from e
