from laravel_build.infrastructure.templates.jinja2_script_renderer import Jinja2ScriptRenderer

__all__ = ["Jinja2ScriptRenderer"]
