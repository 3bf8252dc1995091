from laravel_build.core.application.ports.script_renderer_port import ScriptRendererPort

__all__ = ["ScriptRendererPort"]
