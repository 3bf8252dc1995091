from abc import ABC, abstractmethod

from laravel_build.core.domain.build.value_objects.script_params import ScriptParams


class ScriptRendererPort(ABC):
    """Turns script parameters into the final shell script text."""

    @abstractmethod
    def render(self, params: ScriptParams) -> str:
        """Render the build script. Raises ScriptRenderError on failure."""
