from laravel_build.core.application.builders.script_params_builder import ScriptParamsBuilder

__all__ = ["ScriptParamsBuilder"]
