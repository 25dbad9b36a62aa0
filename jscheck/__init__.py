"""jscheck — JavaScript source validation on an embedded rule engine."""

from jscheck.validators import (
    EngineContext,
    EngineExecutionError,
    EngineInitializationError,
    ErrorListMalformed,
    InvalidOptionFormat,
    JsCheckError,
    ScriptInvalidError,
    ScriptValidator,
    ValidationError,
    ValidationResult,
)

__version__ = "0.1.0"

__all__ = [
    "ScriptValidator",
    "EngineContext",
    "ValidationError",
    "ValidationResult",
    "JsCheckError",
    "InvalidOptionFormat",
    "EngineInitializationError",
    "EngineExecutionError",
    "ErrorListMalformed",
    "ScriptInvalidError",
]
