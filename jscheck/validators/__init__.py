"""Script Validator — JSHint-style rule checking for JavaScript source.

Usage:
    from jscheck.validators import ScriptValidator

    result = ScriptValidator().validate(source, ["undef", "eqeqeq"])
    if not result.passed:
        # Report result.errors
"""

from jscheck.validators.base import ScriptEngine
from jscheck.validators.context import EngineContext
from jscheck.validators.engine import ScriptValidator
from jscheck.validators.error_list import deserialize_errors
from jscheck.validators.exceptions import (
    EngineExecutionError,
    EngineInitializationError,
    ErrorListMalformed,
    InvalidOptionFormat,
    JsCheckError,
    ScriptInvalidError,
)
from jscheck.validators.mini_racer import MiniRacerEngine
from jscheck.validators.models import RuleConfiguration, RuleOption, ValidationError, ValidationResult
from jscheck.validators.options import parse_option, parse_options

__all__ = [
    "ScriptValidator",
    "EngineContext",
    "ScriptEngine",
    "MiniRacerEngine",
    "RuleOption",
    "RuleConfiguration",
    "ValidationError",
    "ValidationResult",
    "parse_option",
    "parse_options",
    "deserialize_errors",
    "JsCheckError",
    "InvalidOptionFormat",
    "EngineInitializationError",
    "EngineExecutionError",
    "ErrorListMalformed",
    "ScriptInvalidError",
]
