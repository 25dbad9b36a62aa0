"""Script Validator — runs the rule program against a script and returns a typed result.

This is the main entry point for script validation.

Usage:
    validator = ScriptValidator(options=["undef", "maxlen=120"])
    result = validator.validate("y = 1;")
    if not result.passed:
        for error in result.errors:
            print(error.line, error.character, error.reason)
"""

from typing import Iterable, Optional, Union

import structlog

from jscheck.config import Settings, get_settings
from jscheck.validators.composer import compose_check, compose_error_dump
from jscheck.validators.context import EngineContext
from jscheck.validators.error_list import deserialize_errors
from jscheck.validators.exceptions import EngineExecutionError
from jscheck.validators.models import ValidationResult
from jscheck.validators.options import parse_options
from jscheck.validators.timing import StopWatch

logger = structlog.get_logger()


def _option_list(options: Union[str, Iterable[str]]) -> list[str]:
    # A bare string is one option, not a sequence of one-letter flags.
    if isinstance(options, str):
        return [options]
    return list(options)


class ScriptValidator:
    """Validates JavaScript source against a configured set of rules.

    Design principles:
        - Rule violations are a result (``ValidationResult.invalid``), not an exception
        - Infrastructure failures always raise (init, execution, malformed error list)
        - The engine context is loaded once and reused for every call
        - Observable: logs every run with phase timings
    """

    def __init__(
        self,
        options: Optional[Iterable[str]] = None,
        context: Optional[EngineContext] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize the validator.

        Args:
            options: Default raw options (``name`` or ``name=value``); falls back
                to DEFAULT_OPTIONS
            context: Engine context to use, possibly shared with other validators.
                If None, the validator owns a fresh one.
            settings: Settings override, mostly for tests
        """
        self.settings = settings or get_settings()
        self.context = context or EngineContext(settings=self.settings)
        self.options: list[str] = (
            _option_list(options) if options is not None else list(self.settings.DEFAULT_OPTIONS)
        )

    def set_options(self, *options: str) -> "ScriptValidator":
        """Replace the default options. Returns self for chaining."""
        logger.debug("set_options", options=options)
        self.options = [option for option in options if option is not None]
        return self

    def warm_up(self) -> "ScriptValidator":
        """Load the rule program now instead of on the first validate() call."""
        self.context.ensure_initialized()
        return self

    def validate(self, source: str, options: Optional[Iterable[str]] = None) -> ValidationResult:
        """Check a script against the rules.

        Args:
            source: Script text
            options: Raw options for this call; None means the validator's defaults

        Returns:
            ValidationResult.valid() or ValidationResult.invalid(errors)

        Raises:
            EngineInitializationError: the rule program could not be loaded
            InvalidOptionFormat: an option string is malformed
            EngineExecutionError: the engine failed while checking
            ErrorListMalformed: the engine's error list could not be parsed
        """
        raw_options = self.options if options is None else _option_list(options)
        entrypoint = self.context.entrypoint
        watch = StopWatch("validate")

        watch.start("init")
        self.context.ensure_initialized()
        watch.stop()

        config = parse_options(raw_options)
        script = compose_check(
            source,
            config,
            entrypoint=entrypoint,
            quote_values=self.settings.QUOTE_OPTION_VALUES,
        )

        # session() re-enters ensure_initialized(), already a no-op here.
        watch.start("check")
        with self.context.session() as engine:
            verdict = engine.evaluate(script, "check")
            if not isinstance(verdict, bool):
                raise EngineExecutionError(
                    f"check: {entrypoint} returned {type(verdict).__name__} instead of a boolean",
                    diagnostic=repr(verdict),
                )
            payload = None if verdict else engine.evaluate(compose_error_dump(entrypoint), "errors")
        watch.stop()

        if verdict:
            result = ValidationResult.valid()
        else:
            if not isinstance(payload, str):
                raise EngineExecutionError(
                    f"errors: expected a JSON string, got {type(payload).__name__}",
                    diagnostic=repr(payload),
                )
            logger.debug("error_list", payload=payload)
            result = ValidationResult.invalid(deserialize_errors(payload))

        if self.settings.LOG_TIMINGS:
            logger.debug("validation_timings", table=watch.pretty_print())
            logger.info(
                "validation_complete",
                passed=result.passed,
                total_errors=len(result.errors),
                options=config.names(),
                duration_ms=round(watch.total_ms, 2),
                phase_timings=watch.timings(),
            )
        return result
