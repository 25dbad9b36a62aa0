"""Embedded V8 script engine backed by mini-racer."""

from typing import Any

import structlog
from py_mini_racer import JSEvalException, JSParseException, MiniRacer

from jscheck.validators.base import ScriptEngine
from jscheck.validators.exceptions import EngineExecutionError

logger = structlog.get_logger()


def format_engine_message(error: Exception, label: str) -> str:
    """Condense a V8 exception into a one-line message naming the failing step."""
    text = str(error).strip()
    first_line = next((line.strip() for line in text.splitlines() if line.strip()), type(error).__name__)
    return f"{label}: {first_line}"


class MiniRacerEngine(ScriptEngine):
    """A single V8 context. Globals defined by load() persist across evaluate() calls."""

    def __init__(self):
        self._ctx = MiniRacer()

    @property
    def name(self) -> str:
        return "mini-racer"

    def load(self, program: str, filename: str) -> None:
        self._run(program, filename)
        logger.debug("engine_program_loaded", engine=self.name, filename=filename, size=len(program))

    def evaluate(self, script: str, label: str) -> Any:
        return self._run(script, label)

    def _run(self, script: str, label: str) -> Any:
        try:
            return self._ctx.eval(script)
        except (JSParseException, JSEvalException) as e:
            raise EngineExecutionError(format_engine_message(e, label), diagnostic=str(e)) from e
