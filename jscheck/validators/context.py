"""Rule Engine Context — owns the initialized engine scope and reuses it across checks.

Loading the rule program is the expensive part of a validation, so it happens
once per context. The scope is mutable (the engine keeps the last error list),
so every check-and-fetch sequence runs under the context lock.

Usage:
    context = EngineContext()
    with context.session() as engine:
        engine.evaluate(...)
"""

import threading
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

import structlog

from jscheck.config import Settings, get_settings
from jscheck.validators.base import ScriptEngine
from jscheck.validators.exceptions import EngineExecutionError, EngineInitializationError
from jscheck.validators.mini_racer import MiniRacerEngine
from jscheck.validators.ruleset import load_ruleset

logger = structlog.get_logger()

EngineFactory = Callable[[], ScriptEngine]


class EngineContext:
    """Lazily initialized, reusable rule-engine scope.

    A context may be owned by one validator or shared by several; shared
    contexts serialize checks through an internal lock.
    """

    def __init__(
        self,
        engine: Optional[ScriptEngine] = None,
        loaded: bool = False,
        engine_factory: Optional[EngineFactory] = None,
        ruleset_path: Optional[Union[str, Path]] = None,
        entrypoint: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize the context.

        Args:
            engine: Existing scope to use instead of creating one
            loaded: True if ``engine`` already holds the rule program
            engine_factory: Builds a fresh scope on first use (default: MiniRacerEngine)
            ruleset_path: Rule program file; defaults to RULESET_PATH, then the bundled one
            entrypoint: Global the program defines (default: RULESET_ENTRYPOINT)
            settings: Settings override, mostly for tests
        """
        settings = settings or get_settings()
        self.ruleset_path = ruleset_path or settings.RULESET_PATH or None
        self.entrypoint = entrypoint or settings.RULESET_ENTRYPOINT
        self._engine_factory = engine_factory or MiniRacerEngine
        self._engine = engine
        self._initialized = engine is not None and loaded
        self._lock = threading.RLock()

    @classmethod
    def from_engine(cls, engine: ScriptEngine, **kwargs) -> "EngineContext":
        """Wrap a scope that already has the rule program loaded."""
        return cls(engine=engine, loaded=True, **kwargs)

    @property
    def initialized(self) -> bool:
        return self._initialized

    def ensure_initialized(self) -> ScriptEngine:
        """Return the engine scope, loading the rule program on first call.

        Raises:
            EngineInitializationError: the program is missing, fails to
                evaluate, or does not define the entrypoint
        """
        with self._lock:
            if self._initialized:
                return self._engine

            start_time = time.perf_counter()
            ruleset = load_ruleset(self.ruleset_path)

            engine = self._engine
            if engine is None:
                try:
                    engine = self._engine_factory()
                except Exception as e:
                    raise EngineInitializationError(f"Failed creating script engine: {e}") from e

            # A scope that failed to load may hold half a program; never retry on it.
            try:
                engine.load(ruleset.source, ruleset.name)
                has_entrypoint = engine.has_global(self.entrypoint)
            except EngineExecutionError as e:
                self._engine = None
                raise EngineInitializationError(
                    f"Failed evaluating rule program '{ruleset.name}': {e}"
                ) from e
            if not has_entrypoint:
                self._engine = None
                raise EngineInitializationError(
                    f"Rule program '{ruleset.name}' does not define '{self.entrypoint}'"
                )

            self._engine = engine
            self._initialized = True
            logger.info(
                "engine_initialized",
                engine=engine.name,
                ruleset=ruleset.name,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            return engine

    @contextmanager
    def session(self) -> Iterator[ScriptEngine]:
        """Hold the context exclusively for one check-and-fetch sequence."""
        with self._lock:
            yield self.ensure_initialized()

    def reset(self) -> None:
        """Drop the scope; the next call creates and loads a new one."""
        with self._lock:
            self._engine = None
            self._initialized = False
