"""Script Composer — builds the expressions submitted to the rule engine.

The engine's native configuration syntax is a JS object literal. Option values
are emitted verbatim unless ``quote_values`` is set, so ``maxlen=80`` becomes
``"maxlen": 80`` and ``quotmark='single'`` becomes ``"quotmark": 'single'``.
"""

import json
import re

import structlog

from jscheck.validators.models import RuleConfiguration, RuleOption

logger = structlog.get_logger()

DEFAULT_ENTRYPOINT = "JSHINT"

# Tokens that are safe to emit unquoted when quoting is requested
_NUMBER = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_KEYWORD_LITERALS = {"true", "false", "null"}
_QUOTED = re.compile(r"""^(?:"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')$""")


def encode_source(source: str) -> str:
    """Encode script text as a single JS string literal.

    JSON string syntax is a subset of JS string syntax; ``ensure_ascii`` also
    escapes U+2028/U+2029, which older engines reject inside literals.
    """
    return json.dumps(source, ensure_ascii=True)


def _is_literal(value: str) -> bool:
    return bool(_NUMBER.match(value) or value in _KEYWORD_LITERALS or _QUOTED.match(value))


def _emit_value(option: RuleOption, quote_values: bool) -> str:
    if isinstance(option.value, bool):
        return "true" if option.value else "false"
    if quote_values and not _is_literal(option.value):
        return json.dumps(option.value)
    return option.value


def serialize_configuration(config: RuleConfiguration, quote_values: bool = False) -> str:
    """Serialize options to ``{"name": value, ...}`` in input order."""
    entries = [
        f"{json.dumps(option.name)}: {_emit_value(option, quote_values)}"
        for option in config
    ]
    return "{" + ", ".join(entries) + "}"


def compose_check(
    source: str,
    config: RuleConfiguration,
    entrypoint: str = DEFAULT_ENTRYPOINT,
    quote_values: bool = False,
) -> str:
    """Build the check expression; its value is the engine's pass/fail boolean."""
    script = f"{entrypoint}({encode_source(source)}, {serialize_configuration(config, quote_values)});"
    logger.debug("check_script_composed", entrypoint=entrypoint, length=len(script))
    return script


def compose_error_dump(entrypoint: str = DEFAULT_ENTRYPOINT) -> str:
    """Build the expression that serializes the engine's last error list to JSON."""
    return f"JSON.stringify({entrypoint}.errors)"
