"""Option Parser — turns flat ``name`` / ``name=value`` strings into a RuleConfiguration."""

from typing import Iterable, Optional

import structlog

from jscheck.validators.exceptions import InvalidOptionFormat
from jscheck.validators.models import RuleConfiguration, RuleOption

logger = structlog.get_logger()

SEPARATOR = "="


def parse_option(raw: Optional[str]) -> Optional[RuleOption]:
    """Parse a single raw option.

    Returns None for blank input. A bare name is a flag set to True; a
    ``name=value`` pair keeps the trimmed value verbatim as a literal token.

    Raises:
        InvalidOptionFormat: more than one separator, or an empty name/value.
    """
    if raw is None:
        return None
    option = raw.strip()
    if not option:
        return None

    if SEPARATOR not in option:
        return RuleOption(name=option, value=True)

    parts = option.split(SEPARATOR)
    if len(parts) != 2:
        raise InvalidOptionFormat(option, "more than one '=' separator")

    name, value = parts[0].strip(), parts[1].strip()
    if not name:
        raise InvalidOptionFormat(option, "empty option name")
    if not value:
        raise InvalidOptionFormat(option, "empty option value")
    return RuleOption(name=name, value=value)


def parse_options(raw_options: Optional[Iterable[Optional[str]]]) -> RuleConfiguration:
    """Parse user supplied options, preserving their order."""
    parsed = []
    for raw in raw_options or ():
        option = parse_option(raw)
        if option is not None:
            parsed.append(option)

    config = RuleConfiguration(options=parsed)
    logger.debug("options_parsed", options=config.names())
    return config
