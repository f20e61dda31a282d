import logging
import sys
from typing import IO, List

import structlog

from glass_solver.models.instance import Instance


class InstanceFormatError(ValueError):
    pass


def _stderr_logger(*args) -> structlog.PrintLogger:
    # Resolve sys.stderr on every call so redirected streams are honoured.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(verbose: bool = False) -> None:
    """Send structlog output to stderr so stdout only carries the answer."""
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def ensure_logging() -> None:
    """Apply the default configuration unless the application already set one."""
    if not structlog.is_configured():
        configure_logging()


def _as_ints(tokens: List[str]) -> List[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError as e:
        raise InstanceFormatError(f"Expected integers: {e}") from e


def parse_instance(text: str) -> Instance:
    """
    Parse "n" followed by n "capacity target" pairs. Any whitespace separates
    tokens; anything after the last pair is ignored.
    """
    tokens = text.split()
    if not tokens:
        raise InstanceFormatError("Empty input, expected the glass count")

    count = _as_ints(tokens[:1])[0]
    if count < 0:
        raise InstanceFormatError(f"Invalid glass count: {count}")

    values = _as_ints(tokens[1:1 + 2 * count])
    if len(values) != 2 * count:
        raise InstanceFormatError(
            f"Expected {count} capacity/target pairs, got {len(values) // 2}"
        )
    return Instance.from_pairs(zip(values[0::2], values[1::2]))


def read_instance(stream: IO[str]) -> Instance:
    """Read a whole instance from a text stream."""
    return parse_instance(stream.read())
