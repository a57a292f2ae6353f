"""Interactive read loop: one expression per line until an empty line.

Each line is parsed, differentiated and simplified. A line that fails to parse
is reported and the loop moves on to the next one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from rich.console import Console

from src.core.errors import ParseError
from src.core.parser import DEFAULT_MAX_DEPTH
from src.core.pipeline import DEFAULT_PREFIX, SAMPLE_EXPRESSIONS, DerivativeResult, differentiate
from src.utils.display import display_error, display_result

log = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for a read loop session."""

    prefix: str = DEFAULT_PREFIX
    max_depth: int = DEFAULT_MAX_DEPTH
    show_samples: bool = False
    stop_on_error: bool = False


@dataclass
class SessionSummary:
    """What happened during one session."""

    evaluated: int = 0
    results: list[DerivativeResult] = field(default_factory=list)
    failures: list[tuple[str, str]] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)


class ReadLoop:
    """Feeds lines of text through the derivative pipeline.

    Usage:
        loop = ReadLoop(SessionConfig(show_samples=True))
        summary = loop.run(sys.stdin)
    """

    def __init__(self, config: SessionConfig | None = None, console: Console | None = None):
        self.config = config or SessionConfig()
        self.console = console or Console()

    def run(self, lines: Iterable[str]) -> SessionSummary:
        summary = SessionSummary()

        if self.config.show_samples:
            for text in SAMPLE_EXPRESSIONS:
                self.evaluate(text, summary)

        for raw in lines:
            text = raw.rstrip("\r\n")
            if not text:
                log.debug("empty line, ending session")
                break
            self.evaluate(text, summary)

        log.info("session finished: %d evaluated, %d failed", summary.evaluated, summary.failed)
        return summary

    def evaluate(self, text: str, summary: SessionSummary) -> DerivativeResult | None:
        """Evaluate one line and print its result or its parse error."""
        summary.evaluated += 1
        try:
            result = differentiate(text, self.config.max_depth)
        except ParseError as e:
            if self.config.stop_on_error:
                raise
            log.debug("failed to parse %r at position %d: %s", text, e.position, e)
            summary.failures.append((text, str(e)))
            display_error(e, self.console)
            return None

        summary.results.append(result)
        display_result(result, self.config.prefix, self.console)
        return result
