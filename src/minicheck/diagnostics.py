"""
Diagnostics Collection
======================

Collects the (line, message) records produced while checking a program.
Reporting a diagnostic never stops parsing; grammar rules decide for
themselves whether to unwind. Each record is echoed to a text sink as
soon as it is reported, in the form:

    <line>: <message>

Example:
    diagnostics = Diagnostics()
    diagnostics.report(3, "Undeclared Variable")   # prints "3: Undeclared Variable"
    assert diagnostics.error_count() == 1
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """A single error record."""
    line: int
    message: str

    def __str__(self) -> str:
        return f"{self.line}: {self.message}"


class Diagnostics:
    """
    Error counter plus an append-only list of diagnostics.

    Attributes:
        echo: Write each diagnostic to the sink as it is reported
        stream: Sink for echoed diagnostics; None means sys.stdout at
            report time (so that output capture in tests sees it)
    """

    def __init__(self, echo: bool = True, stream: Optional[TextIO] = None):
        self.echo = echo
        self.stream = stream
        self._records: list[Diagnostic] = []
        self._count = 0

    def report(self, line: int, message: str) -> Diagnostic:
        """Count and record a diagnostic, echoing it if enabled."""
        diagnostic = Diagnostic(line, message)
        self._count += 1
        self._records.append(diagnostic)
        logger.debug(f"diagnostic #{self._count}: {diagnostic}")

        if self.echo:
            stream = self.stream if self.stream is not None else sys.stdout
            stream.write(f"{diagnostic}\n")
            stream.flush()

        return diagnostic

    def error_count(self) -> int:
        """Return the number of diagnostics reported so far."""
        return self._count

    def has_errors(self) -> bool:
        return self._count > 0

    @property
    def records(self) -> tuple[Diagnostic, ...]:
        return tuple(self._records)

    def messages(self) -> list[str]:
        """Message texts in report order, without line numbers."""
        return [d.message for d in self._records]

    def format_report(self) -> str:
        """All diagnostics, one per line."""
        return "\n".join(str(d) for d in self._records)

    def clear(self) -> None:
        self._records.clear()
        self._count = 0
