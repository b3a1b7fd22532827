"""kernel.console._protocol -- ConsoleProtocol definition.

Pure standard-library typing.Protocol for the querybench terminal output system.
No external dependencies allowed in this file.
"""

from __future__ import annotations

from typing import Any, Protocol


class ConsoleProtocol(Protocol):
    """querybench terminal output protocol.

    Three layers of methods:

    **General messages** -- usable from any module::

        console.info("Fetched 2 fixtures")
        console.success("Fastest is simple mapping benchmark 1")
        console.warning("Sampling budget exhausted")
        console.error("Invalid test, outputs differ")

    **Structured panels** -- tables, panels, dumps::

        console.panel("text", title="Mismatch")
        console.table(["Col1", "Col2"], [["a", "b"]], title="Results")
        console.pretty(document, depth=5, title="First laureate")

    **Run progress** -- used by kernel/loop.py::

        console.step(1, 6, "simple mapping")
        console.step_detail("outputs match (42 items)")
    """

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        """Informational message."""
        ...

    def success(self, message: str) -> None:
        """Success / positive-outcome message."""
        ...

    def warning(self, message: str) -> None:
        """Warning message."""
        ...

    def error(self, message: str) -> None:
        """Error message."""
        ...

    # -- Structured panels --------------------------------------------------

    def panel(self, content: str, *, title: str = "", style: str = "") -> None:
        """Display *content* in a bordered panel."""
        ...

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        """Display a table with *headers* and *rows*."""
        ...

    def pretty(self, value: Any, *, depth: int, title: str = "") -> None:
        """Pretty-print a JSON-like *value*, eliding levels below *depth*."""
        ...

    # -- Run progress -------------------------------------------------------

    def step(self, current: int, total: int, description: str) -> None:
        """Display a pipeline step indicator ``[current/total] description``."""
        ...

    def step_detail(self, message: str) -> None:
        """Display an indented detail line under the current step."""
        ...
