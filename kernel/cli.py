#!/usr/bin/env python3
"""
querybench CLI -- JSONata vs. hand-written Python benchmark.

Fetches the Nobel Prize laureates and prizes fixtures, checks every
transform pair for equivalence, benchmarks both sides and prints a
comparison table. There are no flags; every setting lives in
kernel/config.py.

Usage:
  querybench
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from domain.errors import MismatchError, QueryBenchError
from kernel.config import CONSOLE_BACKEND, LOG_LEVEL
from kernel.console import configure, console

logger = logging.getLogger("querybench")

# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="querybench",
        description="querybench -- JSONata vs. hand-written Python benchmark",
    )


def _setup_logging() -> None:
    """Configure diagnostic logging on stderr."""
    logging.basicConfig(
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        level=LOG_LEVEL,
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_run() -> None:
    """Run the whole benchmark once."""
    import wiring
    from kernel import loop

    asyncio.run(
        loop.run(
            wiring.build_loader(),
            wiring.build_engine(),
            settings=wiring.build_settings(),
        )
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    build_parser().parse_args(argv)

    # -- Console configuration (human-readable output) ----------------------
    configure(backend=CONSOLE_BACKEND)

    # -- Logging configuration (diagnostics on stderr) ----------------------
    _setup_logging()

    try:
        cmd_run()
    except MismatchError as exc:
        console.panel(str(exc), title=f"Mismatch: {exc.name}", style="red")
        logger.error("Aborted: %s", exc.name)
        sys.exit(1)
    except QueryBenchError as exc:
        console.error(str(exc))
        logger.exception("Aborted")
        sys.exit(1)
    except KeyboardInterrupt:
        console.warning("Interrupted.")
        sys.exit(130)


if __name__ == "__main__":
    main()
