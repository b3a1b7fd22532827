"""HTTP adapter implementing FixtureLoaderPort.

Uses httpx.AsyncClient for a single GET per call. No caching and no retry:
any failure surfaces as NetworkError or ParseError and aborts the run.
"""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING

import httpx

from domain.errors import NetworkError, ParseError
from domain.models import Fixtures
from kernel.config import FETCH_TIMEOUT

if TYPE_CHECKING:
    from domain.models import JSONValue
    from domain.ports import FixtureLoaderPort

logger = logging.getLogger("querybench.fixtures")


class HttpFixtureLoader:
    """Concrete FixtureLoaderPort backed by httpx.

    Parameters
    ----------
    timeout:
        Seconds before a request is abandoned.
    transport:
        Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.

    """

    def __init__(
        self,
        timeout: float = FETCH_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def load(self, url: str) -> JSONValue:
        """Fetch *url* and return the decoded JSON body."""
        t0 = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NetworkError(url, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise NetworkError(url, str(exc) or type(exc).__name__) from exc

        try:
            data = json.loads(response.content)
        except ValueError as exc:
            raise ParseError(url, str(exc)) from exc

        logger.info(
            "Fetched %s (%d bytes) in %.0fms",
            url,
            len(response.content),
            (time.perf_counter() - t0) * 1000,
        )
        return data


async def load_fixtures(
    loader: FixtureLoaderPort,
    laureates_url: str,
    prizes_url: str,
) -> Fixtures:
    """Load both fixtures, one after the other."""
    laureates = await loader.load(laureates_url)
    prizes = await loader.load(prizes_url)
    return Fixtures(laureates=laureates, prizes=prizes)
