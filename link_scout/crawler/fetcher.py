# link_scout/crawler/fetcher.py
"""
Fetcher module: performs the HTTP GET for one link and classifies the response.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from aiohttp import ClientError, ClientSession

logger = logging.getLogger("LinkScout")


class Fetcher:
    """Fetches a URL and returns its body only for a ``200 OK`` response."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> Optional[str]:
        """
        GET *url* with the session defaults.

        Returns the body text on HTTP 200, or None on a transport error,
        any other status code, or a failed body read.
        """
        try:
            async with self.session.get(url) as resp:
                if resp.status != 200:
                    logger.info("Request to %s failed with status code %d", url, resp.status)
                    return None
                try:
                    return await resp.text(errors="replace")
                except (ClientError, asyncio.TimeoutError) as exc:
                    logger.warning("Reading response body of %s failed: %s", url, exc)
                    return None
        except (ClientError, asyncio.TimeoutError, ValueError, OverflowError) as exc:
            # ValueError: URLs yarl refuses to build; OverflowError: ports above 65535
            logger.warning("Request to %s failed: %s", url, str(exc) or type(exc).__name__)
            return None
