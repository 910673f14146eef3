"""Download manager for SDK archives."""

import asyncio
import logging
from typing import Optional

import aiohttp

from ..config import DEFAULT_TIMEOUT
from ..errors import DownloadFailedError

logger = logging.getLogger(__name__)


class DownloadManager:
    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        # no overall deadline; only connect and per-read stalls are limited
        self.timeout = aiohttp.ClientTimeout(total=None, sock_connect=timeout, sock_read=timeout)
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self.session:
            await self.session.close()
            self.session = None

    async def fetch(self, url: str) -> bytes:
        """Download ``url`` into memory.

        The whole body is read before returning; a short or failed read
        raises instead of yielding a truncated buffer. Cancelling the
        calling task aborts the request.

        Raises:
            DownloadFailedError: On network errors, timeouts and non-2xx
                responses.
        """
        if not self.session:
            self.session = aiohttp.ClientSession(timeout=self.timeout)

        logger.debug("downloading %s", url)
        try:
            async with self.session.get(url) as resp:
                resp.raise_for_status()
                data = await resp.read()
        except aiohttp.ClientResponseError as exc:
            raise DownloadFailedError(url, f"HTTP {exc.status} {exc.message}") from exc
        except aiohttp.ClientError as exc:
            raise DownloadFailedError(url, str(exc) or type(exc).__name__) from exc
        except asyncio.TimeoutError as exc:
            raise DownloadFailedError(url, "timed out") from exc

        logger.debug("downloaded %d bytes from %s", len(data), url)
        return data
