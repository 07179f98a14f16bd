"""Download rendered Figma images to local files."""

import logging
from pathlib import Path
from typing import Optional, Union

import httpx

from figma_assets.exceptions import DownloadError

logger = logging.getLogger(__name__)


class AssetDownloader:
    """Fetches render URLs one at a time and writes them into ``output_dir``.

    Render URLs carry their own capability, so no auth header is sent. A
    failed download is logged and skipped rather than raised.
    """

    def __init__(
        self,
        output_dir: Union[str, Path],
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.output_dir = Path(output_dir)
        self.timeout = timeout
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "AssetDownloader":
        self._client = httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport, follow_redirects=True
        )
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def ensure_output_dir(self) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir

    async def download(self, url: str) -> bytes:
        """Fetch ``url`` and return the body, raising DownloadError on failure."""
        if self._client is None:
            raise RuntimeError("AssetDownloader must be used as an async context manager")
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            raise DownloadError(url, reason=str(e) or type(e).__name__) from e
        if not response.is_success:
            raise DownloadError(url, status_code=response.status_code)
        return response.content

    async def save(self, url: Optional[str], filename: str) -> Optional[Path]:
        """Download ``url`` into ``output_dir/filename``.

        Returns the written path, or None when the asset was skipped.
        """
        if not url:
            logger.warning("Skip download %s: no image URL", filename)
            return None
        try:
            content = await self.download(url)
        except DownloadError as e:
            logger.warning("Skip download %s %s", filename, e.status_code or e.reason)
            return None

        filepath = self.output_dir / filename
        filepath.write_bytes(content)
        logger.info("Saved: %s", filename)
        return filepath
