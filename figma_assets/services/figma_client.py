"""Figma API client for node metadata and image renders."""

import logging
import re
from typing import Optional, List, Dict, Any

import httpx
from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt, wait_exponential
from tenacity.wait import wait_base

from figma_assets.config import get_settings
from figma_assets.exceptions import ApiError

logger = logging.getLogger(__name__)


def _is_retryable(exc: BaseException) -> bool:
    """Retry transport failures and 5xx responses; 4xx responses are final."""
    if isinstance(exc, ApiError):
        return exc.is_server_error
    return isinstance(exc, httpx.TransportError)


class FigmaClient:
    """Client for the Figma REST API.

    Arguments left as None fall back to the application settings.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
        node_depth: Optional[int] = None,
        retry_wait: Optional[wait_base] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if None in (access_token, base_url, timeout, max_attempts, node_depth):
            settings = get_settings()
            access_token = access_token if access_token is not None else settings.figma_access_token
            base_url = base_url or settings.figma_api_base_url
            timeout = timeout if timeout is not None else settings.request_timeout
            max_attempts = max_attempts if max_attempts is not None else settings.figma_max_attempts
            node_depth = node_depth if node_depth is not None else settings.figma_node_depth

        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        self.node_depth = node_depth
        self.retry_wait = retry_wait or wait_exponential(multiplier=1, min=1, max=10)
        self.headers = {"X-Figma-Token": self.access_token}
        self.transport = transport

    @staticmethod
    def extract_file_id(file_id_or_url: str) -> str:
        """Extract file ID from Figma URL or return as-is if already an ID."""
        url_pattern = r"figma\.com/(?:file|design)/([a-zA-Z0-9]+)"
        match = re.search(url_pattern, file_id_or_url)
        if match:
            return match.group(1)
        return file_id_or_url

    async def _request_json(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.get(
                f"{self.base_url}{path}",
                headers=self.headers,
                params=params,
            )
        if not response.is_success:
            raise ApiError(response.status_code, str(response.request.url), response.text)
        return response.json()

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        retrying = AsyncRetrying(
            retry=retry_if_exception(_is_retryable),
            stop=stop_after_attempt(self.max_attempts),
            wait=self.retry_wait,
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    logger.warning("Retrying %s (attempt %d)", path, attempt.retry_state.attempt_number)
                data = await self._request_json(path, params)
        return data

    async def fetch_nodes(
        self, file_id: str, node_ids: List[str], depth: Optional[int] = None
    ) -> Dict[str, Dict[str, Any]]:
        """Fetch the document subtrees for ``node_ids`` in one request.

        Returns a mapping of node ID to its ``document``; IDs Figma did not
        return are left out.
        """
        file_id = self.extract_file_id(file_id)
        params = {
            "ids": ",".join(node_ids),
            "depth": depth if depth is not None else self.node_depth,
        }
        data = await self._get_json(f"/files/{file_id}/nodes", params)

        documents = {}
        for node_id, entry in (data.get("nodes") or {}).items():
            document = (entry or {}).get("document")
            if document:
                documents[node_id] = document
        return documents

    async def fetch_images(
        self, file_id: str, node_ids: List[str], image_format: str = "svg"
    ) -> Dict[str, Optional[str]]:
        """Ask Figma to render ``node_ids``; a node it cannot render maps to None."""
        file_id = self.extract_file_id(file_id)
        params = {"ids": ",".join(node_ids), "format": image_format}
        data = await self._get_json(f"/images/{file_id}", params)
        if data.get("err"):
            logger.warning("Figma render reported: %s", data["err"])
        return dict(data.get("images") or {})
