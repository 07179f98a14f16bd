"""Error types raised while exporting assets."""

from typing import Optional


class FigmaAssetsError(Exception):
    """Base class for all export errors."""


class ConfigError(FigmaAssetsError):
    """Configuration is missing or invalid."""


class ApiError(FigmaAssetsError):
    """A Figma API call returned a non-2xx response."""

    def __init__(self, status_code: int, url: str, body: str = ""):
        self.status_code = status_code
        self.url = url
        self.body = body
        super().__init__(f"Figma API {status_code}: {url} {body}".rstrip())

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500


class DownloadError(FigmaAssetsError):
    """A single rendered asset could not be fetched."""

    def __init__(self, url: str, status_code: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = status_code if status_code is not None else reason
        super().__init__(f"Download failed ({detail}): {url}")
