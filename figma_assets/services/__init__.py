"""Services package initialization."""

from figma_assets.services.filenames import FilenameRegistry, sanitize_filename
from figma_assets.services.node_collector import build_name_lookup, collect_nodes
from figma_assets.services.figma_client import FigmaClient
from figma_assets.services.asset_downloader import AssetDownloader

__all__ = [
    "FilenameRegistry",
    "sanitize_filename",
    "build_name_lookup",
    "collect_nodes",
    "FigmaClient",
    "AssetDownloader",
]
