"""Export pipeline: fetch nodes, render them, and save each image by layer name."""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import httpx
from pydantic import ValidationError

from figma_assets.config import Settings, configure_logging
from figma_assets.exceptions import ConfigError, FigmaAssetsError
from figma_assets.schemas import ExportResult, Node
from figma_assets.services import (
    AssetDownloader,
    FigmaClient,
    FilenameRegistry,
    build_name_lookup,
    collect_nodes,
)

logger = logging.getLogger(__name__)


def _require_token(settings: Settings) -> str:
    if not settings.figma_access_token:
        raise ConfigError("Missing FIGMA_ACCESS_TOKEN. Set it in .env or env.")
    return settings.figma_access_token


async def export_assets(
    settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
) -> ExportResult:
    """Run one export and report which files were written.

    ``transport`` is handed to every HTTP client, which lets tests stand in
    for the Figma API.
    """
    token = _require_token(settings)
    node_ids = settings.node_id_list
    if not node_ids:
        raise ConfigError("FIGMA_NODE_IDS does not contain any node IDs.")

    output_dir = Path(settings.figma_output_dir)
    result = ExportResult(output_dir=str(output_dir))
    client = FigmaClient(
        access_token=token,
        base_url=settings.figma_api_base_url,
        timeout=settings.request_timeout,
        max_attempts=settings.figma_max_attempts,
        node_depth=settings.figma_node_depth,
        transport=transport,
    )

    logger.info("Fetching nodes... %s", ",".join(node_ids))
    documents = await client.fetch_nodes(
        settings.figma_file_key, node_ids, depth=settings.figma_node_depth
    )

    nodes: List[Node] = []
    for node_id in node_ids:
        collect_nodes(documents.get(node_id), nodes)

    if not nodes:
        logger.info("No nodes found under given IDs.")
        return result

    logger.info("Requesting images for %d nodes...", len(nodes))
    images = await client.fetch_images(
        settings.figma_file_key, [node.node_id for node in nodes], settings.figma_format
    )

    names = build_name_lookup(nodes)
    registry = FilenameRegistry(settings.figma_format)

    async with AssetDownloader(
        output_dir, timeout=settings.request_timeout, transport=transport
    ) as downloader:
        downloader.ensure_output_dir()
        for node_id, url in images.items():
            if not url:
                logger.warning("Skip render %s: no image URL", node_id)
                result.skipped.append(node_id)
                continue
            filename = registry.unique(names.get(node_id) or node_id)
            if await downloader.save(url, filename) is None:
                result.skipped.append(node_id)
            else:
                result.saved.append(filename)

    logger.info("Done. Saved %d files to %s", result.saved_count, output_dir)
    return result


def run(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    """Run an export and translate the outcome into a process exit code."""
    try:
        asyncio.run(export_assets(settings, transport=transport))
    except ConfigError as e:
        logger.error("%s", e)
        return 1
    except (FigmaAssetsError, httpx.HTTPError) as e:
        logger.error("Export failed: %s", e)
        return 1
    except Exception:
        logger.exception("Unexpected error during export")
        return 1
    return 0


def main() -> int:
    """Console entry point: configuration comes from the environment and ``.env``."""
    try:
        settings = Settings()
    except ValidationError as e:
        configure_logging()
        logger.error("Invalid configuration: %s", e)
        return 1
    configure_logging(settings.log_level)
    return run(settings)
