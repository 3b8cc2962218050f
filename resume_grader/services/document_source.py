import asyncio
import logging
from pathlib import Path
from urllib.parse import urlparse

import aiohttp

from .exceptions import DocumentMissingError, DocumentTooLargeError

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "public"
PUBLIC_CACHE_CONTROL = "public, max-age=604800, stale-while-revalidate=604800"


def check_document(document: bytes | None, max_size: int) -> bytes:
    if not document:
        raise DocumentMissingError("Empty file. Please upload a valid PDF resume.")
    if len(document) > max_size:
        raise DocumentTooLargeError(
            f"File size exceeds maximum allowed size of {max_size / (1024 * 1024):.1f}MB."
        )
    return document


def is_public_url(url: str) -> bool:
    return url.startswith(PUBLIC_PREFIX)


def read_public_document(url: str, public_dir: str | Path) -> bytes:
    """
    Read a bundled resume referenced as ``public/<name>.pdf``.

    ``url`` is resolved relative to ``public_dir``; anything that would
    escape that directory is rejected.
    """
    base = Path(public_dir).resolve()
    path = (base / url).resolve()
    if not path.is_relative_to(base):
        raise DocumentMissingError(f"Invalid resume path: {url}")

    try:
        return path.read_bytes()
    except OSError as e:
        logger.warning(f"Could not read public resume {path}: {e}")
        raise DocumentMissingError(f"Resume {url} not found") from e


async def fetch_remote_document(url: str, max_size: int, timeout_seconds: int = 60) -> bytes:
    if urlparse(url).scheme not in ("http", "https"):
        raise DocumentMissingError(f"Unsupported resume URL: {url}")

    logger.info(f"Downloading resume from {url}")
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url) as response:
                if response.status != 200:
                    raise DocumentMissingError(
                        f"Could not download resume from {url}: HTTP {response.status}"
                    )
                if response.content_length and response.content_length > max_size:
                    raise DocumentTooLargeError(
                        f"File size exceeds maximum allowed size of {max_size / (1024 * 1024):.1f}MB."
                    )
                document = bytearray()
                async for chunk in response.content.iter_chunked(64 * 1024):
                    document.extend(chunk)
                    if len(document) > max_size:
                        raise DocumentTooLargeError(
                            f"File size exceeds maximum allowed size of {max_size / (1024 * 1024):.1f}MB."
                        )
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.warning(f"Resume download failed for {url}: {e}")
        raise DocumentMissingError(f"Could not download resume from {url}") from e

    return check_document(bytes(document), max_size)
