"""Remote file size lookup over HTTP."""

import logging
from urllib.parse import urljoin, urlsplit

import requests

from ..utils import human_file_size

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
UNKNOWN_SIZE = "unknown"


def get_remote_file_size(
    url: str,
    format_size: bool = True,
    use_head: bool = True,
    site_url: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> int | str:
    """
    Get the size of a remote resource from its Content-Length header.

    Args:
        url: Absolute URL, or a path resolved against site_url
        format_size: Return a human-readable string instead of bytes
        use_head: Use a HEAD request; otherwise a streamed GET (body not read)
        site_url: Base URL for relative urls
        timeout: Request timeout in seconds

    Returns:
        Size in bytes, or its formatted form. -1 (or "unknown" when
        formatting) if the size cannot be determined.
    """
    if not urlsplit(url).scheme and site_url:
        url = urljoin(site_url.rstrip("/") + "/", url.lstrip("/"))

    try:
        if use_head:
            response = requests.head(url, allow_redirects=True, verify=False, timeout=timeout)
        else:
            response = requests.get(
                url, allow_redirects=True, verify=False, timeout=timeout, stream=True
            )
        with response:
            content_length = response.headers.get("Content-Length")
    except requests.RequestException as e:
        logger.warning(f"Failed to fetch remote file size for {url}: {e}")
        content_length = None

    try:
        size = int(content_length) if content_length else 0
    except ValueError:
        size = 0

    if size <= 0:
        return UNKNOWN_SIZE if format_size else -1
    if not format_size:
        return size
    return human_file_size(size, 1)
