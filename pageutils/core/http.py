import logging
from typing import Optional

import httpx

from .errors import ScriptLoadError


logger = logging.getLogger(__name__)


async def fetch_text(url: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """Fetch ``url`` and return the response body as text.

    No timeout is applied and redirects are followed. Any non-2xx final
    response is a failure. Uses ``client`` when given, otherwise a client
    scoped to this call.
    """
    try:
        if client is not None:
            response = await client.get(url, timeout=None, follow_redirects=True)
            response.raise_for_status()
            return response.text

        async with httpx.AsyncClient(timeout=None, follow_redirects=True) as owned:
            response = await owned.get(url)
            response.raise_for_status()
            return response.text
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"Failed to load script from URL {url}: {str(e)}")
        raise ScriptLoadError(url, str(e)) from e
