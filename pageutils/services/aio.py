import asyncio
import logging
from typing import Optional

import httpx

from ..core.context import HostContext, resolve_context
from ..core.errors import ScriptLoadError
from ..core.http import fetch_text


logger = logging.getLogger(__name__)


async def load_api(
    src: str,
    context: Optional[HostContext] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> None:
    """Attach an async script element for ``src`` and wait for it to load.

    Each call appends a new element, even for a ``src`` already loaded.
    Raises ``ScriptLoadError`` when the fetch fails.
    """
    document = resolve_context(context).document
    script = document.create_script()
    script.src = src
    script.async_ = True
    document.append_to_head(script)

    try:
        text = await fetch_text(src, client=client)
    except ScriptLoadError as e:
        script.mark_failed(e.__cause__ or e)
        raise

    script.mark_loaded(text)
    logger.debug(f"Loaded script {src} ({len(text)} chars)")


async def sleep(msec: float) -> None:
    """Resolve with ``None`` after ``msec`` milliseconds."""
    await asyncio.sleep(max(msec, 0) / 1000)
