"""Host context: the location, user agent and document a page helper reads.

Helpers never reach for process globals directly. They take an optional
``HostContext`` and fall back to the default one, which is built once from
``Config`` when this module is imported and can be replaced with
``set_default_context``.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urlsplit

from .config import Config
from .document import Document


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    """Read-only page location.

    ``search`` keeps its leading ``?`` and ``hash`` its leading ``#``; both are
    empty strings when the URL has no such part.
    """

    search: str = ""
    hash: str = ""

    @classmethod
    def from_url(cls, url: str) -> "Location":
        if not url:
            return cls()
        parts = urlsplit(url)
        search = f"?{parts.query}" if parts.query else ""
        fragment = f"#{parts.fragment}" if parts.fragment else ""
        return cls(search=search, hash=fragment)


@dataclass(frozen=True)
class HostContext:
    location: Location = field(default_factory=Location)
    user_agent: str = ""
    document: Document = field(default_factory=Document)

    @classmethod
    def from_config(cls) -> "HostContext":
        return cls(location=Location.from_url(Config.PAGE_URL), user_agent=Config.USER_AGENT)


_default_context = HostContext.from_config()


def get_default_context() -> HostContext:
    return _default_context


def set_default_context(context: HostContext) -> HostContext:
    """Replace the default context and return the previous one."""
    global _default_context
    previous = _default_context
    _default_context = context
    logger.debug("Default host context replaced")
    return previous


def resolve_context(context: Optional[HostContext] = None) -> HostContext:
    return context if context is not None else _default_context
