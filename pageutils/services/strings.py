import re
from typing import Optional


HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "'": "&#39;",
    '"': "&quot;",
}

_HTML_SPECIAL = re.compile(r"[&<>'\"]")


def capitalization(text: str) -> str:
    """Uppercase the first character and keep the rest unchanged."""
    return text[:1].upper() + text[1:]


def escape_html(text: Optional[str]) -> Optional[str]:
    """Escape ``& < > ' "`` for safe interpolation into HTML.

    Empty or ``None`` input is returned as-is.
    """
    if not text:
        return text
    return _HTML_SPECIAL.sub(lambda m: HTML_ENTITIES.get(m.group(0), m.group(0)), text)
