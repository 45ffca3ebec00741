from dataclasses import dataclass, field
from typing import List, Optional


SCRIPT_PENDING = "pending"
SCRIPT_LOADED = "loaded"
SCRIPT_ERROR = "error"


@dataclass
class ScriptElement:
    """A script element attached to a document head.

    ``status`` moves from ``pending`` to either ``loaded`` or ``error`` once
    the fetch settles. ``text`` holds the fetched source on success.
    """

    src: str = ""
    async_: bool = False
    status: str = SCRIPT_PENDING
    text: Optional[str] = None
    error: Optional[BaseException] = None

    def mark_loaded(self, text: str) -> None:
        self.status = SCRIPT_LOADED
        self.text = text

    def mark_failed(self, error: BaseException) -> None:
        self.status = SCRIPT_ERROR
        self.error = error


@dataclass
class Document:
    """Minimal document model: a head that script elements are appended to."""

    head: List[ScriptElement] = field(default_factory=list)

    def create_script(self) -> ScriptElement:
        return ScriptElement()

    def append_to_head(self, element: ScriptElement) -> ScriptElement:
        self.head.append(element)
        return element

    def scripts(self, src: Optional[str] = None) -> List[ScriptElement]:
        if src is None:
            return list(self.head)
        return [s for s in self.head if s.src == src]
