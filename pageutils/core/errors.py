class PageUtilsError(Exception):
    """Base class for errors raised by the page helpers."""


class DecodeError(PageUtilsError, ValueError):
    """A query-string component could not be percent-decoded."""

    def __init__(self, component: str, reason: str = "malformed percent-encoding"):
        self.component = component
        self.reason = reason
        super().__init__(f"Failed to decode {component!r}: {reason}")


class ScriptLoadError(PageUtilsError):
    """A script resource failed to load.

    The underlying transport error is available as ``__cause__``.
    """

    def __init__(self, src: str, detail: str = ""):
        self.src = src
        self.detail = detail
        message = f"Failed to load script {src}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
