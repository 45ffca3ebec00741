import re
from dataclasses import asdict, dataclass
from typing import Dict, Optional

from ..core.context import HostContext, resolve_context


OS_PATTERNS = {
    "Android": re.compile(r"android", re.IGNORECASE),
    "IOS": re.compile(r"(ipad|iphone|ipod)", re.IGNORECASE),
    "WeChat": re.compile(r"MicroMessenger", re.IGNORECASE),
}


@dataclass(frozen=True)
class OsEnv:
    """Detected OS / app family of a user agent."""

    ios: bool
    android: bool
    wechat: bool

    def to_dict(self) -> Dict[str, bool]:
        data = asdict(self)
        return {"iOS": data["ios"], "android": data["android"], "weChat": data["wechat"]}


def os_type(type_: str, context: Optional[HostContext] = None) -> Optional[bool]:
    """Test the user agent against the pattern registered for ``type_``.

    Returns ``None`` for a category with no registered pattern.
    """
    pattern = OS_PATTERNS.get(type_)
    if pattern is None:
        return None
    return pattern.search(resolve_context(context).user_agent) is not None


def is_ios(context: Optional[HostContext] = None) -> bool:
    return os_type("IOS", context)


def is_android(context: Optional[HostContext] = None) -> bool:
    return os_type("Android", context)


def is_wechat(context: Optional[HostContext] = None) -> bool:
    return os_type("WeChat", context)


def os_env(context: Optional[HostContext] = None) -> OsEnv:
    """Evaluate all three detections against the same user agent, now."""
    context = resolve_context(context)
    return OsEnv(ios=is_ios(context), android=is_android(context), wechat=is_wechat(context))
