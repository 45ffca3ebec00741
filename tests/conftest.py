import pytest

from pageutils.core.context import HostContext, Location, get_default_context, set_default_context


IPHONE_WECHAT_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Mobile/15E148 MicroMessenger/8.0.40(0x18002831) NetType/WIFI"
)
ANDROID_UA = (
    "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36"
)
DESKTOP_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/120.0.0.0 Safari/537.36"


@pytest.fixture
def iphone_context():
    return HostContext(user_agent=IPHONE_WECHAT_UA)


@pytest.fixture
def android_context():
    return HostContext(user_agent=ANDROID_UA)


@pytest.fixture
def page_context():
    """A page at /list?page=2&tag=a with a hash route carrying its own query."""
    return HostContext(
        location=Location(search="?page=2&tag=a", hash="#/detail?id=7&tag=b"),
        user_agent=DESKTOP_UA,
    )


@pytest.fixture
def restore_default_context():
    original = get_default_context()
    yield
    set_default_context(original)
