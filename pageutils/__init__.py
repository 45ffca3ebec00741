"""Page helpers: query strings, formatting, validation, user-agent detection and async utilities.

Importing the package builds ``default``, the aggregate whose ``query`` and
``os_env`` values are evaluated once against the default host context.
"""

from .aggregate import Aggregate, build_aggregate, default
from .core.context import (
    HostContext,
    Location,
    get_default_context,
    set_default_context,
)
from .core.document import Document, ScriptElement
from .core.errors import DecodeError, PageUtilsError, ScriptLoadError
from .core.validation import (
    is_chinese_id_card_number,
    is_id_card_new,
    is_id_card_old,
    is_license_plate_number,
    is_mobile_number,
)
from .services.aio import load_api, sleep
from .services.env import OsEnv, is_android, is_ios, is_wechat, os_env, os_type
from .services.numbers import format_money, random_num
from .services.query import decode_component, filter_empty_params, parse_query
from .services.strings import capitalization, escape_html

__all__ = [
    "Aggregate",
    "build_aggregate",
    "default",
    "HostContext",
    "Location",
    "get_default_context",
    "set_default_context",
    "Document",
    "ScriptElement",
    "DecodeError",
    "PageUtilsError",
    "ScriptLoadError",
    "is_chinese_id_card_number",
    "is_id_card_new",
    "is_id_card_old",
    "is_license_plate_number",
    "is_mobile_number",
    "load_api",
    "sleep",
    "OsEnv",
    "is_android",
    "is_ios",
    "is_wechat",
    "os_env",
    "os_type",
    "format_money",
    "random_num",
    "decode_component",
    "filter_empty_params",
    "parse_query",
    "capitalization",
    "escape_html",
]
