"""The pre-composed aggregate of commonly used helpers.

``query`` and ``os_env`` are plain values computed once when the aggregate is
built. ``default`` is built when this module is imported, so it reflects the
default host context at that moment and does not follow later changes.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .core.context import HostContext, resolve_context
from .core.validation import is_id_card_new, is_mobile_number
from .services.aio import load_api, sleep
from .services.env import OsEnv, os_env
from .services.query import QueryMapping, filter_empty_params, parse_query
from .services.strings import capitalization


@dataclass(frozen=True)
class Aggregate:
    capitalization: Callable[[str], str]
    parse_query: Callable[..., QueryMapping]
    query: QueryMapping
    load_api: Callable[..., Any]
    filter_empty_params: Callable[..., dict]
    os_env: OsEnv
    is_id_card: Callable[[Any], bool]
    is_mobile_number: Callable[[Any], bool]
    sleep: Callable[[float], Any]


def build_aggregate(context: Optional[HostContext] = None) -> Aggregate:
    context = resolve_context(context)
    return Aggregate(
        capitalization=capitalization,
        parse_query=parse_query,
        query=parse_query(context=context),
        load_api=load_api,
        filter_empty_params=filter_empty_params,
        os_env=os_env(context),
        is_id_card=is_id_card_new,
        is_mobile_number=is_mobile_number,
        sleep=sleep,
    )


default = build_aggregate()
