"""Request plumbing for the inspection service.

Every request gets a ``HostContext`` built from its query string and
``User-Agent`` header, stored on ``request.state`` together with the detected
``OsEnv``. Handlers read the context from there and the request log reports
the detected client family.
"""

import logging
import time
from typing import Callable

from fastapi import Request
from fastapi.responses import JSONResponse

from ..services.env import OsEnv, os_env
from .config import Config
from .context import HostContext, Location


logger = logging.getLogger(__name__)


def context_from_request(request: Request) -> HostContext:
    """Build a context from an incoming HTTP request.

    Browsers never send the fragment, so ``hash`` is always empty here.
    """
    query = request.url.query
    location = Location(search=f"?{query}" if query else "", hash="")
    return HostContext(location=location, user_agent=request.headers.get("user-agent", ""))


def request_context(request: Request) -> HostContext:
    """The context attached by ``attach_host_context``, built on demand otherwise."""
    context = getattr(request.state, "host_context", None)
    return context if context is not None else context_from_request(request)


def client_family(env: OsEnv) -> str:
    """Short label for the log line: ``iOS+weChat``, ``android`` or ``other``."""
    return "+".join(name for name, detected in env.to_dict().items() if detected) or "other"


async def attach_host_context(request: Request, call_next: Callable):
    start_time = time.time()
    request_id = f"{int(time.time() * 1000)}-{id(request)}"
    context = context_from_request(request)
    env = os_env(context)
    request.state.host_context = context
    request.state.os_env = env
    request.state.request_id = request_id

    target = f"{request.url.path}{context.location.search}"
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"[{request_id}] {request.method} {target} client={client_family(env)} - ERROR: {str(e)} - {time.time() - start_time:.2f}s")
        raise

    process_time = time.time() - start_time
    # Rejected query strings and unknown validators land here with a 4xx
    if process_time > 1.0 or response.status_code >= 400:
        logger.info(f"[{request_id}] {request.method} {target} client={client_family(env)} - {response.status_code} - {process_time:.2f}s")
    return response


async def global_exception_handler(request: Request, exc: Exception):
    request_id = getattr(request.state, "request_id", f"{int(time.time() * 1000)}-{id(request)}")
    user_agent = request_context(request).user_agent or "unknown"
    logger.error(f"[{request_id}] Unhandled {type(exc).__name__} in {request.method} {request.url.path} (User-Agent: {user_agent}): {str(exc)}", exc_info=True)

    response = JSONResponse(status_code=500, content={"detail": "Internal server error"})
    # Error responses skip CORSMiddleware
    origin = request.headers.get("origin")
    if origin and origin in Config.allowed_origins():
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
    return response
