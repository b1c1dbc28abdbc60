"""Logs outpass store requests when OUTPASS_LOG_REQUESTS is enabled.

Each line names the outpass and the gate transition a request is for, so a
desk session can be followed in the log without reading raw URLs. Header
values are never logged; only whether a bearer token was sent.
"""

import json
import logging
import os
import re
from typing import Any
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

_OUTPASS_PATH = re.compile(r"/outpass/(?P<outpass_id>[^/]+)(?:/(?P<transition>departure|return))?$")


def should_log_requests() -> bool:
    """Check if request logging is enabled via OUTPASS_LOG_REQUESTS environment variable."""
    return os.getenv("OUTPASS_LOG_REQUESTS", "").lower() == "true"


def describe_request(method: str, url: str) -> str:
    """Describe a store request in gate terms.

    `PUT .../outpass/42/return` becomes "mark return for outpass 42" and
    `GET .../outpass/42` becomes "fetch outpass 42". Other requests fall
    back to the method and path.
    """
    path = urlsplit(url).path
    match = _OUTPASS_PATH.search(path)
    if match is None:
        return f"{method} {path}"
    outpass_id = match["outpass_id"]
    transition = match["transition"]
    if transition is not None and method == "PUT":
        return f"mark {transition} for outpass {outpass_id}"
    if transition is None and method == "GET":
        return f"fetch outpass {outpass_id}"
    return f"{method} {path} (outpass {outpass_id})"


def log_api_request(
    method: str,
    url: str,
    authenticated: bool = False,
    payload: Any = None,
) -> None:
    """Log a store request if OUTPASS_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, PUT).
        url: Request URL.
        authenticated: Whether a bearer token accompanies the request.
        payload: Transition body (optional).
    """
    if not should_log_requests():
        return

    token = "bearer token" if authenticated else "no token"
    message = f"API Request: {describe_request(method, url)} [{token}]"
    if payload is not None:
        message = f"{message}\nPayload: {json.dumps(payload, sort_keys=True, default=str)}"
    logger.info(message)
