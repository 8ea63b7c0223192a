"""JSON-over-HTTP convenience wrapper built on requests.

Exactly one request/response cycle: no retries, no default timeout.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import requests
from requests.structures import CaseInsensitiveDict

from helper_utils.errors import HTTPStatusError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: Mapping[str, str] = {"Accept": "application/json"}
JSON_CONTENT_TYPE = "application/json"


def _prepare(
    body: Any, headers: Mapping[str, str] | None
) -> tuple[Any, CaseInsensitiveDict[str]]:
    """Encode a structured body and merge headers (caller headers win)."""
    merged: CaseInsensitiveDict[str] = CaseInsensitiveDict()
    if isinstance(body, (Mapping, list)):
        body = json.dumps(body)
        merged["Content-Type"] = JSON_CONTENT_TYPE
    merged.update(DEFAULT_HEADERS)
    merged.update(headers or {})
    return body, merged


def fetch_json(
    url: str,
    *,
    method: str = "GET",
    body: Any = None,
    headers: Mapping[str, str] | None = None,
    session: requests.Session | None = None,
    **request_kwargs: Any,
) -> Any:
    """Send one request and decode a JSON response.

    A mapping or list *body* is JSON-encoded and sent with a JSON content
    type; strings, bytes and ``files=`` uploads are passed through as-is.
    Extra keyword arguments (``timeout``, ``params``, ``files``...) are
    forwarded to :meth:`requests.Session.request` unchanged.

    Returns:
        The decoded JSON body, or None for ``204 No Content`` and for
        responses whose content type is missing or not JSON.

    Raises:
        HTTPStatusError: The response status is not 2xx.
        requests.RequestException: The request itself failed.
    """
    data, merged_headers = _prepare(body, headers)
    send_headers = dict(merged_headers)

    logger.debug("fetch_json %s %s", method, url)
    if session is not None:
        response = session.request(method, url, data=data, headers=send_headers, **request_kwargs)
    else:
        with requests.Session() as client:
            response = client.request(method, url, data=data, headers=send_headers, **request_kwargs)

    if not 200 <= response.status_code < 300:
        raise HTTPStatusError(response.status_code, response.reason or "", response.text)

    content_type = response.headers.get("content-type")
    if response.status_code == 204 or not content_type or JSON_CONTENT_TYPE not in content_type:
        return None
    return response.json()
