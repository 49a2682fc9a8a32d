"""
Low-level HTTP execution against the Bot API.

Three request shapes are supported: JSON-bodied POST, query-string GET and a
raw byte GET for file content. The transport never interprets the envelope;
JSON calls return the body text as-is, even for 4xx statuses, so that the
envelope decoder can turn ok=false into RemoteRejected.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional

import requests

from .base.errors import TransportError, redact_token
from .types import ClientIdentity

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json; charset=utf-8"}


def encode_query_params(params: Mapping[str, Any]) -> Dict[str, str]:
    """
    Flatten parameters for a query string.

    None values are dropped, booleans become true/false and nested
    structures are sent as JSON text, which is what the Bot API expects.
    """
    encoded: Dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        elif isinstance(value, (dict, list, tuple)):
            encoded[key] = json.dumps(value, ensure_ascii=False)
        else:
            encoded[key] = str(value)
    return encoded


class Transport:
    """
    HTTP transport bound to one client identity.

    Holds no mutable state beyond the identity and timeout, so one instance
    can be shared between threads.
    """

    def __init__(self, identity: ClientIdentity, timeout: float = 10) -> None:
        self._identity = identity
        self._timeout = timeout

    @property
    def identity(self) -> ClientIdentity:
        return self._identity

    @property
    def timeout(self) -> float:
        return self._timeout

    def post_json(self, method: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """POST params as a JSON body to base/method and return the body text"""
        body = json.dumps(dict(params or {}), ensure_ascii=False).encode("utf-8")
        logger.debug("POST %s", method)
        response = self._send(
            method,
            "POST",
            self._identity.method_url(method),
            data=body,
            headers=JSON_HEADERS,
        )
        return self._text(method, response)

    def get_json(self, method: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """GET base/method with params in the query string and return the body text"""
        logger.debug("GET %s", method)
        response = self._send(
            method,
            "GET",
            self._identity.method_url(method),
            params=encode_query_params(params or {}),
        )
        return self._text(method, response)

    def get_bytes(self, url: str) -> bytes:
        """GET an absolute URL and return the raw payload"""
        logger.debug("GET %s", redact_token(url))
        response = self._send(None, "GET", url)
        if response.status_code >= 400:
            raise TransportError(
                f"HTTP {response.status_code} fetching {url}",
                status_code=response.status_code,
            )
        content = response.content
        if not content:
            raise TransportError(f"Empty response fetching {url}", status_code=response.status_code)
        return content

    def _send(self, method: Optional[str], verb: str, url: str, **kwargs: Any) -> requests.Response:
        label = method or "file"
        try:
            return requests.request(verb, url, timeout=self._timeout, **kwargs)
        except requests.Timeout as e:
            logger.debug("%s timed out", label)
            raise TransportError(f"Request timeout: {e}", method=method, cause=e) from None
        except requests.ConnectionError as e:
            logger.debug("%s connection failed", label)
            raise TransportError(f"Connection error: {e}", method=method, cause=e) from None
        except requests.RequestException as e:
            logger.debug("%s request failed", label)
            raise TransportError(f"Request failed: {e}", method=method, cause=e) from None

    @staticmethod
    def _text(method: str, response: requests.Response) -> str:
        if not response.content:
            raise TransportError(
                f"Empty response body (HTTP {response.status_code})",
                method=method,
                status_code=response.status_code,
            )
        return response.content.decode("utf-8", errors="replace")
