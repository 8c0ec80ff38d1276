"""
HTTP layer shared by all API modules.

ApiClient wraps a requests.Session with the base URL, the bearer token and a
timeout. Every call returns an ApiResponse; network failures do not raise but
come back as a response with status_code 0 so callers can tell "backend said
no" apart from "backend unreachable".

Envelope convention of the backend:

    {"succeeded": bool, "message": str, "errors": [str], "data": ...}

Some endpoints return a bare array (or plain text) instead.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup

from academicportal import config, messages
from academicportal.model import ApiResult

logger = logging.getLogger(__name__)

# status codes that make the delete negotiation try the query-string form
DELETE_RETRY_STATUSES = (400, 404, 405)


# ---------------------------------------------------------------------------
# Body parsing
# ---------------------------------------------------------------------------


def parse_body(text: str) -> Any:
    """
    Parse a response body as JSON, falling back to the raw text.
    """
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return text


def html_to_text(text: str, limit: int = 300) -> str:
    """
    Reduce an HTML error page to its visible text.
    """
    soup = BeautifulSoup(text, "html.parser")
    for tag in soup(["script", "style", "head"]):
        tag.decompose()
    body = " ".join(soup.get_text(" ", strip=True).split())
    return body[:limit]


def looks_like_html(text: str) -> bool:
    head = text.lstrip()[:200].lower()
    return head.startswith("<!doctype html") or head.startswith("<html") or "<body" in head


def is_envelope(payload: Any) -> bool:
    return isinstance(payload, dict) and "succeeded" in payload


def payload_message(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        msg = payload.get("message") or payload.get("Message")
        if msg:
            return str(msg)
    return None


def payload_errors(payload: Any) -> list[str]:
    if isinstance(payload, dict):
        errs = payload.get("errors")
        if isinstance(errs, list):
            return [str(e) for e in errs]
    return []


def unwrap_list(payload: Any) -> Optional[list[Any]]:
    """
    Return the list carried by a payload (bare array or envelope `data`),
    or None if there is none.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        return payload["data"]
    return None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


@dataclass
class ApiResponse:
    status_code: int
    reason: str
    text: str
    payload: Any
    content_type: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def network_error(self) -> bool:
        return self.status_code == 0

    def error_message(self) -> str:
        """
        Best human-readable description of a failed response.
        """
        if self.network_error:
            return messages.NETWORK_ERROR
        msg = payload_message(self.payload)
        if msg:
            return msg
        if isinstance(self.payload, str) and self.payload.strip() and looks_like_html(self.payload):
            text = html_to_text(self.payload)
            if text:
                return f"Failed: {self.status_code} {self.reason} | {text}"
        return f"Failed: {self.status_code} {self.reason}".rstrip()

    def failure(self, default: Optional[str] = None) -> ApiResult:
        if self.ok:
            message = payload_message(self.payload) or default or messages.UNEXPECTED_RESPONSE
        else:
            message = self.error_message()
        return ApiResult.fail(
            message,
            errors=payload_errors(self.payload) or None,
            status_code=self.status_code,
            network_error=self.network_error,
        )


def envelope_result(
    resp: ApiResponse,
    failure_message: str,
    success_message: str = "",
    convert: Optional[Callable[[Any], Any]] = None,
) -> ApiResult:
    """
    Normalize a mutation / single-record response.

    Success requires a 2xx status and an envelope with `succeeded` true.
    """
    if not resp.ok:
        return resp.failure()
    payload = resp.payload
    if is_envelope(payload) and payload.get("succeeded"):
        data = payload.get("data")
        if convert is not None and isinstance(data, dict):
            data = convert(data)
        return ApiResult.ok(data, payload_message(payload) or success_message, status_code=resp.status_code)
    return ApiResult.fail(
        payload_message(payload) or failure_message,
        errors=payload_errors(payload) or None,
        status_code=resp.status_code,
    )


def list_result(
    resp: ApiResponse,
    failure_message: str,
    convert: Optional[Callable[[dict[str, Any]], Any]] = None,
    allow_bare: bool = True,
) -> ApiResult:
    """
    Normalize a list response: an envelope with `succeeded` and a data array,
    or (when allow_bare) a bare JSON array.
    """
    if not resp.ok:
        return resp.failure()
    payload = resp.payload
    items: Optional[list[Any]] = None
    if is_envelope(payload):
        if payload.get("succeeded") and isinstance(payload.get("data"), list):
            items = payload["data"]
    elif allow_bare and isinstance(payload, list):
        items = payload
    if items is None:
        return ApiResult.fail(payload_message(payload) or failure_message, status_code=resp.status_code)
    data = [convert(x) for x in items if isinstance(x, dict)] if convert else list(items)
    return ApiResult.ok(data, payload_message(payload) or "", status_code=resp.status_code)


def delete_result(resp: ApiResponse, success_message: str, failure_message: str) -> ApiResult:
    """
    Deletes succeed on a 2xx whose body is a succeeded envelope, the JSON
    literal true, the text "true", or empty.
    """
    if not resp.ok:
        return resp.failure()
    payload = resp.payload
    if is_envelope(payload) and payload.get("succeeded") is True:
        return ApiResult.ok(None, payload_message(payload) or success_message, status_code=resp.status_code)
    if payload is True or resp.text.strip() in ("true", ""):
        return ApiResult.ok(None, success_message, status_code=resp.status_code)
    return ApiResult.fail(payload_message(payload) or failure_message, status_code=resp.status_code)


def multipart(fields: Iterable[tuple[str, Any]]) -> list[tuple[str, Any]]:
    """
    Build a `files=` argument that makes requests send multipart/form-data.

    Plain values become (None, str(value)) parts; repeated names are kept.
    File parts may be passed through as (filename, fileobj[, content_type]).
    """
    out: list[tuple[str, Any]] = []
    for name, value in fields:
        if isinstance(value, tuple):
            out.append((name, value))
        else:
            out.append((name, (None, "" if value is None else str(value))))
    return out


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class ApiClient:
    """
    Thin wrapper around requests.Session bound to one backend.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = config.normalize_base_url(base_url) if base_url else config.get_api_url()
        self.token = token or None
        self.timeout = timeout if timeout is not None else config.get_timeout()
        self.session = session if session is not None else requests.Session()

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    @property
    def api_root(self) -> str:
        """
        Base URL guaranteed to end with /api (some lookup endpoints need it).
        """
        if self.base_url.lower().endswith("/api"):
            return self.base_url
        return self.base_url + "/api"

    def url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self, auth: bool, json_body: bool) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        if auth and self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json_body: Any = None,
        form: Optional[list[tuple[str, Any]]] = None,
        auth: bool = True,
    ) -> ApiResponse:
        """
        Perform one request. `form` is sent as multipart/form-data.
        """
        url = self.url(path)
        kwargs: dict[str, Any] = {
            "headers": self._headers(auth, json_body is not None),
            "timeout": self.timeout,
        }
        if params:
            kwargs["params"] = params
        if json_body is not None:
            kwargs["json"] = json_body
        if form is not None:
            kwargs["files"] = multipart(form)

        logger.debug("%s %s params=%s", method, url, params)
        try:
            resp = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            return ApiResponse(status_code=0, reason=str(e), text="", payload=None)

        text = resp.text or ""
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return ApiResponse(
            status_code=resp.status_code,
            reason=resp.reason or "",
            text=text,
            payload=parse_body(text),
            content_type=resp.headers.get("content-type", ""),
        )

    def get(self, path: str, **kwargs: Any) -> ApiResponse:
        return self.send("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> ApiResponse:
        return self.send("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> ApiResponse:
        return self.send("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> ApiResponse:
        return self.send("DELETE", path, **kwargs)

    def delete_with_fallback(self, path: str, resource_id: Any) -> ApiResponse:
        """
        Delete a record on a backend whose routing is not consistent:

        1. DELETE {path}/{id}
        2. on 400/404/405: DELETE {path}?id={id}
        3. on 405 again: POST {path} with multipart form field Id
        """
        rid = str(resource_id)
        path = path.rstrip("/")
        resp = self.delete(f"{path}/{quote(rid, safe='')}")
        if resp.ok or resp.status_code not in DELETE_RETRY_STATUSES:
            return resp

        logger.debug("DELETE by path returned %s, retrying with query string", resp.status_code)
        resp = self.delete(path, params={"id": rid})
        if resp.ok or resp.status_code != 405:
            return resp

        logger.debug("DELETE not allowed, retrying as POST form")
        return self.post(path, form=[("Id", rid)])

    def login_required(self) -> Optional[ApiResult]:
        """
        Failure result for endpoints that need a token, or None if one is set.
        """
        if self.has_token:
            return None
        return ApiResult.fail(messages.LOGIN_REQUIRED)
