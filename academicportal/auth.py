"""
Login and sign-up.

    POST /Auth                 {nationalId, password}
    POST /Auth/StudentSignUp

The login response shape varies between deployments, so the token and user
fields are looked up in several places. After a successful login,
complete_login() decodes the JWT claims (without verifying the signature,
the backend does that) and stores the session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from jose import jwt
from jose.exceptions import JOSEError

from academicportal import messages
from academicportal.client import ApiClient, payload_message
from academicportal.model import ApiResult, as_bool
from academicportal.storage import Session, SessionStore

logger = logging.getLogger(__name__)

ROLE_CLAIM = "http://schemas.microsoft.com/ws/2008/06/identity/claims/role"
NAME_IDENTIFIER_CLAIM = "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/nameidentifier"

# landing pages
PAGE_SETTINGS = "settings"
PAGE_STUDENT_REGISTRATION = "student-registration"
PAGE_DASHBOARD = "dashboard"


@dataclass
class LoginData:
    token: Optional[str]
    user: Any = None
    role: Optional[str] = None
    has_card: Optional[bool] = None


@dataclass
class LoginOutcome:
    session: Session
    next_page: str
    message: str


def _nested(payload: Any, *path: str) -> Any:
    cur = payload
    for key in path:
        if not isinstance(cur, dict):
            return None
        cur = cur.get(key)
    return cur


def login(client: ApiClient, national_id: str, password: str) -> ApiResult:
    """
    On success `data` is a LoginData; the token may still be None if the
    backend sent none (complete_login reports that).
    """
    body = {"nationalId": national_id, "password": password}
    resp = client.post("Auth", json_body=body, auth=False)
    if resp.network_error:
        return resp.failure()
    payload = resp.payload
    if not resp.ok:
        return ApiResult.fail(payload_message(payload) or messages.LOGIN_FAILED, status_code=resp.status_code)

    token = (
        _nested(payload, "token")
        or _nested(payload, "access_token")
        or _nested(payload, "data", "token")
        or _nested(payload, "result", "jwt")
    )
    user = _nested(payload, "user") or _nested(payload, "data", "user")
    has_card = _nested(payload, "data", "hasCard")
    if has_card is None:
        has_card = _nested(payload, "hasCard")

    data = LoginData(
        token=token or None,
        user=user,
        role=_nested(payload, "role"),
        has_card=has_card,
    )
    return ApiResult.ok(data, payload_message(payload) or messages.LOGIN_SUCCESS, status_code=resp.status_code)


def signup(client: ApiClient, form: Mapping[str, Any]) -> ApiResult:
    resp = client.post("Auth/StudentSignUp", json_body=dict(form), auth=False)
    if resp.network_error:
        return resp.failure()
    if not resp.ok:
        msg = payload_message(resp.payload) or f"حدث خطأ ({resp.status_code})"
        return ApiResult.fail(msg, status_code=resp.status_code)
    return ApiResult.ok(resp.payload, payload_message(resp.payload) or "", status_code=resp.status_code)


def decode_claims(token: str) -> dict[str, Any]:
    """
    Claims of a JWT, unverified. Empty dict if the token cannot be decoded.
    """
    try:
        return jwt.get_unverified_claims(token)
    except JOSEError as e:
        logger.warning("could not decode token: %s", e)
        return {}


def role_from_claims(claims: Mapping[str, Any], user: Any = None) -> str:
    role = claims.get("Role") or claims.get(ROLE_CLAIM)
    if not role and isinstance(user, dict):
        role = user.get("Role") or user.get("role")
    return str(role or "user").strip().lower()


def national_id_from_claims(claims: Mapping[str, Any]) -> Optional[str]:
    nid = claims.get("NationalId") or claims.get("nationalId") or claims.get(NAME_IDENTIFIER_CLAIM)
    return str(nid) if nid else None


def next_page_for(role: str, has_card: bool) -> str:
    if role == "admin":
        return PAGE_SETTINGS
    if role == "student" and not has_card:
        return PAGE_STUDENT_REGISTRATION
    return PAGE_DASHBOARD


def complete_login(result: ApiResult, store: SessionStore) -> ApiResult:
    """
    Persist a successful login and decide the landing page.

    Returns ApiResult whose data is a LoginOutcome.
    """
    if not result.success:
        return result
    data: LoginData = result.data
    if not data or not data.token:
        return ApiResult.fail(messages.TOKEN_MISSING, status_code=result.status_code)

    user = data.user
    has_card = data.has_card
    if has_card is None and isinstance(user, dict):
        has_card = user.get("hasCard")
    has_card = as_bool(has_card)

    claims = decode_claims(data.token)
    role = role_from_claims(claims, user)

    session = Session(
        token=data.token,
        user=user,
        role=role,
        national_id=national_id_from_claims(claims),
        has_card=has_card,
    )
    previous = store.load()
    session.settings = previous.settings
    store.save(session)

    page = next_page_for(role, has_card)
    message = messages.COMPLETE_PROFILE if page == PAGE_STUDENT_REGISTRATION else messages.LOGIN_REDIRECT
    logger.info("logged in as %s, next page %s", role, page)
    return ApiResult.ok(LoginOutcome(session=session, next_page=page, message=message), message)


def logout(store: SessionStore) -> None:
    store.clear()
