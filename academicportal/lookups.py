"""
Lookup lists used to populate choices: departments, degrees, programs, tracks
per degree, academic titles, semesters and the student and registration card
form lists (nationalities, majors, grades, qualification types and so on).

Lookups come back either wrapped in the envelope or as a bare array, and items
use `value` or `name` for their label; everything is normalized to LookupItem.
"""

from __future__ import annotations

import logging
from typing import Any

from academicportal import messages
from academicportal.client import ApiClient, ApiResponse, payload_message, unwrap_list
from academicportal.model import ApiResult, LookupItem

logger = logging.getLogger(__name__)

SEMESTER_PATHS = (
    "Lookups/semesters",
    "Lookups/Semesters",
    "Lookups/semester",
    "Lookups/Semester",
)


def normalize_lookup(items: list[Any]) -> list[LookupItem]:
    return [LookupItem.from_api(x) for x in items if isinstance(x, dict)]


def _lookup_result(resp: ApiResponse, empty_message: str = "", require_items: bool = False) -> ApiResult:
    if not resp.ok:
        return resp.failure()
    items = unwrap_list(resp.payload)
    if items is None:
        return ApiResult.fail(payload_message(resp.payload) or messages.UNEXPECTED_RESPONSE, status_code=resp.status_code)
    data = normalize_lookup(items)
    if require_items and not data:
        return ApiResult.fail(empty_message or messages.UNEXPECTED_RESPONSE, status_code=resp.status_code)
    return ApiResult.ok(data, payload_message(resp.payload) or "", status_code=resp.status_code)


def get_departments_lookup(client: ApiClient) -> ApiResult:
    """GET /Lookups/departments"""
    return _lookup_result(client.get("Lookups/departments"), messages.NO_DEPARTMENTS, require_items=True)


def get_degrees_lookup(client: ApiClient) -> ApiResult:
    """GET /Lookups/degrees"""
    denied = client.login_required()
    if denied:
        return denied
    return _lookup_result(client.get("Lookups/degrees"), messages.NO_DEGREES, require_items=True)


def get_programs(client: ApiClient) -> ApiResult:
    """GET /Lookups/Programs"""
    denied = client.login_required()
    if denied:
        return denied
    return _lookup_result(client.get("Lookups/Programs"), messages.NO_PROGRAMS, require_items=True)


def get_tracks_by_degree(client: ApiClient, degree_id: int) -> ApiResult:
    """
    GET /Lookups/GetMsaratByDegreeId?id=... (the query parameter is `id`).
    """
    return _lookup_result(client.get("Lookups/GetMsaratByDegreeId", params={"id": degree_id}))


def get_academic_titles(client: ApiClient) -> ApiResult:
    """GET /Lookups/AcademicTitle"""
    resp = client.get("Lookups/AcademicTitle")
    if resp.network_error:
        return resp.failure()
    if not resp.ok:
        msg = f"{messages.ACADEMIC_TITLES_FAILED} ({resp.status_code})"
        if resp.status_code == 401:
            msg = f"{msg} - {messages.ACADEMIC_TITLES_LOGIN_HINT}"
        return ApiResult.fail(msg, status_code=resp.status_code)

    items = unwrap_list(resp.payload) or []
    titles: list[LookupItem] = []
    for i, item in enumerate(items, start=1):
        if isinstance(item, dict):
            raw_id = item.get("id")
            label = item.get("value") if isinstance(item.get("value"), str) else item.get("name")
            titles.append(LookupItem(id=raw_id if isinstance(raw_id, int) else i, value=str(label or "")))
        else:
            titles.append(LookupItem(id=i, value=str(item)))
    return ApiResult.ok(titles, status_code=resp.status_code)


def get_semesters(client: ApiClient) -> ApiResult:
    """
    Semesters endpoint casing differs between deployments, so try each
    candidate path in order and return the first that answers.
    """
    last_error = ""
    for path in SEMESTER_PATHS:
        resp = client.get(f"{client.api_root}/{path}")
        if resp.network_error:
            last_error = "Network error"
            continue
        if not resp.ok:
            last_error = f"HTTP {resp.status_code}"
            continue
        items = unwrap_list(resp.payload) or []
        logger.debug("semesters from %s: %d items", path, len(items))
        return ApiResult.ok(normalize_lookup(items), payload_message(resp.payload) or "", status_code=resp.status_code)

    logger.warning("all semester endpoints failed (%s)", last_error)
    return ApiResult.fail(last_error or messages.SEMESTERS_NOT_FOUND)


def _simple_lookup(client: ApiClient, name: str) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    return _lookup_result(client.get(f"Lookups/{name}"))


def get_nationalities(client: ApiClient) -> ApiResult:
    """GET /Lookups/nationalities"""
    return _simple_lookup(client, "nationalities")


def get_majors(client: ApiClient) -> ApiResult:
    """GET /Lookups/majors"""
    return _simple_lookup(client, "majors")


def get_colleges_lookup(client: ApiClient) -> ApiResult:
    """GET /Lookups/colleges"""
    return _simple_lookup(client, "colleges")


def get_universities_lookup(client: ApiClient) -> ApiResult:
    """GET /Lookups/universities"""
    return _simple_lookup(client, "universities")


def get_grades(client: ApiClient) -> ApiResult:
    """GET /Lookups/grades"""
    return _simple_lookup(client, "grades")


def get_qualification_types(client: ApiClient) -> ApiResult:
    """GET /Lookups/Qualifications"""
    return _simple_lookup(client, "Qualifications")


def get_military_services(client: ApiClient) -> ApiResult:
    """GET /Lookups/militaryServices"""
    return _simple_lookup(client, "militaryServices")


def get_request_kinds(client: ApiClient) -> ApiResult:
    """GET /Lookups/kind-of-requests"""
    return _simple_lookup(client, "kind-of-requests")


def get_languages(client: ApiClient) -> ApiResult:
    """GET /Lookups/languages"""
    return _simple_lookup(client, "languages")
