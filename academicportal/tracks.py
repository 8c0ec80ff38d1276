"""
Tracks (Msar).

    GET    /Msar
    GET    /Msar/ByDegree/{degreeId}
    POST   /Msar
    PUT    /Msar/{id}
    DELETE /Msar/{id}

The backend requires `DepartmentName` and a nested `degree` object on create
and update; the department name is resolved from the departments lookup.
"""

from __future__ import annotations

import logging
from typing import Any

from academicportal import lookups, messages
from academicportal.client import ApiClient, envelope_result, list_result
from academicportal.model import ApiResult, Track

logger = logging.getLogger(__name__)


def resolve_department_name(client: ApiClient, department_id: int) -> str:
    """
    Look the department name up; empty string if it cannot be found
    (the backend then validates the request itself).
    """
    result = lookups.get_departments_lookup(client)
    if not result.success:
        logger.warning("department lookup failed: %s", result.message)
        return ""
    for item in result.data:
        if item.id == department_id:
            return item.value
    return ""


def _track_body(client: ApiClient, name: str, degree_id: int, department_id: int) -> dict[str, Any]:
    return {
        "name": name,
        "degreeId": degree_id,
        "DepartmentName": resolve_department_name(client, department_id),
        "degree": {
            "id": degree_id,
            "name": "",
            "description": "",
            "standardDurationYears": 0,
            "departmentId": department_id,
            "generalDegree": "",
        },
    }


def get_tracks(client: ApiClient) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    return list_result(client.get("Msar"), messages.TRACKS_LOAD_FAILED, Track.from_api, allow_bare=False)


def get_tracks_for_degree(client: ApiClient, degree_id: int) -> ApiResult:
    return list_result(client.get(f"Msar/ByDegree/{degree_id}"), messages.TRACKS_LOAD_FAILED, Track.from_api, allow_bare=False)


def create_track(client: ApiClient, name: str, degree_id: int, department_id: int) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    body = _track_body(client, name, degree_id, department_id)
    return envelope_result(client.post("Msar", json_body=body), messages.TRACK_CREATE_FAILED, convert=Track.from_api)


def update_track(client: ApiClient, track_id: int, name: str, degree_id: int, department_id: int) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    body = {"id": track_id, **_track_body(client, name, degree_id, department_id)}
    resp = client.put(f"Msar/{track_id}", json_body=body)
    return envelope_result(resp, messages.TRACK_UPDATE_FAILED, convert=Track.from_api)


def delete_track(client: ApiClient, track_id: int) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    return envelope_result(client.delete(f"Msar/{track_id}"), messages.TRACK_DELETE_FAILED)
