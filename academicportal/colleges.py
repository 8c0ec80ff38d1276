"""
Colleges (GET/POST/PUT/DELETE /College).
"""

from __future__ import annotations

from academicportal import messages
from academicportal.client import ApiClient, envelope_result, list_result
from academicportal.model import ApiResult, College


def get_colleges(client: ApiClient) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    return list_result(client.get("College"), messages.COLLEGES_LOAD_FAILED, College.from_api, allow_bare=False)


def create_college(client: ApiClient, name: str) -> ApiResult:
    """
    POST /College?name=... (the name travels in the query string, no body).
    """
    denied = client.login_required()
    if denied:
        return denied
    resp = client.post("College", params={"name": name})
    return envelope_result(resp, messages.COLLEGE_CREATE_FAILED, convert=College.from_api)


def update_college(client: ApiClient, college_id: int, name: str) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    resp = client.put(f"College/{college_id}", json_body={"id": college_id, "name": name})
    return envelope_result(resp, messages.COLLEGE_UPDATE_FAILED, convert=College.from_api)


def delete_college(client: ApiClient, college_id: int) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    return envelope_result(client.delete(f"College/{college_id}"), messages.COLLEGE_DELETE_FAILED)
