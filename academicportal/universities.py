"""
Universities.

    GET    /University/names
    POST   /University/add?UniversityName=...
    PUT    /University/update          {"id", "name"}
    DELETE /University/delete/{id}
"""

from __future__ import annotations

from academicportal import messages
from academicportal.client import ApiClient, envelope_result, is_envelope, list_result, payload_message
from academicportal.model import ApiResult, University


def get_universities(client: ApiClient) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    return list_result(
        client.get("University/names"), messages.UNIVERSITIES_LOAD_FAILED, University.from_api, allow_bare=False
    )


def add_university(client: ApiClient, name: str) -> ApiResult:
    """
    The add endpoint answers with anything from an envelope to plain text;
    any 2xx counts as success unless an envelope explicitly says otherwise.
    """
    denied = client.login_required()
    if denied:
        return denied
    resp = client.post("University/add", params={"UniversityName": name})
    if not resp.ok:
        return resp.failure()
    payload = resp.payload
    if is_envelope(payload) and not payload.get("succeeded"):
        return ApiResult.fail(payload_message(payload) or messages.UNEXPECTED_ERROR, status_code=resp.status_code)
    data = payload.get("data") if isinstance(payload, dict) else None
    if isinstance(data, dict):
        data = University.from_api(data)
    return ApiResult.ok(data, payload_message(payload) or messages.UNIVERSITY_CREATED, status_code=resp.status_code)


def update_university(client: ApiClient, university_id: int, name: str) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    resp = client.put("University/update", json_body={"id": university_id, "name": name})
    result = envelope_result(resp, messages.UNIVERSITY_UPDATE_FAILED, convert=University.from_api)
    if not result.success and not resp.network_error and not payload_message(resp.payload):
        result.message = messages.UNIVERSITY_UPDATE_FAILED
        result.errors = [result.message]
    return result


def delete_university(client: ApiClient, university_id: int) -> ApiResult:
    resp = client.delete(f"University/delete/{university_id}")
    if resp.network_error:
        return resp.failure()
    payload = resp.payload if isinstance(resp.payload, dict) else {"succeeded": False, "message": resp.text}
    if not resp.ok or not payload.get("succeeded"):
        return ApiResult.fail(
            payload_message(payload) or messages.UNIVERSITY_DELETE_FAILED, status_code=resp.status_code
        )
    return ApiResult.ok(
        payload.get("data"), payload_message(payload) or messages.UNIVERSITY_DELETED, status_code=resp.status_code
    )
