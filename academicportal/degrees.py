"""
Degrees.

    GET    /Degree
    GET    /Degree/by-department/{departmentId}
    POST   /Degree
    PUT    /Degree            (id travels in the body)
    DELETE /Degree/{id}
"""

from __future__ import annotations

from typing import Any, Optional

from academicportal import messages
from academicportal.client import (
    ApiClient,
    ApiResponse,
    is_envelope,
    list_result,
    payload_errors,
    payload_message,
)
from academicportal.model import ApiResult, Degree


def _degree_body(
    name: str,
    department_id: int,
    general_degree: str,
    description: Optional[str] = None,
    standard_duration_years: Optional[int] = None,
    degree_id: int = 0,
) -> dict[str, Any]:
    return {
        "id": degree_id,
        "name": name,
        "description": description or "",
        "standardDurationYears": standard_duration_years or 0,
        "departmentId": department_id,
        "generalDegree": general_degree,
    }


def _mutation_result(resp: ApiResponse, success_message: str) -> ApiResult:
    """
    Mutations answer with an envelope, or with the bare record.
    """
    if not resp.ok:
        return resp.failure()
    payload = resp.payload
    if is_envelope(payload):
        data = payload.get("data")
        degree = Degree.from_api(data) if isinstance(data, dict) else None
        if payload.get("succeeded"):
            return ApiResult.ok(degree, payload_message(payload) or success_message, status_code=resp.status_code)
        return ApiResult.fail(
            payload_message(payload) or messages.UNEXPECTED_ERROR,
            errors=payload_errors(payload) or None,
            status_code=resp.status_code,
        )
    degree = Degree.from_api(payload) if isinstance(payload, dict) else None
    return ApiResult.ok(degree, success_message, status_code=resp.status_code)


def get_degrees(client: ApiClient) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    resp = client.get("Degree")
    if resp.ok and not is_envelope(resp.payload) and not isinstance(resp.payload, list):
        # unrecognized body: treat as an empty list, not a failure
        return ApiResult.ok([], "Operation successful", status_code=resp.status_code)
    result = list_result(resp, messages.DEGREES_LOAD_FAILED, Degree.from_api)
    if is_envelope(resp.payload):
        result.errors = payload_errors(resp.payload) or result.errors
    return result


def get_degrees_by_department(client: ApiClient, department_id: int) -> ApiResult:
    resp = client.get(f"Degree/by-department/{department_id}")
    if resp.ok and "json" not in resp.content_type.lower() and not isinstance(resp.payload, (dict, list)):
        return ApiResult.fail(f"Expected JSON but got: {resp.text[:200]}", status_code=resp.status_code)
    return list_result(resp, messages.DEGREES_LOAD_FAILED, Degree.from_api, allow_bare=False)


def create_degree(
    client: ApiClient,
    name: str,
    department_id: int,
    general_degree: str,
    description: Optional[str] = None,
    standard_duration_years: Optional[int] = None,
) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    body = _degree_body(name, department_id, general_degree, description, standard_duration_years)
    return _mutation_result(client.post("Degree", json_body=body), messages.DEGREE_CREATED)


def update_degree(
    client: ApiClient,
    degree_id: int,
    name: str,
    department_id: int,
    general_degree: str,
    description: Optional[str] = None,
    standard_duration_years: Optional[int] = None,
) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    body = _degree_body(name, department_id, general_degree, description, standard_duration_years, degree_id)
    return _mutation_result(client.put("Degree", json_body=body), messages.DEGREE_UPDATED)


def delete_degree(client: ApiClient, degree_id: int) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    resp = client.delete(f"Degree/{degree_id}")
    if resp.ok and is_envelope(resp.payload) and not resp.payload.get("succeeded"):
        return ApiResult.fail(payload_message(resp.payload) or messages.UNEXPECTED_ERROR, status_code=resp.status_code)
    if resp.ok:
        return ApiResult.ok(None, payload_message(resp.payload) or messages.DEGREE_DELETED, status_code=resp.status_code)
    return resp.failure()
