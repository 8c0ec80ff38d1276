"""
Departments.

    GET    /Departments
    GET    /Departments?id={programId}   departments of one program
    POST   /Departments
    PUT    /Departments/{id}             (id repeated in the body)
    DELETE /Departments/{id}
"""

from __future__ import annotations

from typing import Any

from academicportal import messages
from academicportal.client import ApiClient, envelope_result, list_result, unwrap_list
from academicportal.lookups import normalize_lookup
from academicportal.model import ApiResult, Department


def _body(name: str, description: str, program_id: int) -> dict[str, Any]:
    return {"name": name, "description": description, "programId": program_id}


def get_departments(client: ApiClient) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    return list_result(
        client.get("Departments"), messages.DEPARTMENTS_LOAD_FAILED, Department.from_api, allow_bare=False
    )


def get_departments_by_program(client: ApiClient, program_id: int) -> ApiResult:
    """
    Departments of one program, as lookup items. An unreachable or failing
    backend yields an empty list (the choice stays usable, just empty).
    """
    resp = client.get("Departments", params={"id": program_id}, auth=False)
    if not resp.ok:
        result = resp.failure()
        result.data = []
        return result
    return ApiResult.ok(normalize_lookup(unwrap_list(resp.payload) or []), status_code=resp.status_code)


def create_department(client: ApiClient, name: str, description: str, program_id: int) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    resp = client.post("Departments", json_body=_body(name, description, program_id))
    return envelope_result(resp, messages.DEPARTMENT_CREATE_FAILED, convert=Department.from_api)


def update_department(
    client: ApiClient, department_id: int, name: str, description: str, program_id: int
) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    body = {"id": department_id, **_body(name, description, program_id)}
    resp = client.put(f"Departments/{department_id}", json_body=body)
    return envelope_result(resp, messages.DEPARTMENT_UPDATE_FAILED, convert=Department.from_api)


def delete_department(client: ApiClient, department_id: int) -> ApiResult:
    denied = client.login_required()
    if denied:
        return denied
    return envelope_result(client.delete(f"Departments/{department_id}"), messages.DEPARTMENT_DELETE_FAILED)
