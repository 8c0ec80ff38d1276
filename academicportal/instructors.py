"""
Instructors (faculty members).

    GET  /Instructor/GetAll
    POST /Instructor/AddInstructor       multipart: Name, AcademicTitle, DepartmentId, NationalId, Phone, Email
    PUT  /Instructor/UpdateInstructor    multipart: Id, Name, AcademicTitle, DepartmentId, Phone, Email
    delete: /Instructor/DeleteInstructor with the path -> query -> POST fallback
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from academicportal import messages
from academicportal.client import ApiClient, ApiResponse, delete_result, list_result, payload_message
from academicportal.model import ApiResult, Instructor, pick

logger = logging.getLogger(__name__)

DELETE_PATH = "Instructor/DeleteInstructor"

# markers of a SQL Server primary-key violation (error 2627)
DUPLICATE_MARKERS = ("duplicate key", "PK_Instructors", "2627")


def is_duplicate_key_error(message: Optional[str]) -> bool:
    if not message:
        return False
    lowered = message.lower()
    return any(m.lower() in lowered for m in DUPLICATE_MARKERS)


def _merge_instructor(item: Any, fallback: dict[str, Any]) -> Optional[Instructor]:
    if not isinstance(item, dict):
        return None
    inst = Instructor.from_api(item)
    if not inst.id and fallback.get("id"):
        inst.id = str(fallback["id"])
    if not inst.name:
        inst.name = fallback.get("name", "")
    if not inst.title and fallback.get("academic_title") is not None:
        inst.title = str(pick(item, "academicTitle", "AcademicTitle", default=fallback["academic_title"]))
    return inst


def _mutation_result(resp: ApiResponse, failure_message: str, fallback: dict[str, Any]) -> ApiResult:
    payload = resp.payload
    if not resp.ok:
        if resp.network_error:
            return resp.failure()
        backend_msg = payload_message(payload)
        if is_duplicate_key_error(backend_msg):
            backend_msg = messages.INSTRUCTOR_DUPLICATE
        return ApiResult.fail(backend_msg or resp.error_message(), status_code=resp.status_code)
    if isinstance(payload, dict) and payload.get("succeeded"):
        inst = _merge_instructor(payload.get("data"), fallback)
        return ApiResult.ok(inst, payload_message(payload) or "", status_code=resp.status_code)
    return ApiResult.fail(payload_message(payload) or failure_message, status_code=resp.status_code)


def get_all_instructors(client: ApiClient) -> ApiResult:
    resp = client.get("Instructor/GetAll")
    if not resp.ok and not resp.network_error:
        return ApiResult.fail(f"Failed: {resp.reason}".rstrip(), status_code=resp.status_code)
    return list_result(resp, messages.INSTRUCTORS_LOAD_FAILED, Instructor.from_api)


def create_instructor(
    client: ApiClient,
    name: str,
    academic_title: int,
    department_id: int,
    national_id: str,
    phone: str,
    email: str,
) -> ApiResult:
    form = [
        ("Name", name),
        ("AcademicTitle", academic_title),
        ("DepartmentId", department_id),
        ("NationalId", national_id),
        ("Phone", phone),
        ("Email", email),
    ]
    resp = client.post("Instructor/AddInstructor", form=form)
    logger.debug("create instructor -> %s %s", resp.status_code, resp.text[:300])
    return _mutation_result(
        resp, messages.INSTRUCTOR_CREATE_FAILED, {"name": name, "academic_title": academic_title}
    )


def update_instructor(
    client: ApiClient,
    instructor_id: str,
    name: str,
    academic_title: int,
    department_id: int,
    phone: str,
    email: str,
) -> ApiResult:
    form = [
        ("Id", instructor_id),
        ("Name", name),
        ("AcademicTitle", academic_title),
        ("DepartmentId", department_id),
        ("Phone", phone),
        ("Email", email),
    ]
    resp = client.put("Instructor/UpdateInstructor", form=form)
    return _mutation_result(resp, messages.INSTRUCTOR_UPDATE_FAILED, {"id": instructor_id, "name": name})


def delete_instructor(client: ApiClient, instructor_id: str) -> ApiResult:
    resp = client.delete_with_fallback(DELETE_PATH, instructor_id)
    return delete_result(resp, messages.INSTRUCTOR_DELETED, messages.INSTRUCTOR_DELETE_FAILED)
