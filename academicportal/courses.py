"""
Courses.

    GET  /Course/GetAll?departmentId=&degreeId=&msarId=
    POST /Course/AddCourse          multipart form
    PUT  /Course/UpdateCourse       multipart form
    delete: /Course/DeleteCourse, with the path -> query -> POST fallback

Course records arrive in mixed casing; Course.from_api handles the mapping.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from academicportal import messages
from academicportal.client import ApiClient, ApiResponse, delete_result, is_envelope, list_result, payload_message
from academicportal.model import ApiResult, Course

logger = logging.getLogger(__name__)

DELETE_PATH = "Course/DeleteCourse"


def _semester_number(semester: Any) -> str:
    raw = str(semester if semester is not None else "").strip()
    try:
        return str(int(float(raw)))
    except ValueError:
        return "0"


def _course_result(resp: ApiResponse, failure_message: str) -> ApiResult:
    if not resp.ok:
        if resp.network_error:
            return resp.failure()
        return ApiResult.fail(payload_message(resp.payload) or resp.text or resp.error_message(), status_code=resp.status_code)
    payload = resp.payload
    if is_envelope(payload) and payload.get("succeeded"):
        item = payload.get("data") if isinstance(payload.get("data"), dict) else payload
        return ApiResult.ok(Course.from_api(item), payload_message(payload) or "", status_code=resp.status_code)
    return ApiResult.fail(payload_message(payload) or failure_message, status_code=resp.status_code)


def get_all_courses(
    client: ApiClient,
    department_id: Optional[int] = None,
    degree_id: Optional[int] = None,
    msar_id: Optional[int] = None,
) -> ApiResult:
    params: dict[str, Any] = {}
    if department_id:
        params["departmentId"] = department_id
    if degree_id:
        params["degreeId"] = degree_id
    if msar_id:
        params["msarId"] = msar_id
    resp = client.get("Course/GetAll", params=params or None)
    return list_result(resp, messages.COURSES_LOAD_FAILED, Course.from_api)


def create_course(
    client: ApiClient,
    code: str,
    name: str,
    credit_hours: int,
    is_optional: bool,
    semester: Any,
    msar_id: int,
    prerequisites: Iterable[Any] = (),
    instructors: Iterable[str] = (),
    description: str = "",
) -> ApiResult:
    """
    Prerequisite course ids and instructor national ids are sent as repeated
    form fields.
    """
    form: list[tuple[str, Any]] = [
        ("Code", str(code or "").strip()),
        ("Name", str(name or "").strip()),
        ("CreditHours", int(credit_hours)),
        ("IsOptional", "true" if is_optional else "false"),
        ("Semester", _semester_number(semester)),
        ("MsarId", int(msar_id)),
        ("Description", description or ""),
    ]
    for pid in prerequisites:
        if pid is not None and str(pid).strip():
            form.append(("PrerequisiteCourseIds", str(pid)))
    for nid in instructors:
        if nid:
            form.append(("InstructorNationalIds", str(nid)))

    logger.debug("create course form: %s", form)
    resp = client.post("Course/AddCourse", form=form)
    if not resp.ok and not resp.network_error:
        logger.warning("create course rejected: %s %s", resp.status_code, resp.text[:300])
    return _course_result(resp, messages.COURSE_CREATE_FAILED)


def update_course(
    client: ApiClient,
    course_id: str,
    code: str,
    name: str,
    credit_hours: int,
    is_optional: bool,
    semester: Any,
    msar_id: int,
    prerequisites: Iterable[str] = (),
    description: str = "",
) -> ApiResult:
    """
    DepartmentId and DegreeId are deliberately not sent: the update endpoint
    rejects them. Prerequisites go as one comma-joined field.
    """
    form: list[tuple[str, Any]] = [
        ("Id", course_id),
        ("Code", code),
        ("Name", name),
        ("CreditHours", int(credit_hours)),
        ("IsOptional", "true" if is_optional else "false"),
        ("Semester", str(semester)),
        ("MsarId", int(msar_id)),
        ("Prerequisites", ",".join(str(p) for p in prerequisites)),
    ]
    if description:
        form.append(("Description", description))
    resp = client.put("Course/UpdateCourse", form=form)
    if not resp.ok and not resp.network_error:
        msg = payload_message(resp.payload) or resp.error_message()
        return ApiResult.fail(msg, status_code=resp.status_code)
    return _course_result(resp, messages.COURSE_UPDATE_FAILED)


def delete_course(client: ApiClient, course_id: str) -> ApiResult:
    resp = client.delete_with_fallback(DELETE_PATH, course_id)
    return delete_result(resp, messages.COURSE_DELETED, messages.COURSE_DELETE_FAILED)
