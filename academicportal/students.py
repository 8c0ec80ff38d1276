"""
Students and registration cards.

    GET  /Student
    POST /Student/add
    GET  /RegisterationCard/getByNationalNumber/{nationalId}
    POST /RegisterationCard/AddRegistrationCard     multipart, with attachments
"""

from __future__ import annotations

import logging
import os
from contextlib import ExitStack
from typing import Any, BinaryIO, Mapping, Optional

from academicportal import messages
from academicportal.client import ApiClient, is_envelope, payload_message
from academicportal.errors import FormValidationError
from academicportal.model import ApiResult, Qualification, Student
from academicportal.validation import ensure_student_registration, validate_registration_card

logger = logging.getLogger(__name__)

# numeric student fields; empty or missing values are sent as 0
NUMERIC_FIELDS = ("nationality", "militaryService", "gpa", "grade", "collegeId", "universityId")
TEXT_FIELDS = (
    "nationalId",
    "firstName",
    "secondName",
    "thirdName",
    "email",
    "dateOfBirth",
    "placeOfBirth",
    "profession",
    "phone",
    "address",
    "notes",
)

# attachment display names -> dashboard keys
ATTACHMENT_KEYS = {
    "البكالوريوس": "degreeImage",
    "الماجستير": "masterImage",
    "المعادلة": "transferImage",
}

ATTACHMENT_FIELDS = ("BachelorDegree", "MasterDegree", "EquivalencyDegree")


def _number(value: Any) -> float | int:
    if value in (None, ""):
        return 0
    try:
        num = float(value)
    except (TypeError, ValueError):
        return 0
    return int(num) if num.is_integer() else num


def clean_qualifications(items: Any) -> list[dict[str, Any]]:
    """
    Drop qualifications missing a type or an institution; coerce the numbers.
    """
    out: list[dict[str, Any]] = []
    for q in items or []:
        if isinstance(q, Qualification):
            q = {
                "qualification": q.qualification,
                "institution": q.institution,
                "grade": q.grade,
                "dateObtained": q.date_obtained,
            }
        if not isinstance(q, Mapping):
            continue
        if not q.get("qualification") or not q.get("institution"):
            continue
        out.append(
            {
                "qualification": _number(q.get("qualification")),
                "institution": q["institution"],
                "grade": _number(q.get("grade")),
                "dateObtained": q.get("dateObtained") or q.get("date_obtained") or None,
            }
        )
    return out


def build_student_payload(data: Mapping[str, Any]) -> dict[str, Any]:
    payload: dict[str, Any] = {k: data.get(k) or "" for k in TEXT_FIELDS}
    for k in NUMERIC_FIELDS:
        payload[k] = _number(data.get(k))
    # the backend names the field `major`
    payload["major"] = _number(data.get("majorId"))
    payload["qualifications"] = clean_qualifications(data.get("qualifications"))
    return payload


def add_student(client: ApiClient, data: Mapping[str, Any]) -> ApiResult:
    """
    Save a student record.

    Raises FormValidationError when no usable qualification is left once the
    incomplete rows are dropped.
    """
    denied = client.login_required()
    if denied:
        return denied
    payload = build_student_payload(data)
    ensure_student_registration(payload, client.token)
    logger.debug("student payload: %s", payload)
    resp = client.post("Student/add", json_body=payload)
    if resp.network_error:
        return resp.failure()
    if not resp.ok:
        if resp.status_code == 404:
            return ApiResult.fail(messages.STUDENT_NOT_FOUND, status_code=404)
        return ApiResult.fail(payload_message(resp.payload) or messages.STUDENT_SAVE_FAILED, status_code=resp.status_code)

    body = resp.payload if isinstance(resp.payload, dict) else {}
    success = body.get("success", True)
    data_out = body.get("data") or resp.payload
    message = payload_message(body) or messages.STUDENT_SAVED
    if not success:
        return ApiResult.fail(message, status_code=resp.status_code, data=data_out)
    return ApiResult.ok(data_out, message, status_code=resp.status_code)


def get_students(client: ApiClient) -> ApiResult:
    resp = client.get("Student")
    if not resp.ok:
        if resp.network_error:
            return resp.failure()
        return ApiResult.fail(f"فشل في جلب البيانات: {resp.status_code}", status_code=resp.status_code)
    payload = resp.payload
    if is_envelope(payload):
        if not payload.get("succeeded"):
            return ApiResult.fail(payload_message(payload) or messages.STUDENTS_LOAD_FAILED, status_code=resp.status_code)
        items = payload.get("data") or []
        message = payload_message(payload) or ""
    else:
        items = payload if isinstance(payload, list) else []
        message = ""
    data = [Student.from_api(x) for x in items if isinstance(x, dict)]
    return ApiResult.ok(data, message, status_code=resp.status_code)


def file_url(client: ApiClient, file_name: Any) -> str:
    return client.url(f"Files/GetFile/{file_name}")


def get_student_dashboard(client: ApiClient, national_id: str) -> ApiResult:
    """
    Registration card of one student, with links to its attachments.
    """
    if not national_id:
        return ApiResult.fail(messages.NATIONAL_ID_PROMPT)
    resp = client.get(f"RegisterationCard/getByNationalNumber/{national_id}", auth=False)
    if not resp.ok:
        if resp.network_error:
            return resp.failure()
        return ApiResult.fail(messages.STUDENT_FETCH_FAILED, status_code=resp.status_code)
    payload = resp.payload
    if not is_envelope(payload) or not payload.get("succeeded"):
        return ApiResult.fail(payload_message(payload) or messages.STUDENT_NO_DATA, status_code=resp.status_code)

    if not isinstance(payload.get("data"), dict):
        return ApiResult.fail(messages.STUDENT_NO_DATA, status_code=resp.status_code)
    data = dict(payload["data"])
    attachments = data.get("attachments") or []
    for marker, key in ATTACHMENT_KEYS.items():
        data[key] = None
        for att in attachments:
            if isinstance(att, dict) and marker in str(att.get("displayName", "")):
                data[key] = file_url(client, att.get("fileName"))
                break
    return ApiResult.ok(data, payload_message(payload) or "", status_code=resp.status_code)


def _attachment(field: str, value: Any, stack: ExitStack) -> Optional[tuple]:
    """
    Multipart part for one attachment. Paths are opened on `stack`; file
    objects handed in by the caller stay open.
    """
    if value is None:
        return None
    if isinstance(value, tuple):
        return value
    if isinstance(value, (str, os.PathLike)):
        path = os.fspath(value)
        fh: BinaryIO = stack.enter_context(open(path, "rb"))
        return os.path.basename(path), fh
    # already an open file object
    name = os.path.basename(getattr(value, "name", field))
    return name, value


def generate_registration_card(
    client: ApiClient,
    form: Mapping[str, Any],
    files: Optional[Mapping[str, Any]] = None,
) -> ApiResult:
    """
    Submit a registration card.

    `form` uses the field names nationalId, firstName, secondName, thirdName,
    phoneNumber, grade, departmentId, degreeId, collegeId, universityId,
    requestTypeId, semesterId, languageId and year. `files` maps
    BachelorDegree / MasterDegree / EquivalencyDegree to a path, an open
    binary file, or a ready (filename, fileobj) tuple.

    Raises FormValidationError when a required field is missing.
    """
    errors = validate_registration_card(form)
    if errors:
        raise FormValidationError(errors)

    fields: list[tuple[str, Any]] = [
        ("NationalId", form["nationalId"]),
        ("FirstName", form["firstName"]),
        ("SecondName", form["secondName"]),
        ("ThirdName", form["thirdName"]),
        ("PhoneNumber", form["phoneNumber"]),
        ("Grade", form.get("grade") or ""),
        ("Major", form.get("departmentId") or ""),
        ("DegreeId", form.get("degreeId") or ""),
        ("DepartmentId", form.get("departmentId") or ""),
        ("CollegeId", form.get("collegeId") or ""),
        ("UniversityId", form.get("universityId") or ""),
        ("KindOfRequest", form["requestTypeId"]),
        ("Semester", form["semesterId"]),
        ("Language", form["languageId"]),
        ("Year", form.get("year") or ""),
    ]

    with ExitStack() as stack:
        for name in ATTACHMENT_FIELDS:
            part = _attachment(name, (files or {}).get(name), stack)
            if part is not None:
                fields.append((name, part))
        resp = client.post("RegisterationCard/AddRegistrationCard", form=fields)

    if not resp.ok:
        if resp.network_error:
            return resp.failure()
        return ApiResult.fail(f"HTTP {resp.status_code}: {resp.text}", status_code=resp.status_code)
    payload = resp.payload
    if isinstance(payload, dict):
        success = payload.get("success", payload.get("succeeded", True))
        message = payload_message(payload) or ""
        if not success:
            return ApiResult.fail(message or messages.UNEXPECTED_ERROR, status_code=resp.status_code, data=payload)
        return ApiResult.ok(payload.get("data", payload), message, status_code=resp.status_code)
    return ApiResult.ok(payload, status_code=resp.status_code)
