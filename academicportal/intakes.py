"""
Intakes (academic years).

    GET    /Intake
    POST   /Intake
    PUT    /Intake/{id}
    DELETE /Intake/{id}

Responses without an envelope are treated as the bare payload of a successful
call.
"""

from __future__ import annotations

from typing import Any, Optional

from academicportal import messages
from academicportal.client import ApiClient, ApiResponse, is_envelope, payload_errors, payload_message
from academicportal.model import ApiResult, Intake


def _intake_result(resp: ApiResponse, many: bool = False) -> ApiResult:
    if not resp.ok:
        return resp.failure()
    payload = resp.payload
    if is_envelope(payload):
        if not payload.get("succeeded"):
            return ApiResult.fail(
                payload_message(payload) or messages.UNEXPECTED_ERROR,
                errors=payload_errors(payload) or None,
                status_code=resp.status_code,
            )
        data = payload.get("data")
        message = payload_message(payload) or ""
    else:
        data = payload
        message = ""

    if many:
        data = [Intake.from_api(x) for x in data if isinstance(x, dict)] if isinstance(data, list) else []
    elif isinstance(data, dict) and data:
        data = Intake.from_api(data)
    return ApiResult.ok(data, message, status_code=resp.status_code)


def get_intakes(client: ApiClient) -> ApiResult:
    return _intake_result(client.get("Intake"), many=True)


def create_intake(client: ApiClient, name: str, start_date: str, end_date: str) -> ApiResult:
    body = {"name": name, "startDate": start_date, "endDate": end_date}
    return _intake_result(client.post("Intake", json_body=body))


def update_intake(
    client: ApiClient,
    intake_id: int,
    name: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> ApiResult:
    body: dict[str, Any] = {"id": intake_id}
    if name is not None:
        body["name"] = name
    if start_date is not None:
        body["startDate"] = start_date
    if end_date is not None:
        body["endDate"] = end_date
    return _intake_result(client.put(f"Intake/{intake_id}", json_body=body))


def delete_intake(client: ApiClient, intake_id: int) -> ApiResult:
    resp = client.delete(f"Intake/{intake_id}")
    if resp.network_error:
        return ApiResult.fail(messages.INTAKE_DELETE_ERROR, errors=[messages.UNEXPECTED_ERROR], network_error=True)
    if resp.status_code == 500:
        # the backend refuses to delete a year that other records reference
        msg = payload_message(resp.payload) or messages.INTAKE_DELETE_LINKED
        return ApiResult.fail(msg, status_code=500)
    return _intake_result(resp)
