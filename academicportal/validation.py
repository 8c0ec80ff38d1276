"""
Client-side form validation.

Each validate_* function returns a dict mapping a field name to a localized
message; an empty dict means the form is valid. The ensure_* helpers raise
FormValidationError instead, for callers that submit right away.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from academicportal import messages
from academicportal.errors import FormValidationError

NATIONAL_ID_LENGTH = 14
PHONE_LENGTH = 11
PASSWORD_MIN_LENGTH = 8


def _text(form: Mapping[str, Any], key: str) -> str:
    value = form.get(key)
    return "" if value is None else str(value).strip()


def _check_national_id(value: str) -> Optional[str]:
    if not value:
        return messages.NATIONAL_ID_REQUIRED
    if len(value) != NATIONAL_ID_LENGTH:
        return messages.NATIONAL_ID_LENGTH
    if not value.isdigit():
        return messages.NATIONAL_ID_DIGITS
    return None


def _check_password(value: str) -> Optional[str]:
    if not value:
        return messages.PASSWORD_REQUIRED
    if len(value) < PASSWORD_MIN_LENGTH:
        return messages.PASSWORD_LENGTH
    return None


def validate_login(form: Mapping[str, Any]) -> dict[str, str]:
    errors: dict[str, str] = {}
    nid_error = _check_national_id(_text(form, "nationalId"))
    if nid_error:
        errors["nationalId"] = nid_error
    # passwords are not stripped: spaces count
    pw_error = _check_password(str(form.get("password") or ""))
    if pw_error:
        errors["password"] = pw_error
    return errors


def validate_signup(form: Mapping[str, Any]) -> dict[str, str]:
    errors: dict[str, str] = {}
    nid_error = _check_national_id(_text(form, "nationalId"))
    if nid_error:
        errors["nationalId"] = nid_error

    phone = _text(form, "phoneNumber")
    if not phone:
        errors["phoneNumber"] = messages.PHONE_REQUIRED
    elif len(phone) != PHONE_LENGTH:
        errors["phoneNumber"] = messages.PHONE_LENGTH

    password = str(form.get("password") or "")
    pw_error = _check_password(password)
    if pw_error:
        errors["password"] = pw_error

    confirm = str(form.get("confirmPassword") or "")
    if not confirm:
        errors["confirmPassword"] = messages.CONFIRM_REQUIRED
    elif confirm != password:
        errors["confirmPassword"] = messages.CONFIRM_MISMATCH
    return errors


def validate_registration_card(form: Mapping[str, Any]) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not _text(form, "nationalId"):
        errors["nationalId"] = messages.NATIONAL_ID_MISSING
    if not all(_text(form, k) for k in ("firstName", "secondName", "thirdName")):
        errors["fullName"] = messages.FULL_NAME_REQUIRED
    if not _text(form, "phoneNumber"):
        errors["phoneNumber"] = messages.PHONE_NUMBER_REQUIRED
    if not _text(form, "requestTypeId"):
        errors["requestTypeId"] = messages.REQUEST_TYPE_REQUIRED
    if not _text(form, "semesterId"):
        errors["semesterId"] = messages.SEMESTER_REQUIRED
    if not _text(form, "languageId"):
        errors["languageId"] = messages.LANGUAGE_REQUIRED
    return errors


def validate_student_registration(form: Mapping[str, Any], token: Optional[str]) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not token:
        errors["token"] = messages.LOGIN_REQUIRED
    qualifications = form.get("qualifications") or []
    if not qualifications:
        errors["qualifications"] = messages.QUALIFICATION_REQUIRED
    return errors


def validate_new_password(new_password: str) -> dict[str, str]:
    error = _check_password(new_password or "")
    return {"newPassword": error} if error else {}


def validate_account_deletion(confirmation: str) -> dict[str, str]:
    if (confirmation or "").strip() != messages.DELETE_ACCOUNT_CONFIRMATION:
        return {"confirmation": messages.CONFIRMATION_WRONG}
    return {}


def ensure_valid(errors: dict[str, str]) -> None:
    if errors:
        raise FormValidationError(errors)


def ensure_login(form: Mapping[str, Any]) -> None:
    ensure_valid(validate_login(form))


def ensure_signup(form: Mapping[str, Any]) -> None:
    ensure_valid(validate_signup(form))


def ensure_student_registration(form: Mapping[str, Any], token: Optional[str]) -> None:
    ensure_valid(validate_student_registration(form, token))
