"""
Exception types.

Backend and network failures are never raised: API functions turn them into a
failed ApiResult. Exceptions are reserved for problems the caller must fix
(bad configuration, invalid form input).
"""

from __future__ import annotations


class PortalError(Exception):
    """Base class for all errors raised by academicportal."""


class ConfigError(PortalError):
    pass


class FormValidationError(PortalError):
    """
    Raised when submitted form data fails client-side validation.

    `errors` maps a field name to a localized message, the same shape the
    front end shows inline next to each field.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(self.errors.values()) or "invalid form")
