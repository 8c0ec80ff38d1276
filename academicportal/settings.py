"""
User settings.

There is no settings endpoint on the backend: preferences are kept in the
local session file and password change is accepted locally after validation.
Every operation requires a logged-in session.
"""

from __future__ import annotations

import copy
import logging
import time
from typing import Any, Mapping, Optional

from academicportal import config, messages
from academicportal.model import ApiResult
from academicportal.storage import SessionStore
from academicportal.validation import validate_account_deletion, validate_new_password

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, dict[str, Any]] = {
    "notifications": {
        "emailNotifications": True,
        "pushNotifications": True,
        "smsNotifications": False,
        "requestUpdates": True,
        "systemUpdates": True,
        "marketingEmails": False,
    },
    "privacy": {
        "profileVisibility": "private",
        "showEmail": False,
        "showPhone": False,
        "allowDataSharing": False,
        "allowAnalytics": True,
    },
    "appearance": {
        "theme": "system",
        "language": "ar",
        "fontSize": "medium",
        "compactMode": False,
    },
}


class SettingsService:
    def __init__(self, store: SessionStore, delay: Optional[float] = None):
        self.store = store
        self.delay = config.get_mock_delay() if delay is None else delay

    def _wait(self) -> None:
        if self.delay > 0:
            time.sleep(self.delay)

    def _unauthorized(self) -> Optional[ApiResult]:
        if self.store.load().logged_in:
            return None
        return ApiResult.fail(messages.UNAUTHORIZED)

    def get(self) -> ApiResult:
        denied = self._unauthorized()
        if denied:
            return denied
        self._wait()
        session = self.store.load()
        data: dict[str, Any] = {"profile": session.user if isinstance(session.user, dict) else {}}
        for section, defaults in DEFAULT_SETTINGS.items():
            data[section] = {**copy.deepcopy(defaults), **session.settings.get(section, {})}
        return ApiResult.ok(data, messages.SETTINGS_LOADED)

    def update_profile(self, changes: Mapping[str, Any]) -> ApiResult:
        denied = self._unauthorized()
        if denied:
            return denied
        self._wait()
        session = self.store.load()
        if isinstance(session.user, dict):
            session.user = {**session.user, **changes}
            self.store.save(session)
        return ApiResult.ok(dict(changes), messages.PROFILE_UPDATED)

    def _update_section(self, section: str, changes: Mapping[str, Any], message: str) -> ApiResult:
        denied = self._unauthorized()
        if denied:
            return denied
        self._wait()
        unknown = set(changes) - set(DEFAULT_SETTINGS[section])
        if unknown:
            logger.warning("ignoring unknown %s settings: %s", section, ", ".join(sorted(unknown)))
        values = {k: v for k, v in changes.items() if k in DEFAULT_SETTINGS[section]}
        session = self.store.load()
        session.settings[section] = {**session.settings.get(section, {}), **values}
        self.store.save(session)
        return ApiResult.ok(values, message)

    def update_notifications(self, changes: Mapping[str, Any]) -> ApiResult:
        return self._update_section("notifications", changes, messages.NOTIFICATIONS_UPDATED)

    def update_privacy(self, changes: Mapping[str, Any]) -> ApiResult:
        return self._update_section("privacy", changes, messages.PRIVACY_UPDATED)

    def update_appearance(self, changes: Mapping[str, Any]) -> ApiResult:
        return self._update_section("appearance", changes, messages.APPEARANCE_UPDATED)

    def change_password(self, current_password: str, new_password: str) -> ApiResult:
        denied = self._unauthorized()
        if denied:
            return denied
        errors = validate_new_password(new_password)
        if errors:
            return ApiResult.fail(errors["newPassword"], errors=list(errors.values()))
        self._wait()
        # no backend endpoint for password changes; accepted locally
        return ApiResult.ok(None, messages.PASSWORD_CHANGED)

    def delete_account(self, confirmation: str) -> ApiResult:
        denied = self._unauthorized()
        if denied:
            return denied
        errors = validate_account_deletion(confirmation)
        if errors:
            return ApiResult.fail(errors["confirmation"])
        self._wait()
        self.store.clear()
        return ApiResult.ok(None, messages.ACCOUNT_DELETED)
