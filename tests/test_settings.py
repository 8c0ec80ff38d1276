"""
Unit tests for locally stored user settings.
"""

import tempfile
import unittest
from pathlib import Path

from academicportal import messages
from academicportal.settings import DEFAULT_SETTINGS, SettingsService
from academicportal.storage import SessionStore


class TestSettingsService(unittest.TestCase):
    def setUp(self) -> None:
        self._dir = tempfile.TemporaryDirectory()
        self.store = SessionStore(Path(self._dir.name) / "session.json")
        self.service = SettingsService(self.store, delay=0)

    def tearDown(self) -> None:
        self._dir.cleanup()

    def _login(self) -> None:
        self.store.update(token="t", user={"name": "منى", "email": "m@x.eg"})

    def test_requires_session(self) -> None:
        self.assertEqual(self.service.get().message, messages.UNAUTHORIZED)
        self.assertEqual(self.service.update_privacy({"showEmail": True}).message, messages.UNAUTHORIZED)

    def test_defaults_and_profile(self) -> None:
        self._login()
        data = self.service.get().data
        self.assertEqual(data["profile"]["name"], "منى")
        self.assertEqual(data["appearance"], DEFAULT_SETTINGS["appearance"])

    def test_update_section_ignores_unknown_keys(self) -> None:
        self._login()
        result = self.service.update_appearance({"theme": "dark", "wallpaper": "x"})
        self.assertEqual(result.data, {"theme": "dark"})
        self.assertEqual(result.message, messages.APPEARANCE_UPDATED)

        appearance = self.service.get().data["appearance"]
        self.assertEqual(appearance["theme"], "dark")
        self.assertEqual(appearance["language"], "ar")
        self.assertNotIn("wallpaper", appearance)

    def test_update_profile_persists(self) -> None:
        self._login()
        self.service.update_profile({"email": "new@x.eg"})
        self.assertEqual(self.store.load().user["email"], "new@x.eg")

    def test_change_password_validates(self) -> None:
        self._login()
        self.assertEqual(self.service.change_password("old", "short").message, messages.PASSWORD_LENGTH)
        self.assertTrue(self.service.change_password("old", "much-longer").success)

    def test_delete_account(self) -> None:
        self._login()
        self.assertEqual(self.service.delete_account("ok").message, messages.CONFIRMATION_WRONG)
        self.assertTrue(self.store.load().logged_in)
        result = self.service.delete_account(messages.DELETE_ACCOUNT_CONFIRMATION)
        self.assertEqual(result.message, messages.ACCOUNT_DELETED)
        self.assertFalse(self.store.load().logged_in)


if __name__ == "__main__":
    unittest.main()
