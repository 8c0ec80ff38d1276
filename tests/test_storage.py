"""
Unit tests for the persisted login session.

Storage contract:
- Missing/invalid file -> empty session
- Unknown keys in the file are ignored
- clear() removes the file and tolerates it being gone
"""

import json
import tempfile
import unittest
from pathlib import Path

from academicportal.storage import Session, SessionStore


class TestSessionStore(unittest.TestCase):
    def test_load_missing_file_returns_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            session = SessionStore(Path(d) / "missing.json").load()
            self.assertFalse(session.logged_in)
            self.assertEqual(session.settings, {})

    def test_save_and_load_roundtrip(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "nested" / "session.json"
            store = SessionStore(p)
            store.save(Session(token="abc", user={"name": "منى"}, role="student", national_id="29801011234567", has_card=False))

            loaded = store.load()
            self.assertEqual(loaded.token, "abc")
            self.assertEqual(loaded.user, {"name": "منى"})
            self.assertEqual(loaded.national_id, "29801011234567")
            self.assertIs(loaded.has_card, False)

            # Arabic text is stored as is, not escaped
            self.assertIn("منى", p.read_text(encoding="utf-8"))

    def test_corrupt_file_returns_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "session.json"
            p.write_text("{not json", encoding="utf-8")
            self.assertEqual(SessionStore(p).load(), Session())
            p.write_text("[1, 2]", encoding="utf-8")
            self.assertEqual(SessionStore(p).load(), Session())

    def test_unknown_keys_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "session.json"
            p.write_text(json.dumps({"token": "t", "legacy": 1, "settings": "bad"}), encoding="utf-8")
            session = SessionStore(p).load()
            self.assertEqual(session.token, "t")
            self.assertEqual(session.settings, {})

    def test_update_and_clear(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "session.json"
            store = SessionStore(p)
            store.update(token="t", role="Admin")
            self.assertTrue(store.load().is_admin)
            with self.assertRaises(AttributeError):
                store.update(password="x")

            store.clear()
            self.assertFalse(p.exists())
            store.clear()


if __name__ == "__main__":
    unittest.main()
