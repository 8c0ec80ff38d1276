"""
Unit tests for login, token handling and post-login routing.

Routing contract:
- admin -> settings
- student without a registration card -> student-registration
- everyone else -> dashboard
Role comparison ignores case.
"""

import tempfile
import unittest
from pathlib import Path

from jose import jwt

from academicportal import auth, messages
from academicportal.model import ApiResult
from academicportal.storage import SessionStore
from tests.fakes import FakeSession, json_response, make_client

NID = "29801011234567"


def _token(**claims) -> str:
    return jwt.encode(claims, "test-secret", algorithm="HS256")


class TestLogin(unittest.TestCase):
    def test_token_lookup_locations(self) -> None:
        for payload in (
            {"token": "a"},
            {"access_token": "a"},
            {"data": {"token": "a"}},
            {"result": {"jwt": "a"}},
        ):
            session = FakeSession().add("POST", "Auth", json_response(payload))
            result = auth.login(make_client(session, token=None), NID, "secret123")
            self.assertTrue(result.success, payload)
            self.assertEqual(result.data.token, "a")

    def test_login_sends_no_bearer(self) -> None:
        session = FakeSession().add("POST", "Auth", json_response({"token": "a"}))
        auth.login(make_client(session), NID, "secret123")
        call = session.calls[0]
        self.assertNotIn("Authorization", call.kwargs["headers"])
        self.assertEqual(call.kwargs["json"], {"nationalId": NID, "password": "secret123"})

    def test_login_rejected(self) -> None:
        session = FakeSession().add("POST", "Auth", json_response({}, status=401, reason="Unauthorized"))
        result = auth.login(make_client(session), NID, "wrong-pass")
        self.assertFalse(result.success)
        self.assertEqual(result.message, messages.LOGIN_FAILED)

    def test_has_card_from_data(self) -> None:
        session = FakeSession().add("POST", "Auth", json_response({"data": {"token": "a", "hasCard": True}}))
        result = auth.login(make_client(session), NID, "secret123")
        self.assertIs(result.data.has_card, True)


class TestClaims(unittest.TestCase):
    def test_decode_claims(self) -> None:
        token = _token(Role="Admin", NationalId=NID)
        claims = auth.decode_claims(token)
        self.assertEqual(auth.role_from_claims(claims), "admin")
        self.assertEqual(auth.national_id_from_claims(claims), NID)

    def test_long_claim_names(self) -> None:
        claims = auth.decode_claims(_token(**{auth.ROLE_CLAIM: "Student", auth.NAME_IDENTIFIER_CLAIM: NID}))
        self.assertEqual(auth.role_from_claims(claims), "student")
        self.assertEqual(auth.national_id_from_claims(claims), NID)

    def test_bad_token(self) -> None:
        self.assertEqual(auth.decode_claims("not-a-jwt"), {})
        self.assertEqual(auth.role_from_claims({}), "user")
        self.assertEqual(auth.role_from_claims({}, {"role": "Student"}), "student")

    def test_next_page(self) -> None:
        self.assertEqual(auth.next_page_for("admin", False), auth.PAGE_SETTINGS)
        self.assertEqual(auth.next_page_for("student", False), auth.PAGE_STUDENT_REGISTRATION)
        self.assertEqual(auth.next_page_for("student", True), auth.PAGE_DASHBOARD)
        self.assertEqual(auth.next_page_for("user", False), auth.PAGE_DASHBOARD)


class TestCompleteLogin(unittest.TestCase):
    def test_student_without_card(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            store = SessionStore(Path(d) / "session.json")
            store.update(settings={"appearance": {"theme": "dark"}})
            data = auth.LoginData(token=_token(Role="STUDENT", NationalId=NID), user={"name": "x"}, has_card=None)

            result = auth.complete_login(ApiResult.ok(data), store)
            self.assertTrue(result.success)
            outcome = result.data
            self.assertEqual(outcome.next_page, auth.PAGE_STUDENT_REGISTRATION)
            self.assertEqual(outcome.message, messages.COMPLETE_PROFILE)

            saved = store.load()
            self.assertEqual(saved.role, "student")
            self.assertEqual(saved.national_id, NID)
            self.assertIs(saved.has_card, False)
            self.assertEqual(saved.settings, {"appearance": {"theme": "dark"}})

    def test_admin_goes_to_settings(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            store = SessionStore(Path(d) / "session.json")
            data = auth.LoginData(token=_token(Role="Admin"))
            outcome = auth.complete_login(ApiResult.ok(data), store).data
            self.assertEqual(outcome.next_page, auth.PAGE_SETTINGS)
            self.assertEqual(outcome.message, messages.LOGIN_REDIRECT)

    def test_missing_token(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            store = SessionStore(Path(d) / "session.json")
            result = auth.complete_login(ApiResult.ok(auth.LoginData(token=None)), store)
            self.assertFalse(result.success)
            self.assertEqual(result.message, messages.TOKEN_MISSING)
            self.assertFalse(store.path.exists())

    def test_logout_clears_session(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            store = SessionStore(Path(d) / "session.json")
            store.update(token="t")
            auth.logout(store)
            self.assertFalse(store.load().logged_in)


if __name__ == "__main__":
    unittest.main()
