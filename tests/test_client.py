"""
Unit tests for the shared HTTP layer.

Contract:
- bodies are parsed as JSON, falling back to the raw text
- failures carry the backend message, else "Failed: <status> <reason>"
- HTML error pages are reduced to their visible text
- network errors come back as status 0 / network_error, never raised
- delete negotiation: path -> query string -> POST form
"""

import json
import unittest

from academicportal import messages
from academicportal.client import (
    ApiResponse,
    delete_result,
    envelope_result,
    html_to_text,
    list_result,
    multipart,
    parse_body,
)
from academicportal.config import normalize_base_url
from academicportal.errors import ConfigError
from tests.fakes import FakeSession, envelope, json_response, make_client, text_response


def _resp(status: int, payload, text=None, reason: str = "OK") -> ApiResponse:
    if text is None:
        text = payload if isinstance(payload, str) else json.dumps(payload)
    return ApiResponse(status_code=status, reason=reason, text=text, payload=payload)


class TestBodyParsing(unittest.TestCase):
    def test_parse_body_json_and_fallback(self) -> None:
        self.assertEqual(parse_body('{"a": 1}'), {"a": 1})
        self.assertEqual(parse_body("true"), True)
        self.assertEqual(parse_body("not json"), "not json")
        self.assertEqual(parse_body(""), "")

    def test_html_to_text_drops_scripts(self) -> None:
        html = "<html><head><title>x</title><style>p{}</style></head><body><h1>Server Error</h1><script>x()</script><p>in /api</p></body></html>"
        self.assertEqual(html_to_text(html), "Server Error in /api")

    def test_error_message_uses_backend_message(self) -> None:
        resp = _resp(400, {"message": "bad name"}, reason="Bad Request")
        self.assertEqual(resp.error_message(), "bad name")

    def test_error_message_default(self) -> None:
        resp = _resp(500, "", reason="Internal Server Error")
        self.assertEqual(resp.error_message(), "Failed: 500 Internal Server Error")

    def test_error_message_html(self) -> None:
        html = "<!DOCTYPE html><html><body><h2>Runtime Error</h2></body></html>"
        resp = _resp(500, html, text=html, reason="Internal Server Error")
        self.assertEqual(resp.error_message(), "Failed: 500 Internal Server Error | Runtime Error")


class TestNormalization(unittest.TestCase):
    def test_envelope_success(self) -> None:
        result = envelope_result(_resp(200, envelope({"id": 1}, message="done")), "failed")
        self.assertTrue(result.success)
        self.assertEqual(result.data, {"id": 1})
        self.assertEqual(result.message, "done")

    def test_envelope_refused(self) -> None:
        result = envelope_result(_resp(200, envelope(None, succeeded=False, errors=["e1", "e2"])), "failed")
        self.assertFalse(result.success)
        self.assertEqual(result.message, "failed")
        self.assertEqual(result.errors, ["e1", "e2"])

    def test_envelope_required_for_success(self) -> None:
        result = envelope_result(_resp(200, "plain text", text="plain text"), "failed")
        self.assertFalse(result.success)

    def test_list_accepts_bare_array(self) -> None:
        result = list_result(_resp(200, [{"id": 1}, "junk", {"id": 2}]), "failed", convert=lambda x: x["id"])
        self.assertTrue(result.success)
        self.assertEqual(result.data, [1, 2])

    def test_list_rejects_bare_array_when_not_allowed(self) -> None:
        result = list_result(_resp(200, [{"id": 1}]), "failed", allow_bare=False)
        self.assertFalse(result.success)
        self.assertEqual(result.message, "failed")

    def test_delete_result_bodies(self) -> None:
        for status, payload, text in (
            (200, envelope(), ""),
            (200, True, "true"),
            (204, "", ""),
        ):
            result = delete_result(_resp(status, payload, text=text), "deleted", "failed")
            self.assertTrue(result.success, (status, payload))
        refused = delete_result(_resp(200, envelope(succeeded=False, message="linked")), "deleted", "failed")
        self.assertFalse(refused.success)
        self.assertEqual(refused.message, "linked")

    def test_multipart_keeps_repeated_fields(self) -> None:
        parts = multipart([("Ids", 1), ("Ids", 2), ("Note", None)])
        self.assertEqual(parts, [("Ids", (None, "1")), ("Ids", (None, "2")), ("Note", (None, ""))])


class TestApiClient(unittest.TestCase):
    def test_bearer_header_only_with_token(self) -> None:
        session = FakeSession().add("GET", "College", json_response(envelope([])))
        make_client(session).get("College")
        make_client(session, token=None).get("College")
        self.assertEqual(session.calls[0].kwargs["headers"]["Authorization"], "Bearer test-token")
        self.assertNotIn("Authorization", session.calls[1].kwargs["headers"])

    def test_network_error_is_not_raised(self) -> None:
        client = make_client(FakeSession(offline=True))
        resp = client.get("College")
        self.assertTrue(resp.network_error)
        result = resp.failure()
        self.assertTrue(result.network_error)
        self.assertEqual(result.message, messages.NETWORK_ERROR)

    def test_login_required_without_token(self) -> None:
        result = make_client(token=None).login_required()
        self.assertIsNotNone(result)
        self.assertEqual(result.message, messages.LOGIN_REQUIRED)
        self.assertIsNone(make_client().login_required())

    def test_api_root(self) -> None:
        self.assertEqual(make_client().api_root, "https://portal.test/api")
        from academicportal.client import ApiClient

        self.assertEqual(ApiClient(base_url="https://x.test/", session=FakeSession()).api_root, "https://x.test/api")

    def test_invalid_base_url(self) -> None:
        with self.assertRaises(ConfigError):
            normalize_base_url("ftp://example.com")
        self.assertEqual(normalize_base_url(" https://example.com/api/ "), "https://example.com/api")


class TestDeleteFallback(unittest.TestCase):
    def test_first_attempt_succeeds(self) -> None:
        session = FakeSession().add("DELETE", "Course/DeleteCourse/abc", text_response("true"))
        resp = make_client(session).delete_with_fallback("Course/DeleteCourse", "abc")
        self.assertTrue(resp.ok)
        self.assertEqual(len(session.calls), 1)

    def test_query_string_after_404(self) -> None:
        session = FakeSession()
        session.add("DELETE", "Course/DeleteCourse/abc", text_response("", status=404, reason="Not Found"))
        session.add("DELETE", "Course/DeleteCourse", json_response(envelope()))
        resp = make_client(session).delete_with_fallback("Course/DeleteCourse", "abc")
        self.assertTrue(resp.ok)
        self.assertEqual([c.method for c in session.calls], ["DELETE", "DELETE"])
        self.assertEqual(session.calls[1].kwargs["params"], {"id": "abc"})

    def test_post_form_after_two_405(self) -> None:
        session = FakeSession()
        not_allowed = text_response("", status=405, reason="Method Not Allowed")
        session.add("DELETE", "Instructor/DeleteInstructor/7", not_allowed)
        session.add("DELETE", "Instructor/DeleteInstructor", not_allowed)
        session.add("POST", "Instructor/DeleteInstructor", json_response(envelope()))
        resp = make_client(session).delete_with_fallback("Instructor/DeleteInstructor", 7)
        self.assertTrue(resp.ok)
        self.assertEqual([c.method for c in session.calls], ["DELETE", "DELETE", "POST"])
        self.assertEqual(session.calls[2].form_values("Id"), [(None, "7")])

    def test_stops_on_non_retryable_status(self) -> None:
        session = FakeSession().add("DELETE", "Course/DeleteCourse/abc", text_response("", status=500, reason="Error"))
        resp = make_client(session).delete_with_fallback("Course/DeleteCourse", "abc")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(len(session.calls), 1)

    def test_no_post_when_query_string_fails_otherwise(self) -> None:
        session = FakeSession()
        session.add("DELETE", "Course/DeleteCourse/abc", text_response("", status=400, reason="Bad Request"))
        session.add("DELETE", "Course/DeleteCourse", text_response("", status=404, reason="Not Found"))
        resp = make_client(session).delete_with_fallback("Course/DeleteCourse", "abc")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(len(session.calls), 2)


if __name__ == "__main__":
    unittest.main()
