"""
Unit tests for the per-resource API modules (request shape and response
normalization).
"""

import unittest

from academicportal import colleges, courses, degrees, departments, instructors, intakes, lookups, messages, tracks
from academicportal.model import Course
from tests.fakes import FakeSession, envelope, json_response, make_client, text_response


class TestCourses(unittest.TestCase):
    def test_from_api_mixed_casing(self) -> None:
        course = Course.from_api(
            {
                "CourseId": 42,
                "Code": "CS101",
                "Name": "Intro",
                "CreditHours": "3",
                "IsOptional": "true",
                "Prerequisites": "MA101، CS100",
                "msarName": "AI",
            }
        )
        self.assertEqual(course.id, "42")
        self.assertEqual(course.credit_hours, 3)
        self.assertTrue(course.is_optional)
        self.assertEqual(course.prerequisites, ["MA101", "CS100"])
        self.assertEqual(course.msar, "AI")

    def test_create_sends_repeated_fields(self) -> None:
        session = FakeSession().add(
            "POST", "Course/AddCourse", json_response(envelope({"id": "c9", "code": "CS101", "name": "Intro"}))
        )
        result = courses.create_course(
            make_client(session),
            code=" CS101 ",
            name="Intro",
            credit_hours=3,
            is_optional=False,
            semester="2",
            msar_id=5,
            prerequisites=["p1", "", "p2"],
            instructors=["29801011234567"],
        )
        self.assertTrue(result.success)
        self.assertEqual(result.data.id, "c9")

        call = session.calls[0]
        self.assertEqual(call.form_values("Code"), [(None, "CS101")])
        self.assertEqual(call.form_values("IsOptional"), [(None, "false")])
        self.assertEqual(call.form_values("PrerequisiteCourseIds"), [(None, "p1"), (None, "p2")])
        self.assertEqual(call.form_values("InstructorNationalIds"), [(None, "29801011234567")])

    def test_update_omits_department_and_degree(self) -> None:
        session = FakeSession().add("PUT", "Course/UpdateCourse", json_response(envelope({"id": "c9"})))
        courses.update_course(
            make_client(session), "c9", "CS101", "Intro", 3, True, 1, 5, prerequisites=["a", "b"]
        )
        names = [name for name, _ in session.calls[0].form]
        self.assertNotIn("DepartmentId", names)
        self.assertNotIn("DegreeId", names)
        self.assertEqual(session.calls[0].form_values("Prerequisites"), [(None, "a,b")])

    def test_update_failure_uses_backend_message(self) -> None:
        session = FakeSession().add(
            "PUT", "Course/UpdateCourse", json_response({"message": "code exists"}, status=400, reason="Bad Request")
        )
        result = courses.update_course(make_client(session), "c9", "CS101", "Intro", 3, True, 1, 5)
        self.assertFalse(result.success)
        self.assertEqual(result.message, "code exists")


class TestInstructors(unittest.TestCase):
    def test_duplicate_key_message(self) -> None:
        session = FakeSession().add(
            "POST",
            "Instructor/AddInstructor",
            json_response(
                {"message": "Violation of PRIMARY KEY constraint 'PK_Instructors'. Cannot insert duplicate key."},
                status=500,
                reason="Internal Server Error",
            ),
        )
        result = instructors.create_instructor(make_client(session), "x", 1, 2, "29801011234567", "010", "a@b.c")
        self.assertFalse(result.success)
        self.assertEqual(result.message, messages.INSTRUCTOR_DUPLICATE)

    def test_update_keeps_id_when_backend_omits_it(self) -> None:
        session = FakeSession().add(
            "PUT", "Instructor/UpdateInstructor", json_response(envelope({"name": "", "academicTitle": "Lecturer"}))
        )
        result = instructors.update_instructor(make_client(session), "i7", "د. سارة", 2, 3, "010", "s@x.eg")
        self.assertTrue(result.success)
        self.assertEqual(result.data.id, "i7")
        self.assertEqual(result.data.name, "د. سارة")

    def test_is_duplicate_key_error(self) -> None:
        self.assertTrue(instructors.is_duplicate_key_error("SQL error 2627"))
        self.assertFalse(instructors.is_duplicate_key_error(None))
        self.assertFalse(instructors.is_duplicate_key_error("bad email"))


class TestLookups(unittest.TestCase):
    def test_semesters_try_each_path(self) -> None:
        session = FakeSession()
        session.add("GET", "Lookups/Semesters", json_response([{"id": 1, "value": "الأول"}]))
        result = lookups.get_semesters(make_client(session))
        self.assertTrue(result.success)
        self.assertEqual(result.data[0].value, "الأول")
        self.assertEqual([c.path for c in session.calls], ["Lookups/semesters", "Lookups/Semesters"])

    def test_semesters_all_fail(self) -> None:
        result = lookups.get_semesters(make_client(FakeSession()))
        self.assertFalse(result.success)
        self.assertEqual(result.message, "HTTP 404")

    def test_departments_lookup_requires_items(self) -> None:
        session = FakeSession().add("GET", "Lookups/departments", json_response(envelope([])))
        result = lookups.get_departments_lookup(make_client(session))
        self.assertFalse(result.success)
        self.assertEqual(result.message, messages.NO_DEPARTMENTS)

    def test_tracks_by_degree_uses_id_param(self) -> None:
        session = FakeSession().add("GET", "Lookups/GetMsaratByDegreeId", json_response([{"id": 1, "name": "AI"}]))
        result = lookups.get_tracks_by_degree(make_client(session), 3)
        self.assertEqual(result.data[0].value, "AI")
        self.assertEqual(session.calls[0].kwargs["params"], {"id": 3})

    def test_degrees_lookup_requires_items(self) -> None:
        session = FakeSession().add("GET", "Lookups/degrees", json_response([]))
        result = lookups.get_degrees_lookup(make_client(session))
        self.assertFalse(result.success)
        self.assertEqual(result.message, messages.NO_DEGREES)

    def test_form_lookups_paths(self) -> None:
        session = FakeSession()
        session.add("GET", "Lookups/nationalities", json_response(envelope([{"id": 1, "value": "مصري"}])))
        session.add("GET", "Lookups/Qualifications", json_response([{"Id": 2, "Name": "بكالوريوس"}]))
        session.add("GET", "Lookups/militaryServices", json_response(envelope([])))
        client = make_client(session)

        self.assertEqual(lookups.get_nationalities(client).data[0].value, "مصري")
        kinds = lookups.get_qualification_types(client)
        self.assertEqual((kinds.data[0].id, kinds.data[0].value), (2, "بكالوريوس"))
        military = lookups.get_military_services(client)
        self.assertTrue(military.success)
        self.assertEqual(military.data, [])

    def test_form_lookups_require_login(self) -> None:
        session = FakeSession()
        client = make_client(session, token=None)
        for fetch in (lookups.get_majors, lookups.get_grades, lookups.get_universities_lookup, lookups.get_colleges_lookup):
            self.assertEqual(fetch(client).message, messages.LOGIN_REQUIRED)
        self.assertEqual(session.calls, [])

    def test_form_lookup_http_error(self) -> None:
        session = FakeSession().add("GET", "Lookups/languages", text_response("", status=500, reason="Server Error"))
        result = lookups.get_languages(make_client(session))
        self.assertFalse(result.success)
        self.assertEqual(result.status_code, 500)


class TestTracks(unittest.TestCase):
    def test_create_resolves_department_name(self) -> None:
        session = FakeSession()
        session.add("GET", "Lookups/departments", json_response([{"id": 2, "value": "قسم المحاسبة"}]))
        session.add("POST", "Msar", json_response(envelope({"id": 9, "name": "AI", "degreeId": 3})))
        result = tracks.create_track(make_client(session), "AI", degree_id=3, department_id=2)
        self.assertTrue(result.success)
        self.assertEqual(result.data.id, 9)

        body = session.calls[1].kwargs["json"]
        self.assertEqual(body["DepartmentName"], "قسم المحاسبة")
        self.assertEqual(body["degree"]["departmentId"], 2)

    def test_create_requires_login(self) -> None:
        session = FakeSession()
        result = tracks.create_track(make_client(session, token=None), "AI", 3, 2)
        self.assertEqual(result.message, messages.LOGIN_REQUIRED)
        self.assertEqual(session.calls, [])


class TestDegrees(unittest.TestCase):
    def test_by_department_rejects_non_json(self) -> None:
        session = FakeSession().add(
            "GET", "Degree/by-department/1", text_response("<html>login</html>", content_type="text/html")
        )
        result = degrees.get_degrees_by_department(make_client(session), 1)
        self.assertFalse(result.success)
        self.assertTrue(result.message.startswith("Expected JSON"))

    def test_create_accepts_bare_record(self) -> None:
        session = FakeSession().add("POST", "Degree", json_response({"id": 8, "name": "MBA", "departmentId": 2}))
        result = degrees.create_degree(make_client(session), "MBA", 2, "Master")
        self.assertTrue(result.success)
        self.assertEqual(result.data.id, 8)
        self.assertEqual(result.message, messages.DEGREE_CREATED)
        self.assertEqual(session.calls[0].kwargs["json"]["standardDurationYears"], 0)


class TestIntakes(unittest.TestCase):
    def test_bare_list(self) -> None:
        session = FakeSession().add("GET", "Intake", json_response([{"id": 1, "name": "2025/2026", "startDate": "2025-09-01"}]))
        result = intakes.get_intakes(make_client(session))
        self.assertTrue(result.success)
        self.assertEqual(result.data[0].name, "2025/2026")

    def test_delete_linked_year(self) -> None:
        session = FakeSession().add("DELETE", "Intake/1", text_response("", status=500, reason="Internal Server Error"))
        result = intakes.delete_intake(make_client(session), 1)
        self.assertFalse(result.success)
        self.assertEqual(result.message, messages.INTAKE_DELETE_LINKED)

    def test_delete_network_error(self) -> None:
        result = intakes.delete_intake(make_client(FakeSession(offline=True)), 1)
        self.assertEqual(result.message, messages.INTAKE_DELETE_ERROR)
        self.assertTrue(result.network_error)

    def test_update_sends_only_given_fields(self) -> None:
        session = FakeSession().add("PUT", "Intake/4", json_response(envelope({"id": 4, "name": "x"})))
        intakes.update_intake(make_client(session), 4, name="x")
        self.assertEqual(session.calls[0].kwargs["json"], {"id": 4, "name": "x"})


class TestDepartments(unittest.TestCase):
    def test_by_program_is_public_and_normalized(self) -> None:
        session = FakeSession().add("GET", "Departments", json_response(envelope([{"Id": 3, "Name": "قسم الاقتصاد"}])))
        result = departments.get_departments_by_program(make_client(session), 1)
        self.assertTrue(result.success)
        self.assertEqual((result.data[0].id, result.data[0].value), (3, "قسم الاقتصاد"))
        self.assertEqual(session.calls[0].kwargs["params"], {"id": 1})
        self.assertNotIn("Authorization", session.calls[0].kwargs["headers"])

    def test_by_program_failure_gives_empty_list(self) -> None:
        result = departments.get_departments_by_program(make_client(FakeSession(offline=True)), 1)
        self.assertFalse(result.success)
        self.assertEqual(result.data, [])

    def test_update_body(self) -> None:
        session = FakeSession().add("PUT", "Departments/5", json_response(envelope({"id": 5, "name": "x", "programId": 2})))
        result = departments.update_department(make_client(session), 5, "x", "desc", 2)
        self.assertEqual(result.data.program_id, 2)
        self.assertEqual(session.calls[0].kwargs["json"], {"id": 5, "name": "x", "description": "desc", "programId": 2})


class TestColleges(unittest.TestCase):
    def test_create_name_in_query(self) -> None:
        session = FakeSession().add("POST", "College", json_response(envelope({"id": 1, "name": "FCI"})))
        result = colleges.create_college(make_client(session), "FCI")
        self.assertTrue(result.success)
        self.assertEqual(result.data.name, "FCI")
        self.assertEqual(session.calls[0].kwargs["params"], {"name": "FCI"})
        self.assertNotIn("json", session.calls[0].kwargs)

    def test_delete_refused(self) -> None:
        session = FakeSession().add("DELETE", "College/1", json_response(envelope(succeeded=False, message="in use")))
        result = colleges.delete_college(make_client(session), 1)
        self.assertFalse(result.success)
        self.assertEqual(result.message, "in use")


if __name__ == "__main__":
    unittest.main()
