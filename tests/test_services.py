"""
Unit tests for the service layer.

Contract:
- sample data is used only when the backend cannot be reached
- a refusal from the backend is passed through, not replaced by sample data
- mutations on sample data never leak into the module-level seed
"""

import unittest

from academicportal import messages, mock_data
from academicportal.services import (
    CoursesService,
    DegreesService,
    FacultyCoursesService,
    InstructorsService,
    MockRepository,
    UniversitiesService,
)
from tests.fakes import FakeSession, envelope, json_response, make_client, text_response


def _offline():
    return make_client(FakeSession(offline=True))


class TestMockRepository(unittest.TestCase):
    def test_next_id_and_isolation(self) -> None:
        seed = [{"id": 1}, {"id": 5}]
        repo = MockRepository(seed, id_of=lambda r: r["id"])
        self.assertEqual(repo.next_int_id(), 6)
        repo.find(1)["id"] = 99
        self.assertEqual(seed[0]["id"], 1)
        self.assertTrue(repo.remove(5))
        self.assertFalse(repo.remove(5))


class TestDegreesService(unittest.TestCase):
    def test_offline_uses_sample_data(self) -> None:
        result = DegreesService(_offline(), delay=0).list()
        self.assertTrue(result.success)
        self.assertEqual(result.message, messages.MOCK_DATA_USED)
        self.assertEqual(len(result.data), len(mock_data.DEGREES))

    def test_backend_refusal_is_not_replaced(self) -> None:
        session = FakeSession().add("GET", "Degree", json_response({"message": "forbidden"}, status=403, reason="Forbidden"))
        result = DegreesService(make_client(session), delay=0).list()
        self.assertFalse(result.success)
        self.assertEqual(result.message, "forbidden")
        self.assertEqual(result.data, [])

    def test_offline_crud(self) -> None:
        service = DegreesService(_offline(), delay=0)
        created = service.create("دبلوم خاص", department_id=1, general_degree="Diploma")
        self.assertTrue(created.success)
        self.assertEqual(created.message, messages.DEGREE_CREATED_MOCK)
        new_id = created.data.id

        updated = service.update(new_id, name="دبلوم مهني")
        self.assertEqual(updated.data.name, "دبلوم مهني")
        self.assertEqual(updated.data.department_id, 1)

        self.assertTrue(service.delete(new_id).success)
        self.assertFalse(service.get(new_id).success)
        self.assertEqual(len(mock_data.DEGREES), len(DegreesService(_offline(), delay=0).repo.all()))

    def test_get_reads_backend_list(self) -> None:
        session = FakeSession().add("GET", "Degree", json_response(envelope([{"id": 4, "name": "MBA", "departmentId": 2}])))
        result = DegreesService(make_client(session), delay=0).get(4)
        self.assertTrue(result.success)
        self.assertEqual(result.data.name, "MBA")

    def test_sample_departments(self) -> None:
        departments = DegreesService.departments()
        self.assertEqual(len(departments), len(mock_data.DEPARTMENTS))
        self.assertTrue(all(d.value for d in departments))

    def test_update_unknown_offline(self) -> None:
        result = DegreesService(_offline(), delay=0).update(12345, name="x")
        self.assertFalse(result.success)
        self.assertEqual(result.message, messages.DEGREE_NOT_FOUND)


class TestCoursesService(unittest.TestCase):
    def test_online_list_sets_message(self) -> None:
        session = FakeSession().add("GET", "Course/GetAll", json_response([{"id": "c1", "code": "CS101", "name": "Intro"}]))
        result = CoursesService(make_client(session), delay=0).list(department_id=1)
        self.assertTrue(result.success)
        self.assertEqual(result.message, messages.COURSES_LOADED)
        self.assertEqual(result.data[0].code, "CS101")
        self.assertEqual(session.calls[0].kwargs["params"], {"departmentId": 1})

    def test_offline_create_and_delete(self) -> None:
        service = CoursesService(_offline(), delay=0)
        before = len(service.repo.all())
        created = service.create(code=" CS999 ", name="Seminar", credit_hours=2, is_optional=True, semester=1, msar_id=1)
        self.assertTrue(created.success)
        self.assertEqual(created.data.code, "CS999")
        self.assertEqual(len(service.repo.all()), before + 1)
        self.assertTrue(service.delete(created.data.id).success)
        self.assertFalse(service.delete("missing").success)


class TestUniversitiesService(unittest.TestCase):
    def test_offline_update(self) -> None:
        service = UniversitiesService(_offline(), delay=0)
        first = service.list().data[0]
        result = service.update(first.id, "جامعة جديدة")
        self.assertTrue(result.success)
        found = service.get(first.id)
        self.assertTrue(found.success)
        self.assertEqual(found.data.name, "جامعة جديدة")
        self.assertIsNotNone(found.data.updated_at)

    def test_get_online_and_unknown(self) -> None:
        session = FakeSession().add("GET", "University/names", json_response(envelope([{"id": 7, "name": "جامعة حلوان"}])))
        service = UniversitiesService(make_client(session), delay=0)
        self.assertEqual(service.get(7).data.name, "جامعة حلوان")
        missing = service.get(8)
        self.assertFalse(missing.success)
        self.assertEqual(missing.message, messages.UNIVERSITY_NOT_FOUND)

    def test_online_create_failure_passes_through(self) -> None:
        session = FakeSession().add("POST", "University/add", text_response("", status=500, reason="Server Error"))
        result = UniversitiesService(make_client(session), delay=0).create("x")
        self.assertFalse(result.success)
        self.assertFalse(result.network_error)


class TestFacultyCoursesService(unittest.TestCase):
    def test_crud(self) -> None:
        service = FacultyCoursesService(delay=0)
        count = len(service.list().data)
        record = service.create(
            course_id="CS101",
            name="Intro",
            description="",
            instructor="د. أحمد",
            instructor_id="i1",
            credits=3,
            duration="14 weeks",
            department="CS",
            college="FCI",
            university="Cairo",
            status="active",
        ).data
        self.assertEqual(len(service.list().data), count + 1)

        updated = service.update(record.id, status="inactive", id="ignored")
        self.assertEqual(updated.data.status, "inactive")
        self.assertEqual(updated.data.id, record.id)

        self.assertTrue(service.delete(record.id).success)
        self.assertEqual(service.get(record.id).message, messages.LECTURER_NOT_FOUND)


class TestInstructorsService(unittest.TestCase):
    def test_create_without_record_is_failure(self) -> None:
        session = FakeSession().add("POST", "Instructor/AddInstructor", json_response(envelope(None)))
        result = InstructorsService(make_client(session)).create(
            name="x", academic_title=1, department_id=1, national_id="1", phone="0", email="a@b.c"
        )
        self.assertFalse(result.success)
        self.assertEqual(result.message, messages.INSTRUCTOR_CREATE_FAILED)


if __name__ == "__main__":
    unittest.main()
