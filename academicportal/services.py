"""
Service layer used by the front ends.

Degrees, courses and universities go to the backend first and fall back to
an in-memory copy of the sample data when the backend cannot be reached (a
refusal from the backend is returned as is). Faculty courses are in-memory
only. Instructors, semesters and academic titles wrap the API modules with the
portal's messages.

Every service waits `delay` seconds before answering, like the portal's
services do, so the front end shows its loading state. Pass delay=0 in tests.
"""

from __future__ import annotations

import copy
import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional

from academicportal import config, courses, degrees, instructors, lookups, messages, mock_data, universities
from academicportal.client import ApiClient
from academicportal.model import ApiResult, Course, Degree, FacultyCourse, LookupItem, University

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# ---------------------------------------------------------------------------
# In-memory store
# ---------------------------------------------------------------------------


class MockRepository:
    """
    A list of records with id lookup. Seeds are deep-copied so mutations never
    leak into the module-level sample data.
    """

    def __init__(self, seed: Iterable[Any], id_of: Callable[[Any], Any] = lambda r: r.id):
        self.items = [copy.deepcopy(x) for x in seed]
        self._id_of = id_of

    def all(self) -> list[Any]:
        return list(self.items)

    def find(self, record_id: Any) -> Optional[Any]:
        for item in self.items:
            if self._id_of(item) == record_id:
                return item
        return None

    def index(self, record_id: Any) -> int:
        for i, item in enumerate(self.items):
            if self._id_of(item) == record_id:
                return i
        return -1

    def next_int_id(self) -> int:
        ids = [self._id_of(x) for x in self.items]
        return max([0] + [int(i) for i in ids if str(i).isdigit()]) + 1

    def add(self, record: Any) -> Any:
        self.items.append(record)
        return record

    def replace(self, record_id: Any, record: Any) -> bool:
        i = self.index(record_id)
        if i == -1:
            return False
        self.items[i] = record
        return True

    def remove(self, record_id: Any) -> bool:
        i = self.index(record_id)
        if i == -1:
            return False
        del self.items[i]
        return True


class _DelayedService:
    def __init__(self, client: Optional[ApiClient] = None, delay: Optional[float] = None):
        self.client = client
        self.delay = config.get_mock_delay() if delay is None else delay

    def _wait(self) -> None:
        if self.delay > 0:
            time.sleep(self.delay)


# ---------------------------------------------------------------------------
# Backend first, sample data when offline
# ---------------------------------------------------------------------------


class DegreesService(_DelayedService):
    def __init__(self, client: ApiClient, delay: Optional[float] = None):
        super().__init__(client, delay)
        self.repo = MockRepository(Degree.from_api(d) for d in mock_data.DEGREES)

    @staticmethod
    def departments() -> list[LookupItem]:
        return [LookupItem.from_api(d) for d in mock_data.DEPARTMENTS]

    def list(self) -> ApiResult:
        self._wait()
        result = degrees.get_degrees(self.client)
        if result.network_error:
            logger.info("backend unreachable, using sample degrees")
            return ApiResult.ok(self.repo.all(), messages.MOCK_DATA_USED)
        if not result.success:
            result.data = []
        return result

    def get(self, degree_id: int) -> ApiResult:
        """
        One degree out of list(): there is no fetch-by-id endpoint.
        """
        listed = self.list()
        if not listed.success:
            return listed
        degree = next((d for d in listed.data or [] if d.id == degree_id), None)
        if degree is None:
            return ApiResult.fail(messages.DEGREE_NOT_FOUND, errors=["Degree not found"])
        return ApiResult.ok(degree, "Operation successful")

    def create(
        self,
        name: str,
        department_id: int,
        general_degree: str,
        description: str = "",
        standard_duration_years: Optional[int] = None,
    ) -> ApiResult:
        self._wait()
        result = degrees.create_degree(
            self.client, name, department_id, general_degree, description, standard_duration_years
        )
        if not result.network_error:
            return result
        logger.info("backend unreachable, creating degree in sample data")
        degree = Degree(
            id=self.repo.next_int_id(),
            name=name,
            department_id=department_id,
            general_degree=general_degree,
            description=description or "",
            standard_duration_years=standard_duration_years,
        )
        self.repo.add(degree)
        return ApiResult.ok(degree, messages.DEGREE_CREATED_MOCK)

    def update(self, degree_id: int, **changes: Any) -> ApiResult:
        """
        Fields not given keep their current value (from the sample data when
        the degree is known there).
        """
        self._wait()
        current = self.repo.find(degree_id)
        name = changes.get("name", current.name if current else "")
        department_id = changes.get("department_id", current.department_id if current else 0)
        general_degree = changes.get("general_degree", current.general_degree if current else "")
        description = changes.get("description", current.description if current else "")
        years = changes.get("standard_duration_years", current.standard_duration_years if current else 0)

        result = degrees.update_degree(
            self.client, degree_id, name, department_id, general_degree, description, years
        )
        if not result.network_error:
            return result
        if current is None:
            return ApiResult.fail(messages.DEGREE_NOT_FOUND, errors=["Degree not found"])
        updated = Degree(
            id=degree_id,
            name=name,
            department_id=department_id,
            general_degree=general_degree,
            description=description,
            standard_duration_years=years,
        )
        self.repo.replace(degree_id, updated)
        return ApiResult.ok(updated, messages.DEGREE_UPDATED_MOCK)

    def delete(self, degree_id: int) -> ApiResult:
        self._wait()
        result = degrees.delete_degree(self.client, degree_id)
        if not result.network_error:
            return result
        if not self.repo.remove(degree_id):
            return ApiResult.fail(messages.DEGREE_NOT_FOUND, errors=["Degree not found"])
        return ApiResult.ok(None, messages.DEGREE_DELETED_MOCK)


class CoursesService(_DelayedService):
    def __init__(self, client: ApiClient, delay: Optional[float] = None):
        super().__init__(client, delay)
        self.repo = MockRepository(Course.from_api(c) for c in mock_data.COURSES)

    def list(
        self,
        department_id: Optional[int] = None,
        degree_id: Optional[int] = None,
        msar_id: Optional[int] = None,
    ) -> ApiResult:
        self._wait()
        result = courses.get_all_courses(self.client, department_id, degree_id, msar_id)
        if result.network_error:
            logger.info("backend unreachable, using sample courses")
            return ApiResult.ok(self.repo.all(), messages.MOCK_DATA_USED)
        if result.success:
            result.message = result.message or messages.COURSES_LOADED
        else:
            result.data = []
        return result

    def create(self, **fields: Any) -> ApiResult:
        """
        Keyword arguments are those of courses.create_course.
        """
        self._wait()
        result = courses.create_course(self.client, **fields)
        if result.success:
            result.message = result.message or messages.COURSE_CREATED
        if not result.network_error:
            return result
        course = Course(
            id=str(self.repo.next_int_id()),
            course_id="",
            code=str(fields.get("code", "")).strip(),
            name=str(fields.get("name", "")).strip(),
            credit_hours=int(fields.get("credit_hours", 0)),
            is_optional=bool(fields.get("is_optional", False)),
            semester=str(fields.get("semester", "")),
            prerequisites=[str(p) for p in fields.get("prerequisites", ())],
            description=fields.get("description", ""),
        )
        course.course_id = course.id
        self.repo.add(course)
        return ApiResult.ok(course, messages.COURSE_CREATED)

    def update(self, **fields: Any) -> ApiResult:
        """
        Keyword arguments are those of courses.update_course.
        """
        self._wait()
        result = courses.update_course(self.client, **fields)
        if result.success:
            result.message = result.message or messages.COURSE_UPDATED
        if not result.network_error:
            return result
        course = self.repo.find(str(fields.get("course_id")))
        if course is None:
            return ApiResult.fail(messages.COURSE_NOT_FOUND)
        course.code = fields.get("code", course.code)
        course.name = fields.get("name", course.name)
        course.credit_hours = int(fields.get("credit_hours", course.credit_hours))
        course.is_optional = bool(fields.get("is_optional", course.is_optional))
        course.semester = str(fields.get("semester", course.semester))
        course.prerequisites = [str(p) for p in fields.get("prerequisites", course.prerequisites)]
        course.description = fields.get("description", course.description)
        return ApiResult.ok(course, messages.COURSE_UPDATED)

    def delete(self, course_id: str) -> ApiResult:
        self._wait()
        result = courses.delete_course(self.client, course_id)
        if not result.network_error:
            return result
        if not self.repo.remove(str(course_id)):
            return ApiResult.fail(messages.COURSE_NOT_FOUND)
        return ApiResult.ok(None, messages.COURSE_DELETED)


class UniversitiesService(_DelayedService):
    def __init__(self, client: ApiClient, delay: Optional[float] = None):
        super().__init__(client, delay)
        self.repo = MockRepository(University.from_api(u) for u in mock_data.UNIVERSITIES)

    def list(self) -> ApiResult:
        self._wait()
        result = universities.get_universities(self.client)
        if result.network_error:
            logger.info("backend unreachable, using sample universities")
            return ApiResult.ok(self.repo.all(), messages.MOCK_DATA_USED)
        if result.success:
            result.message = result.message or messages.UNIVERSITIES_LOADED
        return result

    def get(self, university_id: int) -> ApiResult:
        listed = self.list()
        if not listed.success:
            return listed
        university = next((u for u in listed.data or [] if u.id == university_id), None)
        if university is None:
            return ApiResult.fail(messages.UNIVERSITY_NOT_FOUND)
        return ApiResult.ok(university, listed.message)

    def create(self, name: str) -> ApiResult:
        self._wait()
        result = universities.add_university(self.client, name)
        if not result.network_error:
            return result
        now = _now()
        university = University(id=self.repo.next_int_id(), name=name, created_at=now, updated_at=now)
        self.repo.add(university)
        return ApiResult.ok(university, messages.UNIVERSITY_CREATED)

    def update(self, university_id: int, name: str) -> ApiResult:
        self._wait()
        result = universities.update_university(self.client, university_id, name)
        if not result.network_error:
            return result
        university = self.repo.find(university_id)
        if university is None:
            return ApiResult.fail(messages.UNIVERSITY_NOT_FOUND)
        university.name = name
        university.updated_at = _now()
        return ApiResult.ok(university, messages.UNIVERSITY_UPDATED)

    def delete(self, university_id: int) -> ApiResult:
        self._wait()
        result = universities.delete_university(self.client, university_id)
        if not result.network_error:
            return result
        if not self.repo.remove(university_id):
            return ApiResult.fail(messages.UNIVERSITY_NOT_FOUND)
        return ApiResult.ok(None, messages.UNIVERSITY_DELETED)


# ---------------------------------------------------------------------------
# In-memory only
# ---------------------------------------------------------------------------


class FacultyCoursesService(_DelayedService):
    """
    Course-to-lecturer assignments. There is no backend for these yet.
    """

    def __init__(self, delay: Optional[float] = None):
        super().__init__(None, delay)
        self.repo = MockRepository(FacultyCourse(**c) for c in mock_data.FACULTY_COURSES)

    def list(self) -> ApiResult:
        self._wait()
        return ApiResult.ok(self.repo.all())

    def get(self, record_id: str) -> ApiResult:
        self._wait()
        record = self.repo.find(record_id)
        if record is None:
            return ApiResult.fail(messages.LECTURER_NOT_FOUND)
        return ApiResult.ok(record)

    def create(self, **fields: Any) -> ApiResult:
        self._wait()
        now = _now()
        # time-based ids, unique enough for one process
        record = FacultyCourse(id=str(time.time_ns()), created_at=now, updated_at=now, **fields)
        self.repo.add(record)
        return ApiResult.ok(record, messages.LECTURER_CREATED)

    def update(self, record_id: str, **changes: Any) -> ApiResult:
        self._wait()
        record = self.repo.find(record_id)
        if record is None:
            return ApiResult.fail(messages.LECTURER_NOT_FOUND)
        for key, value in changes.items():
            if key in ("id", "created_at") or not hasattr(record, key):
                continue
            setattr(record, key, value)
        record.updated_at = _now()
        return ApiResult.ok(record, messages.LECTURER_UPDATED)

    def delete(self, record_id: str) -> ApiResult:
        self._wait()
        if not self.repo.remove(record_id):
            return ApiResult.fail(messages.LECTURER_NOT_FOUND)
        return ApiResult.ok(None, messages.LECTURER_DELETED)


# ---------------------------------------------------------------------------
# Thin wrappers
# ---------------------------------------------------------------------------


class InstructorsService(_DelayedService):
    def __init__(self, client: ApiClient, delay: Optional[float] = 0):
        super().__init__(client, delay)

    def list(self) -> ApiResult:
        self._wait()
        result = instructors.get_all_instructors(self.client)
        if result.success:
            result.message = messages.INSTRUCTORS_LOADED
        else:
            result.data = []
        return result

    def create(self, **fields: Any) -> ApiResult:
        self._wait()
        result = instructors.create_instructor(self.client, **fields)
        if result.success and result.data is not None:
            result.message = result.message or messages.INSTRUCTOR_CREATED
        elif result.success:
            # no record came back
            return ApiResult.fail(result.message or messages.INSTRUCTOR_CREATE_FAILED, status_code=result.status_code)
        return result

    def update(self, **fields: Any) -> ApiResult:
        self._wait()
        result = instructors.update_instructor(self.client, **fields)
        if result.success and result.data is not None:
            result.message = result.message or messages.INSTRUCTOR_UPDATED
        elif result.success:
            return ApiResult.fail(result.message or messages.INSTRUCTOR_UPDATE_FAILED, status_code=result.status_code)
        return result

    def delete(self, instructor_id: str) -> ApiResult:
        self._wait()
        return instructors.delete_instructor(self.client, instructor_id)


class SemestersService(_DelayedService):
    def __init__(self, client: ApiClient, delay: Optional[float] = 0):
        super().__init__(client, delay)

    def list(self) -> ApiResult:
        self._wait()
        result = lookups.get_semesters(self.client)
        if not result.success:
            result.data = []
        return result


class AcademicTitlesService(_DelayedService):
    def __init__(self, client: ApiClient, delay: Optional[float] = 0):
        super().__init__(client, delay)

    def list(self) -> ApiResult:
        self._wait()
        result = lookups.get_academic_titles(self.client)
        if not result.success:
            result.data = []
        return result
