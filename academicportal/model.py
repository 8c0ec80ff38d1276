"""
Central data model definitions used across the project.

The backend is not consistent about key casing (camelCase in most endpoints,
PascalCase in some), so every record has a `from_api` constructor that accepts
both spellings. Records stay flat: relationships are plain ids resolved by
separate lookup calls.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, List, Optional


def pick(item: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """
    Return the first value among `keys` that is present and not None.
    """
    for k in keys:
        v = item.get(k)
        if v is not None:
            return v
    return default


def as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == 1
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "y")
    return False


def split_codes(value: Any) -> list[str]:
    """
    Prerequisites arrive either as a list or as one string separated by ',' or
    the Arabic comma.
    """
    if isinstance(value, list):
        return [str(x) for x in value]
    if isinstance(value, str):
        parts = value.replace("،", ",").split(",")
        return [p.strip() for p in parts if p.strip()]
    return []


@dataclass
class ApiResult:
    """
    Uniform result of every API call: never raised, always returned.
    """

    success: bool
    data: Any = None
    message: str = ""
    errors: List[str] = field(default_factory=list)
    status_code: Optional[int] = None
    network_error: bool = False

    @classmethod
    def ok(cls, data: Any = None, message: str = "", status_code: Optional[int] = None) -> "ApiResult":
        return cls(success=True, data=data, message=message, status_code=status_code)

    @classmethod
    def fail(
        cls,
        message: str,
        errors: Optional[List[str]] = None,
        status_code: Optional[int] = None,
        network_error: bool = False,
        data: Any = None,
    ) -> "ApiResult":
        return cls(
            success=False,
            data=data,
            message=message,
            errors=list(errors) if errors else [message],
            status_code=status_code,
            network_error=network_error,
        )


@dataclass
class LookupItem:
    id: int
    value: str

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "LookupItem":
        return cls(
            id=as_int(pick(item, "id", "Id", default=0)),
            value=str(pick(item, "value", "Value", "name", "Name", default="")),
        )


@dataclass
class College:
    id: int
    name: str

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "College":
        return cls(id=as_int(pick(item, "id", "Id")), name=str(pick(item, "name", "Name", default="")))


@dataclass
class University:
    id: int
    name: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "University":
        return cls(
            id=as_int(pick(item, "id", "Id")),
            name=str(pick(item, "name", "Name", "universityName", "UniversityName", default="")),
            created_at=pick(item, "createdAt", "CreatedAt"),
            updated_at=pick(item, "updatedAt", "UpdatedAt"),
        )


@dataclass
class Degree:
    id: int
    name: str
    department_id: int
    general_degree: str = ""
    description: str = ""
    standard_duration_years: Optional[int] = None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "Degree":
        years = pick(item, "standardDurationYears", "StandardDurationYears")
        return cls(
            id=as_int(pick(item, "id", "Id")),
            name=str(pick(item, "name", "Name", default="")),
            department_id=as_int(pick(item, "departmentId", "DepartmentId")),
            general_degree=str(pick(item, "generalDegree", "GeneralDegree", default="")),
            description=str(pick(item, "description", "Description", default="")),
            standard_duration_years=None if years is None else as_int(years),
        )

    def to_api(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description or "",
            "standardDurationYears": self.standard_duration_years or 0,
            "departmentId": self.department_id,
            "generalDegree": self.general_degree,
        }


@dataclass
class Department:
    id: int
    name: str
    description: str = ""
    program_id: Optional[int] = None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "Department":
        program = pick(item, "programId", "ProgramId")
        return cls(
            id=as_int(pick(item, "id", "Id")),
            name=str(pick(item, "name", "Name", "value", "Value", default="")),
            description=str(pick(item, "description", "Description", default="")),
            program_id=None if program is None else as_int(program),
        )


@dataclass
class Track:
    """
    A track (Msar): an academic specialization path tied to a degree.
    """

    id: int
    name: str
    degree_id: int
    department_name: str = ""

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "Track":
        return cls(
            id=as_int(pick(item, "id", "Id")),
            name=str(pick(item, "name", "Name", default="")),
            degree_id=as_int(pick(item, "degreeId", "DegreeId")),
            department_name=str(pick(item, "departmentName", "DepartmentName", default="")),
        )


@dataclass
class Course:
    id: str
    course_id: str
    code: str
    name: str
    credit_hours: int
    is_optional: bool
    semester: str
    department: str = ""
    degree: str = ""
    msar: str = ""
    prerequisites: List[str] = field(default_factory=list)
    description: str = ""
    instructors: List[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "Course":
        instructors = pick(item, "instructors", "Instructors", default=[])
        return cls(
            id=str(pick(item, "id", "Id", "courseId", "CourseId", default="")),
            course_id=str(pick(item, "courseId", "CourseId", "id", "Id", default="")),
            code=str(pick(item, "code", "Code", default="")),
            name=str(pick(item, "name", "Name", default="")),
            credit_hours=as_int(pick(item, "creditHours", "CreditHours", default=0)),
            is_optional=as_bool(pick(item, "isOptional", "IsOptional", default=False)),
            semester=str(pick(item, "semester", "Semester", default="")),
            department=str(pick(item, "departmentName", "DepartmentName", default="")),
            degree=str(pick(item, "degreeName", "DegreeName", default="")),
            msar=str(pick(item, "msarName", "MsarName", "trackName", "TrackName", default="")),
            prerequisites=split_codes(pick(item, "prerequisites", "Prerequisites", default=[])),
            description=str(pick(item, "description", "Description", default="")),
            instructors=list(instructors) if isinstance(instructors, list) else [],
        )


@dataclass
class Instructor:
    id: str
    name: str
    national_id: str
    title: str = ""
    department: str = ""
    phone: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "Instructor":
        return cls(
            id=str(pick(item, "id", "Id", default="")),
            name=str(pick(item, "name", "Name", default="")),
            national_id=str(pick(item, "nationalId", "NationalId", default="")),
            title=str(pick(item, "academicTitle", "AcademicTitle", default="")),
            department=str(pick(item, "departmentName", "DepartmentName", default="")),
            phone=pick(item, "phone", "Phone"),
            email=pick(item, "email", "Email"),
        )


@dataclass
class Intake:
    id: int
    name: str
    start_date: str
    end_date: str

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "Intake":
        return cls(
            id=as_int(pick(item, "id", "Id")),
            name=str(pick(item, "name", "Name", default="")),
            start_date=str(pick(item, "startDate", "StartDate", default="")),
            end_date=str(pick(item, "endDate", "EndDate", default="")),
        )


@dataclass
class Qualification:
    qualification: int
    institution: str
    grade: float = 0
    date_obtained: Optional[str] = None


@dataclass
class Student:
    national_id: str
    first_name: str = ""
    second_name: str = ""
    third_name: str = ""
    phone: str = ""
    email: str = ""
    qualifications: List[Qualification] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.second_name, self.third_name) if p)

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "Student":
        quals = []
        for q in pick(item, "qualifications", "Qualifications", default=[]) or []:
            if not isinstance(q, dict):
                continue
            grade = pick(q, "grade", "Grade", default=0)
            quals.append(
                Qualification(
                    qualification=as_int(pick(q, "qualification", "Qualification")),
                    institution=str(pick(q, "institution", "Institution", default="")),
                    grade=grade if isinstance(grade, (int, float)) else 0,
                    date_obtained=pick(q, "dateObtained", "DateObtained"),
                )
            )
        return cls(
            national_id=str(pick(item, "nationalId", "NationalId", default="")),
            first_name=str(pick(item, "firstName", "FirstName", default="")),
            second_name=str(pick(item, "secondName", "SecondName", default="")),
            third_name=str(pick(item, "thirdName", "ThirdName", default="")),
            phone=str(pick(item, "phone", "Phone", "phoneNumber", "PhoneNumber", default="")),
            email=str(pick(item, "email", "Email", default="")),
            qualifications=quals,
        )


@dataclass
class FacultyCourse:
    """
    Course-to-lecturer assignment kept by the in-memory faculty courses service.
    """

    id: str
    course_id: str
    name: str
    description: str
    instructor: str
    instructor_id: str
    credits: int
    duration: str
    department: str
    college: str
    university: str
    status: str
    created_at: str
    updated_at: str


def to_dict(record: Any) -> dict[str, Any]:
    return asdict(record)
