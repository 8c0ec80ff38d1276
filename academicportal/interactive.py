"""
Interactive menu (rich).

A numbered main menu loop; each entry is a _flow_* function that prompts for
input, calls the service layer and renders the result as a table.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from academicportal import auth, colleges, departments, intakes, lookups, messages, students, tracks
from academicportal.client import ApiClient
from academicportal.errors import FormValidationError
from academicportal.filters import DegreeTrackFilter
from academicportal.model import ApiResult
from academicportal.services import (
    AcademicTitlesService,
    CoursesService,
    DegreesService,
    FacultyCoursesService,
    InstructorsService,
    SemestersService,
    UniversitiesService,
)
from academicportal.settings import SettingsService
from academicportal.storage import SessionStore
from academicportal.validation import validate_login

console = Console()


def _println(msg: str = "") -> None:
    console.print(msg)


def _prompt(msg: str) -> str:
    return console.input(msg)


def _prompt_secret(msg: str) -> str:
    return console.input(msg, password=True)


def _safe_str(x: Any) -> str:
    return "" if x is None else str(x)


def _show_result(result: ApiResult) -> bool:
    if result.success:
        if result.message:
            _println(f"[green]{result.message}[/]")
        return True
    _println(f"[red]{result.message}[/]")
    return False


def _show_form_errors(errors: dict[str, str]) -> None:
    for field, message in errors.items():
        _println(f"[red]{field}[/]: {message}")


def _table(title: str, columns: list[str], rows: list[list[Any]]) -> None:
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("#", justify="right")
    for col in columns:
        table.add_column(col)
    for i, row in enumerate(rows, start=1):
        table.add_row(str(i), *[_safe_str(x) for x in row])
    console.print(table)


def _pick(items: list[Any], label: str) -> Optional[Any]:
    """
    Ask for a row number; None on blank or invalid input.
    """
    raw = _prompt(f"Number of the {label} [blank = back]: ").strip()
    if not raw:
        return None
    if not raw.isdigit():
        _println("Not a number.")
        return None
    i = int(raw)
    if not (1 <= i <= len(items)):
        _println("Out of range.")
        return None
    return items[i - 1]


def _confirm(msg: str) -> bool:
    return _prompt(f"{msg} [y/N]: ").strip().lower() == "y"


def _choose(result: ApiResult, label: str, text: Callable[[Any], str] = lambda x: x.value) -> Optional[Any]:
    """
    Show a lookup list and let the user pick one entry; None when the list
    could not be loaded or the user skips.
    """
    if not _show_result(result) or not result.data:
        return None
    _table(label.capitalize(), ["Id", "Value"], [[x.id, text(x)] for x in result.data])
    return _pick(result.data, label)


def _chosen_id(item: Optional[Any]) -> Any:
    return "" if item is None else item.id


def _department_choices(client: ApiClient) -> ApiResult:
    result = lookups.get_departments_lookup(client)
    if result.network_error:
        return ApiResult.ok(DegreesService.departments(), messages.MOCK_DATA_USED)
    return result


# ---------------------------------------------------------------------------
# Main loop
# ---------------------------------------------------------------------------


def run_interactive(client: ApiClient, store: SessionStore) -> None:
    """
    Interactive menu loop. The client's token follows the stored session.
    """
    # in-memory only: keep one instance so changes survive between visits
    faculty_courses = FacultyCoursesService()
    while True:
        session = store.load()
        client.token = session.token
        _print_header(client, store)

        choice = _prompt(
            "\n[1] Log in / log out\n"
            "[2] Degrees\n"
            "[3] Courses (filter by degree / track)\n"
            "[4] Instructors\n"
            "[5] Colleges / departments / tracks\n"
            "[6] Universities\n"
            "[7] Intakes\n"
            "[8] Faculty courses\n"
            "[9] Student card\n"
            "[10] Settings\n"
            "[11] Student registration\n"
            "[12] Registration card\n"
            "[0] Exit\n"
            "Select: "
        ).strip()

        if choice == "0":
            _println("Bye.")
            return

        flows: dict[str, Callable[[], None]] = {
            "1": lambda: _flow_login(client, store),
            "2": lambda: _flow_degrees(client),
            "3": lambda: _flow_courses(client),
            "4": lambda: _flow_instructors(client),
            "5": lambda: _flow_structure(client),
            "6": lambda: _flow_universities(client),
            "7": lambda: _flow_intakes(client),
            "8": lambda: _flow_faculty_courses(faculty_courses),
            "9": lambda: _flow_student(client, store),
            "10": lambda: _flow_settings(store),
            "11": lambda: _flow_register(client, store),
            "12": lambda: _flow_card(client, store),
        }
        flow = flows.get(choice)
        if flow is None:
            _println("Invalid choice.")
            continue
        flow()


def _print_header(client: ApiClient, store: SessionStore) -> None:
    session = store.load()
    _println("\n=== Academic portal (interactive) ===")
    _println(f"Backend: {client.base_url}")
    if session.logged_in:
        _println(f"Logged in: role={session.role} | nationalId={_safe_str(session.national_id)}")
    else:
        _println("Not logged in.")


# ---------------------------------------------------------------------------
# Flows
# ---------------------------------------------------------------------------


def _flow_login(client: ApiClient, store: SessionStore) -> None:
    if store.load().logged_in:
        if _confirm("Log out?"):
            auth.logout(store)
            _println("Logged out.")
        return

    nid = _prompt("National ID: ").strip()
    password = _prompt_secret("Password: ")
    errors = validate_login({"nationalId": nid, "password": password})
    if errors:
        _show_form_errors(errors)
        return

    result = auth.complete_login(auth.login(client, nid, password), store)
    if _show_result(result):
        _println(f"Next page: [bold]{result.data.next_page}[/]")


def _flow_degrees(client: ApiClient) -> None:
    service = DegreesService(client)
    result = service.list()
    if not _show_result(result):
        return
    items = result.data
    _table(
        "Degrees",
        ["Id", "Name", "Department", "General degree"],
        [[d.id, d.name, d.department_id, d.general_degree] for d in items],
    )

    action = _prompt("[v] view  [a] add  [d] delete  [blank] back: ").strip().lower()
    if action == "v":
        degree = _pick(items, "degree")
        if degree is not None:
            found = service.get(degree.id)
            if _show_result(found):
                d = found.data
                _table(
                    d.name,
                    ["Field", "Value"],
                    [
                        ["Department", d.department_id],
                        ["General degree", d.general_degree],
                        ["Years", d.standard_duration_years],
                        ["Description", d.description],
                    ],
                )
    elif action == "a":
        name = _prompt("Name: ").strip()
        dept = _choose(_department_choices(client), "department")
        general = _prompt("General degree: ").strip()
        if not name or dept is None:
            _println("Name and a department are required.")
            return
        _show_result(service.create(name, dept.id, general))
    elif action == "d":
        degree = _pick(items, "degree")
        if degree is not None and _confirm(f"Delete {degree.name}?"):
            _show_result(service.delete(degree.id))


def _flow_courses(client: ApiClient) -> None:
    dept = _prompt("Department id [blank = all courses]: ").strip()
    flt = DegreeTrackFilter(client)
    if dept.isdigit():
        flt.set_department(int(dept))
        if flt.degrees:
            _table("Degrees", ["Id", "Name"], [[d.id, d.name] for d in flt.degrees])
            degree = _pick(flt.degrees, "degree")
            if degree is not None:
                flt.select_degree(degree.id)
                if flt.tracks:
                    _table("Tracks", ["Id", "Name"], [[t.id, t.name] for t in flt.tracks])
                    track = _pick(flt.tracks, "track")
                    if track is not None:
                        flt.select_msar(track.id)

    service = CoursesService(client)
    sel = flt.selection
    result = service.list(flt.department_id, sel["degree_id"], sel["msar_id"])
    if not _show_result(result):
        return
    items = result.data
    if not items:
        _println("No courses.")
        return
    _table(
        "Courses",
        ["Code", "Name", "Hours", "Optional", "Semester", "Track", "Prerequisites"],
        [
            [c.code, c.name, c.credit_hours, "yes" if c.is_optional else "no", c.semester, c.msar, ", ".join(c.prerequisites)]
            for c in items
        ],
    )
    if _prompt("[d] delete  [blank] back: ").strip().lower() == "d":
        course = _pick(items, "course")
        if course is not None and _confirm(f"Delete {course.code}?"):
            _show_result(service.delete(course.id))


def _flow_instructors(client: ApiClient) -> None:
    service = InstructorsService(client)
    result = service.list()
    if not _show_result(result):
        return
    items = result.data
    _table(
        "Instructors",
        ["Name", "Title", "Department", "Phone", "Email"],
        [[i.name, i.title, i.department, i.phone, i.email] for i in items],
    )

    action = _prompt("[a] add  [d] delete  [blank] back: ").strip().lower()
    if action == "a":
        titles = AcademicTitlesService(client).list()
        if not _show_result(titles) or not titles.data:
            return
        _table("Academic titles", ["Id", "Title"], [[t.id, t.value] for t in titles.data])
        title = _pick(titles.data, "title")
        if title is None:
            return
        dept = _prompt("Department id: ").strip()
        if not dept.isdigit():
            _println("Not a number.")
            return
        _show_result(
            service.create(
                name=_prompt("Name: ").strip(),
                academic_title=title.id,
                department_id=int(dept),
                national_id=_prompt("National ID: ").strip(),
                phone=_prompt("Phone: ").strip(),
                email=_prompt("Email: ").strip(),
            )
        )
    elif action == "d":
        inst = _pick(items, "instructor")
        if inst is not None and _confirm(f"Delete {inst.name}?"):
            _show_result(service.delete(inst.id))


def _flow_structure(client: ApiClient) -> None:
    for title, fetch, columns, row in (
        ("Colleges", colleges.get_colleges, ["Id", "Name"], lambda c: [c.id, c.name]),
        ("Departments", departments.get_departments, ["Id", "Name", "Description"], lambda d: [d.id, d.name, d.description]),
        ("Tracks", tracks.get_tracks, ["Id", "Name", "Degree", "Department"], lambda t: [t.id, t.name, t.degree_id, t.department_name]),
    ):
        result = fetch(client)
        if _show_result(result):
            _table(title, columns, [row(x) for x in result.data])


def _flow_universities(client: ApiClient) -> None:
    service = UniversitiesService(client)
    result = service.list()
    if not _show_result(result):
        return
    items = result.data
    _table("Universities", ["Id", "Name"], [[u.id, u.name] for u in items])

    action = _prompt("[v] view  [a] add  [e] rename  [d] delete  [blank] back: ").strip().lower()
    if action == "v":
        uni = _pick(items, "university")
        if uni is not None:
            found = service.get(uni.id)
            if _show_result(found):
                u = found.data
                _table(u.name, ["Created", "Updated"], [[u.created_at, u.updated_at]])
    elif action == "a":
        name = _prompt("Name: ").strip()
        if name:
            _show_result(service.create(name))
    elif action == "e":
        uni = _pick(items, "university")
        if uni is not None:
            name = _prompt(f"New name [{uni.name}]: ").strip()
            if name:
                _show_result(service.update(uni.id, name))
    elif action == "d":
        uni = _pick(items, "university")
        if uni is not None and _confirm(f"Delete {uni.name}?"):
            _show_result(service.delete(uni.id))


def _flow_intakes(client: ApiClient) -> None:
    result = intakes.get_intakes(client)
    if not _show_result(result):
        return
    items = result.data
    _table("Intakes", ["Id", "Name", "Start", "End"], [[i.id, i.name, i.start_date, i.end_date] for i in items])

    semesters = SemestersService(client).list()
    if semesters.success and semesters.data:
        _println("Semesters: " + ", ".join(s.value for s in semesters.data))

    if _prompt("[d] delete  [blank] back: ").strip().lower() == "d":
        intake = _pick(items, "intake")
        if intake is not None and _confirm(f"Delete {intake.name}?"):
            _show_result(intakes.delete_intake(client, intake.id))


def _flow_faculty_courses(service: FacultyCoursesService) -> None:
    items = service.list().data
    _table(
        "Faculty courses",
        ["Code", "Name", "Instructor", "Credits", "Status"],
        [[c.course_id, c.name, c.instructor, c.credits, c.status] for c in items],
    )
    action = _prompt("[s] change status  [d] delete  [blank] back: ").strip().lower()
    if action == "s":
        course = _pick(items, "course")
        if course is not None:
            status = _prompt("Status (active / inactive / draft): ").strip()
            if status in ("active", "inactive", "draft"):
                _show_result(service.update(course.id, status=status))
            else:
                _println("Invalid status.")
    elif action == "d":
        course = _pick(items, "course")
        if course is not None and _confirm(f"Delete {course.course_id}?"):
            _show_result(service.delete(course.id))


def _flow_student(client: ApiClient, store: SessionStore) -> None:
    default = _safe_str(store.load().national_id)
    nid = _prompt(f"National ID [{default}]: ").strip() or default
    result = students.get_student_dashboard(client, nid)
    if not _show_result(result):
        return
    data = result.data
    table = Table(title="Registration card", box=box.SIMPLE)
    table.add_column("Field")
    table.add_column("Value")
    for key in sorted(data):
        if key != "attachments":
            table.add_row(key, _safe_str(data[key]))
    console.print(table)


def _flow_register(client: ApiClient, store: SessionStore) -> None:
    default = _safe_str(store.load().national_id)
    form: dict[str, Any] = {
        "nationalId": _prompt(f"National ID [{default}]: ").strip() or default,
        "firstName": _prompt("First name: ").strip(),
        "secondName": _prompt("Second name: ").strip(),
        "thirdName": _prompt("Third name: ").strip(),
        "phone": _prompt("Phone: ").strip(),
        "email": _prompt("Email: ").strip(),
        "dateOfBirth": _prompt("Date of birth (YYYY-MM-DD): ").strip(),
        "placeOfBirth": _prompt("Place of birth: ").strip(),
    }
    for key, fetch, label in (
        ("nationality", lookups.get_nationalities, "nationality"),
        ("majorId", lookups.get_majors, "major"),
        ("collegeId", lookups.get_colleges_lookup, "college"),
        ("universityId", lookups.get_universities_lookup, "university"),
        ("grade", lookups.get_grades, "grade"),
        ("militaryService", lookups.get_military_services, "military service"),
    ):
        form[key] = _chosen_id(_choose(fetch(client), label))

    types = lookups.get_qualification_types(client)
    qualifications = []
    while _confirm("Add a qualification?"):
        kind = _choose(types, "qualification")
        if kind is None:
            break
        qualifications.append(
            {
                "qualification": kind.id,
                "institution": _prompt("Institution: ").strip(),
                "grade": _prompt("Grade: ").strip(),
                "dateObtained": _prompt("Date obtained (YYYY-MM-DD): ").strip(),
            }
        )
    form["qualifications"] = qualifications

    try:
        _show_result(students.add_student(client, form))
    except FormValidationError as e:
        _show_form_errors(e.errors)


def _flow_card(client: ApiClient, store: SessionStore) -> None:
    default = _safe_str(store.load().national_id)
    form: dict[str, Any] = {
        "nationalId": _prompt(f"National ID [{default}]: ").strip() or default,
        "firstName": _prompt("First name: ").strip(),
        "secondName": _prompt("Second name: ").strip(),
        "thirdName": _prompt("Third name: ").strip(),
        "phoneNumber": _prompt("Phone: ").strip(),
    }
    for key, fetch, label in (
        ("requestTypeId", lookups.get_request_kinds, "request type"),
        ("semesterId", lambda cl: SemestersService(cl).list(), "semester"),
        ("languageId", lookups.get_languages, "language"),
        ("degreeId", lookups.get_degrees_lookup, "degree"),
        ("departmentId", lookups.get_departments_lookup, "department"),
        ("collegeId", lookups.get_colleges_lookup, "college"),
        ("universityId", lookups.get_universities_lookup, "university"),
        ("grade", lookups.get_grades, "grade"),
    ):
        form[key] = _chosen_id(_choose(fetch(client), label))
    form["year"] = _chosen_id(_choose(intakes.get_intakes(client), "intake", text=lambda i: i.name))

    files = {}
    for name, label in (
        ("BachelorDegree", "Bachelor certificate"),
        ("MasterDegree", "Master certificate"),
        ("EquivalencyDegree", "Equivalency certificate"),
    ):
        path = _prompt(f"{label} file [blank = none]: ").strip()
        if path:
            files[name] = path

    try:
        _show_result(students.generate_registration_card(client, form, files=files))
    except FormValidationError as e:
        _show_form_errors(e.errors)
    except OSError as e:
        _println(f"[red]Cannot read attachment:[/] {e}")


def _flow_settings(store: SessionStore) -> None:
    service = SettingsService(store)
    result = service.get()
    if not _show_result(result):
        return
    for section in ("notifications", "privacy", "appearance"):
        values = result.data[section]
        _table(section.capitalize(), ["Setting", "Value"], [[k, v] for k, v in values.items()])

    action = _prompt("[t] theme  [p] change password  [x] delete account  [blank] back: ").strip().lower()
    if action == "t":
        theme = _prompt("Theme (light / dark / system): ").strip()
        if theme in ("light", "dark", "system"):
            _show_result(service.update_appearance({"theme": theme}))
        else:
            _println("Invalid theme.")
    elif action == "p":
        current = _prompt_secret("Current password: ")
        new = _prompt_secret("New password: ")
        _show_result(service.change_password(current, new))
    elif action == "x":
        confirmation = _prompt("Type the confirmation text to delete the account: ").strip()
        _show_result(service.delete_account(confirmation))
