"""
CLI (Command Line Interface).

Quick terminal commands for administrators and for testing, e.g.:

    academicportal login <national_id>
    academicportal whoami
    academicportal list degrees
    academicportal delete courses <id>
    academicportal student <national_id>
    academicportal register --qualification 2:"Cairo University":3.2
    academicportal card --first A --second B --third C --phone 010... --request-type 1 ...
    academicportal filter --department 1 --degree 3
    academicportal interactive

Note:
- The interactive UI lives in academicportal/interactive.py
- This CLI prints plain text (no rich formatting)
"""

from __future__ import annotations

import argparse
import getpass
import logging
from typing import Any, Callable, Optional

from academicportal import (
    auth,
    colleges,
    config,
    departments,
    intakes,
    lookups,
    students,
    tracks,
)
from academicportal.client import ApiClient
from academicportal.errors import PortalError
from academicportal.filters import DegreeTrackFilter
from academicportal.model import ApiResult
from academicportal.services import (
    AcademicTitlesService,
    CoursesService,
    DegreesService,
    InstructorsService,
    SemestersService,
    UniversitiesService,
)
from academicportal.storage import SessionStore
from academicportal.validation import ensure_login, ensure_signup

logger = logging.getLogger(__name__)

MAX_ROWS = 50


def _store(args: argparse.Namespace) -> SessionStore:
    return SessionStore(args.session_file) if getattr(args, "session_file", None) else SessionStore()


def _client(args: argparse.Namespace, store: SessionStore) -> ApiClient:
    session = store.load()
    return ApiClient(base_url=getattr(args, "api_url", None), token=session.token)


def _print_failure(result: ApiResult) -> int:
    print(result.message or "Failed.")
    for err in result.errors:
        if err != result.message:
            print(f"  - {err}")
    return 1


def _row(*parts: Any) -> str:
    return " | ".join("" if p is None else str(p) for p in parts)


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------


def _lookup_row(item: Any) -> str:
    return _row(item.id, item.value)


# resource -> (fetch, format one record)
Lister = tuple[Callable[[ApiClient], ApiResult], Callable[[Any], str]]


def _listers() -> dict[str, Lister]:
    return {
        "colleges": (colleges.get_colleges, lambda c: _row(c.id, c.name)),
        "universities": (lambda cl: UniversitiesService(cl).list(), lambda u: _row(u.id, u.name)),
        "degrees": (
            lambda cl: DegreesService(cl).list(),
            lambda d: _row(d.id, d.name, f"department={d.department_id}"),
        ),
        "departments": (departments.get_departments, lambda d: _row(d.id, d.name, d.description)),
        "tracks": (tracks.get_tracks, lambda t: _row(t.id, t.name, f"degree={t.degree_id}", t.department_name)),
        "courses": (
            lambda cl: CoursesService(cl).list(),
            lambda c: _row(c.id, c.code, c.name, f"{c.credit_hours}h", "optional" if c.is_optional else "required"),
        ),
        "instructors": (
            lambda cl: InstructorsService(cl).list(),
            lambda i: _row(i.id, i.name, i.title, i.department),
        ),
        "intakes": (intakes.get_intakes, lambda i: _row(i.id, i.name, f"{i.start_date} -> {i.end_date}")),
        "students": (students.get_students, lambda s: _row(s.national_id, s.full_name, s.phone, s.email)),
        "programs": (lookups.get_programs, lambda p: _row(p.id, p.value)),
        "semesters": (lambda cl: SemestersService(cl).list(), lambda s: _row(s.id, s.value)),
        "titles": (lambda cl: AcademicTitlesService(cl).list(), lambda t: _row(t.id, t.value)),
        "nationalities": (lookups.get_nationalities, _lookup_row),
        "majors": (lookups.get_majors, _lookup_row),
        "grades": (lookups.get_grades, _lookup_row),
        "qualifications": (lookups.get_qualification_types, _lookup_row),
        "military-services": (lookups.get_military_services, _lookup_row),
        "request-kinds": (lookups.get_request_kinds, _lookup_row),
        "languages": (lookups.get_languages, _lookup_row),
    }


DELETERS: dict[str, Callable[[ApiClient, str], ApiResult]] = {
    "colleges": lambda cl, rid: colleges.delete_college(cl, int(rid)),
    "universities": lambda cl, rid: UniversitiesService(cl).delete(int(rid)),
    "degrees": lambda cl, rid: DegreesService(cl).delete(int(rid)),
    "departments": lambda cl, rid: departments.delete_department(cl, int(rid)),
    "tracks": lambda cl, rid: tracks.delete_track(cl, int(rid)),
    "courses": lambda cl, rid: CoursesService(cl).delete(rid),
    "instructors": lambda cl, rid: InstructorsService(cl).delete(rid),
    "intakes": lambda cl, rid: intakes.delete_intake(cl, int(rid)),
}


def _cmd_list(args: argparse.Namespace, client: ApiClient) -> int:
    """
    Print the records of one resource, one per line.
    """
    fetch, fmt = _listers()[args.resource]
    result = fetch(client)
    if not result.success:
        return _print_failure(result)

    items = result.data or []
    if result.message:
        print(result.message)
    if not items:
        print("No results.")
        return 0
    for item in items[:MAX_ROWS]:
        print(fmt(item))
    if len(items) > MAX_ROWS:
        print(f"... and {len(items) - MAX_ROWS} more")
    return 0


def _cmd_delete(args: argparse.Namespace, client: ApiClient) -> int:
    """
    Delete one record of a resource by id.
    """
    rid = (args.id or "").strip()
    if not rid:
        print("Please provide an id.")
        return 1
    try:
        result = DELETERS[args.resource](client, rid)
    except ValueError:
        print(f"Invalid id: {rid}")
        return 1
    if not result.success:
        return _print_failure(result)
    print(result.message or "Deleted.")
    return 0


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


def _cmd_login(args: argparse.Namespace, client: ApiClient, store: SessionStore) -> int:
    """
    Log in and store the session (token, role, national id).
    """
    nid = (args.national_id or "").strip()
    password = args.password if args.password is not None else getpass.getpass("Password: ")
    ensure_login({"nationalId": nid, "password": password})

    result = auth.complete_login(auth.login(client, nid, password), store)
    if not result.success:
        return _print_failure(result)
    outcome = result.data
    print(outcome.message)
    print(f"Role: {outcome.session.role} | next: {outcome.next_page}")
    return 0


def _cmd_logout(args: argparse.Namespace, store: SessionStore) -> int:
    """Forget the stored session."""
    auth.logout(store)
    print("Logged out.")
    return 0


def _cmd_whoami(args: argparse.Namespace, store: SessionStore) -> int:
    """
    Print the stored session, or exit 1 when nobody is logged in.
    """
    session = store.load()
    if not session.logged_in:
        print("Not logged in.")
        return 1
    print(_row(f"role={session.role}", f"nationalId={session.national_id}", f"hasCard={session.has_card}"))
    return 0


def _cmd_signup(args: argparse.Namespace, client: ApiClient) -> int:
    """
    Create a student account; the password is asked twice unless given.
    """
    password = args.password if args.password is not None else getpass.getpass("Password: ")
    confirm = args.password if args.password is not None else getpass.getpass("Confirm password: ")
    form = {
        "nationalId": (args.national_id or "").strip(),
        "phoneNumber": (args.phone or "").strip(),
        "password": password,
        "confirmPassword": confirm,
    }
    ensure_signup(form)
    result = auth.signup(client, form)
    if not result.success:
        return _print_failure(result)
    print(result.message or "Account created.")
    return 0


# ---------------------------------------------------------------------------
# Students and filter
# ---------------------------------------------------------------------------


def _cmd_student(args: argparse.Namespace, client: ApiClient, store: SessionStore) -> int:
    """
    Print a student's registration card (defaults to the logged-in user).
    """
    nid = (args.national_id or "").strip() or (store.load().national_id or "")
    result = students.get_student_dashboard(client, nid)
    if not result.success:
        return _print_failure(result)
    data = result.data
    for key in sorted(data):
        if key == "attachments":
            continue
        print(f"{key}: {data[key]}")
    return 0


def parse_qualification(text: str) -> dict[str, Any]:
    """
    TYPE:INSTITUTION[:GRADE[:DATE]] -> qualification row.
    """
    parts = [p.strip() for p in text.split(":", 3)]
    parts += [""] * (4 - len(parts))
    return {"qualification": parts[0], "institution": parts[1], "grade": parts[2], "dateObtained": parts[3]}


def _cmd_register(args: argparse.Namespace, client: ApiClient, store: SessionStore) -> int:
    """
    Save a student record with at least one qualification.
    """
    form = {
        "nationalId": (args.national_id or "").strip() or (store.load().national_id or ""),
        "firstName": args.first,
        "secondName": args.second,
        "thirdName": args.third,
        "phone": args.phone,
        "email": args.email,
        "dateOfBirth": args.birth_date,
        "placeOfBirth": args.birth_place,
        "nationality": args.nationality,
        "majorId": args.major,
        "collegeId": args.college,
        "universityId": args.university,
        "grade": args.grade,
        "gpa": args.gpa,
        "militaryService": args.military_service,
        "qualifications": [parse_qualification(q) for q in args.qualification or []],
    }
    result = students.add_student(client, form)
    if not result.success:
        return _print_failure(result)
    print(result.message or "Saved.")
    return 0


def _cmd_card(args: argparse.Namespace, client: ApiClient, store: SessionStore) -> int:
    """
    Submit a registration card, with optional scanned certificates.
    """
    form = {
        "nationalId": (args.national_id or "").strip() or (store.load().national_id or ""),
        "firstName": args.first,
        "secondName": args.second,
        "thirdName": args.third,
        "phoneNumber": args.phone,
        "requestTypeId": args.request_type,
        "semesterId": args.semester,
        "languageId": args.language,
        "departmentId": args.department,
        "degreeId": args.degree,
        "collegeId": args.college,
        "universityId": args.university,
        "grade": args.grade,
        "year": args.year,
    }
    files = {"BachelorDegree": args.bachelor, "MasterDegree": args.master, "EquivalencyDegree": args.equivalency}
    try:
        result = students.generate_registration_card(client, form, files=files)
    except OSError as e:
        print(f"Cannot read attachment: {e}")
        return 1
    if not result.success:
        return _print_failure(result)
    print(result.message or "Registration card submitted.")
    return 0


def _cmd_filter(args: argparse.Namespace, client: ApiClient) -> int:
    """
    Walk department -> degree -> track and print the matching courses.
    """
    flt = DegreeTrackFilter(client)
    flt.set_department(args.department)
    print(f"Degrees ({len(flt.degrees)}):")
    for d in flt.degrees:
        print(f"  {_row(d.id, d.name)}")

    if args.degree:
        flt.select_degree(args.degree)
        print(f"Tracks ({len(flt.tracks)}):")
        for t in flt.tracks:
            print(f"  {_row(t.id, t.name)}")
        if args.msar:
            flt.select_msar(args.msar)

    sel = flt.selection
    result = CoursesService(client).list(args.department, sel["degree_id"], sel["msar_id"])
    if not result.success:
        return _print_failure(result)
    print(f"Courses ({len(result.data)}):")
    for c in result.data[:MAX_ROWS]:
        print(f"  {_row(c.code, c.name, c.msar)}")
    return 0


# ---------------------------------------------------------------------------
# Parser / entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="academicportal", description="Academic portal CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests (DEBUG)")
    parser.add_argument("--api-url", default=None, help="Backend base URL (default: PORTAL_API_URL)")
    parser.add_argument("--session-file", default=None, help="Session file (default: PORTAL_SESSION_FILE)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_login = sub.add_parser("login", help="Log in and store the session")
    p_login.add_argument("national_id", type=str, help="National ID (14 digits)")
    p_login.add_argument("--password", default=None, help="Password (prompted if omitted)")

    sub.add_parser("logout", help="Forget the stored session")
    sub.add_parser("whoami", help="Show the stored session")

    p_signup = sub.add_parser("signup", help="Create a student account")
    p_signup.add_argument("national_id", type=str, help="National ID (14 digits)")
    p_signup.add_argument("phone", type=str, help="Phone number (11 digits)")
    p_signup.add_argument("--password", default=None, help="Password (prompted if omitted)")

    p_list = sub.add_parser("list", help="List records of a resource")
    p_list.add_argument("resource", choices=sorted(_listers()))

    p_delete = sub.add_parser("delete", help="Delete one record")
    p_delete.add_argument("resource", choices=sorted(DELETERS))
    p_delete.add_argument("id", type=str)

    p_student = sub.add_parser("student", help="Show a student's registration card")
    p_student.add_argument("national_id", nargs="?", default="", help="Defaults to the logged-in user")

    p_register = sub.add_parser("register", help="Save a student record")
    p_register.add_argument("national_id", nargs="?", default="", help="Defaults to the logged-in user")
    p_register.add_argument("--first", default="")
    p_register.add_argument("--second", default="")
    p_register.add_argument("--third", default="")
    p_register.add_argument("--phone", default="")
    p_register.add_argument("--email", default="")
    p_register.add_argument("--birth-date", default="", help="YYYY-MM-DD")
    p_register.add_argument("--birth-place", default="")
    p_register.add_argument("--nationality", default=None, help="Lookups/nationalities id")
    p_register.add_argument("--major", default=None, help="Lookups/majors id")
    p_register.add_argument("--college", default=None, help="Lookups/colleges id")
    p_register.add_argument("--university", default=None, help="Lookups/universities id")
    p_register.add_argument("--grade", default=None, help="Lookups/grades id")
    p_register.add_argument("--gpa", default=None)
    p_register.add_argument("--military-service", default=None, help="Lookups/militaryServices id")
    p_register.add_argument(
        "--qualification",
        action="append",
        metavar="TYPE:INSTITUTION[:GRADE[:DATE]]",
        help="Repeat for each qualification (TYPE is a Lookups/Qualifications id)",
    )

    p_card = sub.add_parser("card", help="Submit a registration card")
    p_card.add_argument("national_id", nargs="?", default="", help="Defaults to the logged-in user")
    p_card.add_argument("--first", default="")
    p_card.add_argument("--second", default="")
    p_card.add_argument("--third", default="")
    p_card.add_argument("--phone", default="")
    p_card.add_argument("--request-type", default="", help="Lookups/kind-of-requests id")
    p_card.add_argument("--semester", default="", help="Lookups/semesters id")
    p_card.add_argument("--language", default="", help="Lookups/languages id")
    p_card.add_argument("--department", default="")
    p_card.add_argument("--degree", default="")
    p_card.add_argument("--college", default="")
    p_card.add_argument("--university", default="")
    p_card.add_argument("--grade", default="")
    p_card.add_argument("--year", default="", help="Intake id")
    p_card.add_argument("--bachelor", default=None, help="Bachelor certificate file")
    p_card.add_argument("--master", default=None, help="Master certificate file")
    p_card.add_argument("--equivalency", default=None, help="Equivalency certificate file")

    p_filter = sub.add_parser("filter",help="Browse degrees, tracks and courses of a department")
    p_filter.add_argument("--department", type=int, required=True)
    p_filter.add_argument("--degree", type=int, default=None)
    p_filter.add_argument("--msar", type=int, default=None)

    sub.add_parser("interactive", help="Interactive menu mode")

    return parser


def _dispatch(args: argparse.Namespace) -> int:
    store = _store(args)
    if args.command == "logout":
        return _cmd_logout(args, store)
    if args.command == "whoami":
        return _cmd_whoami(args, store)

    client = _client(args, store)
    if args.command == "login":
        return _cmd_login(args, client, store)
    if args.command == "signup":
        return _cmd_signup(args, client)
    if args.command == "list":
        return _cmd_list(args, client)
    if args.command == "delete":
        return _cmd_delete(args, client)
    if args.command == "student":
        return _cmd_student(args, client, store)
    if args.command == "register":
        return _cmd_register(args, client, store)
    if args.command == "card":
        return _cmd_card(args, client, store)
    if args.command == "filter":
        return _cmd_filter(args, client)
    if args.command == "interactive":
        from academicportal.interactive import run_interactive

        run_interactive(client, store)
        return 0
    return 2


def main(argv: Optional[list[str]] = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config.configure_logging(args.verbose)

    try:
        rc = _dispatch(args)
    except PortalError as e:
        logger.debug("command failed", exc_info=True)
        errors = getattr(e, "errors", None)
        if errors:
            for field, message in errors.items():
                print(f"{field}: {message}")
        else:
            print(str(e))
        rc = 1
    raise SystemExit(rc)
