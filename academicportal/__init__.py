"""
Academic Portal client.

Terminal front end and client library for the university academic-administration
backend (students, degrees, departments, tracks, courses, instructors, intakes).
"""

from pathlib import Path

try:
    __version__ = (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()
except OSError:
    __version__ = "0.1.0"
