"""
Persistent login session.

This module manages the file (by default):

    ~/.academicportal/session.json

It plays the role of the browser's local storage: the bearer token, the
logged-in user, the decoded role and national ID, whether the student already
has a registration card, and the user's settings.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from academicportal import config


def _default_session_path() -> Path:
    """
    Return the session file path (PORTAL_SESSION_FILE or the home default).

    A function rather than a constant so tests can point it elsewhere.
    """
    return config.get_session_path()


@dataclass
class Session:
    token: Optional[str] = None
    user: Any = None
    role: Optional[str] = None
    national_id: Optional[str] = None
    has_card: Optional[bool] = None
    settings: dict[str, Any] = field(default_factory=dict)

    @property
    def logged_in(self) -> bool:
        return bool(self.token)

    @property
    def is_admin(self) -> bool:
        return (self.role or "").strip().lower() == "admin"


class SessionStore:
    """
    Load / save / clear the session file.
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else _default_session_path()

    def load(self) -> Session:
        """
        Returns an empty session if the file is missing or unreadable.
        """
        if not self.path.exists():
            return Session()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                return Session()
            known = {f.name for f in fields(Session)}
            session = Session(**{k: v for k, v in data.items() if k in known})
            if not isinstance(session.settings, dict):
                session.settings = {}
            return session
        except (OSError, json.JSONDecodeError, UnicodeDecodeError, TypeError):
            return Session()

    def save(self, session: Session) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(asdict(session), indent=2, ensure_ascii=False), encoding="utf-8")

    def update(self, **changes: Any) -> Session:
        session = self.load()
        for k, v in changes.items():
            if not hasattr(session, k):
                raise AttributeError(f"unknown session field: {k}")
            setattr(session, k, v)
        self.save(session)
        return session

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
