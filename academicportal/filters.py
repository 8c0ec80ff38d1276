"""
Cascading degree -> track filter.

Choosing a department loads its degrees; choosing a degree loads its tracks.
Every parent change re-fetches (no caching) and clears everything below it.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from academicportal import degrees, tracks
from academicportal.client import ApiClient
from academicportal.model import Degree, Track

logger = logging.getLogger(__name__)

FilterCallback = Callable[[dict[str, Optional[int]]], Any]


class DegreeTrackFilter:
    def __init__(
        self,
        client: ApiClient,
        department_id: Optional[int] = None,
        on_change: Optional[FilterCallback] = None,
    ):
        self.client = client
        self.on_change = on_change
        self.department_id: Optional[int] = None
        self.degrees: list[Degree] = []
        self.tracks: list[Track] = []
        self.degree_id: Optional[int] = None
        self.msar_id: Optional[int] = None
        if department_id:
            self.set_department(department_id)

    @property
    def selection(self) -> dict[str, Optional[int]]:
        return {"degree_id": self.degree_id, "msar_id": self.msar_id}

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.selection)

    def set_department(self, department_id: Optional[int]) -> None:
        self.department_id = department_id or None
        self.degree_id = None
        self.tracks = []
        self.msar_id = None
        self.degrees = []
        if self.department_id:
            result = degrees.get_degrees_by_department(self.client, self.department_id)
            if result.success:
                self.degrees = list(result.data)
            else:
                logger.warning("could not load degrees of department %s: %s", self.department_id, result.message)
        self._notify()

    def select_degree(self, degree_id: Optional[int]) -> None:
        self.degree_id = degree_id or None
        self.msar_id = None
        self.tracks = []
        if self.degree_id:
            result = tracks.get_tracks_for_degree(self.client, self.degree_id)
            if result.success:
                self.tracks = list(result.data)
            else:
                logger.warning("could not load tracks of degree %s: %s", self.degree_id, result.message)
        self._notify()

    def select_msar(self, msar_id: Optional[int]) -> None:
        # a track only makes sense under a selected degree
        self.msar_id = (msar_id or None) if self.degree_id else None
        self._notify()
