"""In-memory repository for student records.

The repository owns the ordered list of students and the id counter.
FastAPI runs sync endpoints in a threadpool, so every read and write is
guarded by a lock and callers always receive copies, never the stored
objects themselves.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Iterable, List, Optional

from .models import Student


_LOGGER = logging.getLogger("student_service.store")


class StudentRepository:
    """CRUD operations for `Student` records kept in insertion order."""

    def __init__(self, seed: Optional[Iterable[dict]] = None):
        self._students: List[Student] = []
        self._next_id = 1
        self._lock = threading.Lock()
        for item in seed or ():
            self.create(item["name"], item["age"], item["email"])

    def list(self) -> List[Student]:
        """Return a snapshot of all students in insertion order."""
        with self._lock:
            return [replace(s) for s in self._students]

    def get(self, student_id: int) -> Optional[Student]:
        """Return the student with `student_id` or `None` if absent."""
        with self._lock:
            idx = self._index_of(student_id)
            return replace(self._students[idx]) if idx is not None else None

    def create(self, name: str, age: int, email: str) -> Student:
        """Append a new student and return the stored record.

        Ids come from a counter that only moves forward, so an id freed by
        a delete is never handed out again.
        """
        with self._lock:
            student = Student(id=self._next_id, name=name, age=age, email=email)
            self._next_id += 1
            self._students.append(student)
            _LOGGER.debug("created student id=%s", student.id)
            return replace(student)

    def update(self, student_id: int, name: str, age: int, email: str) -> bool:
        """Overwrite name/age/email in place. Returns False for unknown ids."""
        with self._lock:
            idx = self._index_of(student_id)
            if idx is None:
                return False
            student = self._students[idx]
            student.name = name
            student.age = age
            student.email = email
            return True

    def delete(self, student_id: int) -> bool:
        """Remove the student, keeping the order of the others."""
        with self._lock:
            idx = self._index_of(student_id)
            if idx is None:
                return False
            del self._students[idx]
            _LOGGER.debug("deleted student id=%s", student_id)
            return True

    def _index_of(self, student_id: int) -> Optional[int]:
        # caller holds the lock
        for idx, student in enumerate(self._students):
            if student.id == student_id:
                return idx
        return None
