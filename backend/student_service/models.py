"""Domain model for student records held by the in-memory repository."""

from dataclasses import asdict, dataclass


@dataclass
class Student:
    """A single student record.

    `id` is assigned by the repository on creation and never changes
    afterwards; the remaining fields are overwritten by updates.
    """
    id: int
    name: str
    age: int
    email: str

    def to_dict(self) -> dict:
        return asdict(self)


DEMO_STUDENTS = [
    {"name": "Rahul", "age": 22, "email": "rahul@gmail.com"},
    {"name": "Alice", "age": 23, "email": "alice@gmail.com"},
    {"name": "Rob", "age": 24, "email": "rob@gmail.com"},
]
