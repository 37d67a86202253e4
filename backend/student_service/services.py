"""Business logic used by HTTP controllers.

`StudentService` coordinates field validation, the student repository and
the summary client. It raises `ValueError` with a client-facing message
when a payload is rejected and returns `None`/`False` for unknown ids;
controllers translate both into HTTP responses.
"""

from typing import List, Optional

from .models import Student
from .repositories import StudentRepository
from .utils.summary_client import SummaryClient, UpstreamError
from .utils.validators import validate_age, validate_email, validate_name


class StudentService:
    """CRUD and summary operations over a `StudentRepository`."""
    def __init__(self, repo: StudentRepository, summary_client: Optional[SummaryClient] = None):
        self.repo = repo
        self.summary_client = summary_client

    def list_students(self) -> List[Student]:
        return self.repo.list()

    def get_student(self, student_id: int) -> Optional[Student]:
        return self.repo.get(student_id)

    def create_student(self, name: str, age: int, email: str) -> Student:
        """Validate the fields and store a new student.

        Raises `ValueError` naming the first field that fails.
        """
        self._validate(name, age, email)
        return self.repo.create(name, age, email)

    def update_student(self, student_id: int, name: str, age: int, email: str) -> bool:
        """Overwrite an existing student's fields.

        Returns False if the id is unknown; the lookup happens before
        validation so a missing student wins over a bad payload.
        """
        if self.repo.get(student_id) is None:
            return False
        self._validate(name, age, email)
        return self.repo.update(student_id, name, age, email)

    def delete_student(self, student_id: int) -> bool:
        return self.repo.delete(student_id)

    def summarize_student(self, student: Student) -> str:
        """Generate a summary; `SummaryError` propagates to the caller."""
        if self.summary_client is None:
            raise UpstreamError("summary client not configured")
        return self.summary_client.generate(student)

    @staticmethod
    def _validate(name: str, age: int, email: str) -> None:
        if not validate_name(name):
            raise ValueError("Name is required")
        if not validate_age(age):
            raise ValueError("Age must be a positive integer")
        if not validate_email(email):
            raise ValueError("Invalid email format")
