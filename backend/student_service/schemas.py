"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable. Field-level rules (name
required, positive age, email format) are enforced by the service layer
so each failure maps to its own error message.
"""

from pydantic import BaseModel, ConfigDict


class StudentIn(BaseModel):
    """Payload for creating or updating a student.

    Missing fields default to empty values and are rejected by validation.
    Types are not coerced, so `"age": "23"` or `true` is a malformed body.
    """
    model_config = ConfigDict(strict=True)

    name: str = ""
    age: int = 0
    email: str = ""


class StudentOut(BaseModel):
    """A stored student record as returned to clients."""
    id: int
    name: str
    age: int
    email: str


class SummaryOut(BaseModel):
    """Generated natural-language summary for one student."""
    summary: str
