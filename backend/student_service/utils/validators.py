"""Field validators for student payloads."""

from __future__ import annotations

import logging

from email_validator import EmailNotValidError, validate_email as _parse_email


_LOGGER = logging.getLogger("student_service.validators")


def validate_name(name: str) -> bool:
    return bool(name)


def validate_age(age: int) -> bool:
    return age > 0


def validate_email(email: str) -> bool:
    """Return True when `email` is a single syntactically valid address.

    Only the syntax is checked: no DNS lookups, and dotless or
    special-use test domains are accepted.
    """
    try:
        _parse_email(
            email,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError as exc:
        _LOGGER.info("Invalid email: %s, error: %s", email, exc)
        return False
    return True
