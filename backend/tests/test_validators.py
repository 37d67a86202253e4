import logging

import pytest

from student_service.utils.validators import validate_age, validate_email, validate_name


def test_name_must_be_non_empty():
    assert validate_name("Rahul") is True
    assert validate_name("") is False


@pytest.mark.parametrize("age,expected", [(1, True), (22, True), (0, False), (-3, False)])
def test_age_must_be_positive(age, expected):
    assert validate_age(age) is expected


@pytest.mark.parametrize("email", [
    "rahul@gmail.com",
    "first.last+tag@example.co.uk",
    "a@b",
    "x@school.test",
])
def test_valid_emails(email):
    assert validate_email(email) is True


@pytest.mark.parametrize("email", ["not-an-email", "", "a@", "@example.com", "two@@example.com"])
def test_invalid_emails(email):
    assert validate_email(email) is False


def test_invalid_email_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="student_service.validators"):
        assert validate_email("not-an-email") is False
    assert "not-an-email" in caplog.text
