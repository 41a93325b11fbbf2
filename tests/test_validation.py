import pytest

from tasktracker.errors import ErrorKind
from tasktracker.utils.validation import (
    is_email_valid,
    validate_task_payload,
    validate_user_payload,
)


@pytest.mark.parametrize("email", ["a@b.com", "alice@x.com", "first.last@sub.domain.org"])
def test_valid_emails(email):
    assert is_email_valid(email)


@pytest.mark.parametrize("email", ["not-an-email", "a@b", "@.", "a b@c d.e"])
def test_invalid_emails(email):
    assert not is_email_valid(email)


def test_email_check_is_a_search_not_a_full_match():
    # the shape only has to appear somewhere in the value
    assert is_email_valid("contact: a@b.c please")


def test_user_payload_requires_name_and_email():
    for name, email in [("", "a@b.com"), ("A", ""), (None, "a@b.com"), ("A", None)]:
        err = validate_user_payload(name, email)
        assert err.kind == ErrorKind.BAD_REQUEST
        assert err.message == "Invalid input: Name and email are required"


def test_user_payload_rejects_bad_email():
    err = validate_user_payload("A", "not-an-email")
    assert err.kind == ErrorKind.BAD_REQUEST
    assert err.message == "Invalid input: Email is not valid"


def test_user_payload_ok():
    assert validate_user_payload("Alice", "alice@x.com") is None


def test_whitespace_name_is_not_empty():
    assert validate_user_payload("  ", "alice@x.com") is None


def test_task_payload():
    assert validate_task_payload("Buy milk") is None
    err = validate_task_payload("")
    assert err.kind == ErrorKind.BAD_REQUEST
    assert err.message == "Invalid input: Title is required"
