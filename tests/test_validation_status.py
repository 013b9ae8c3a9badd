import pytest
from pydantic import ValidationError

from models.validation_status import StatusKind, ValidationStatus, most_severe
from ui.validator import Validator


def test_factories_and_queries():
    assert ValidationStatus.ok().is_ok()
    err = ValidationStatus.error("boom")
    assert err.is_error() and not err.is_ok()
    assert err.matches(StatusKind.ERROR)
    assert str(err) == "ERROR: boom"
    assert not ValidationStatus.warning("careful").is_ok()


def test_status_is_immutable():
    status = ValidationStatus.error("boom")
    with pytest.raises(ValidationError):
        status.message = "other"


def test_most_severe_prefers_worst_then_latest():
    first = ValidationStatus.error("first")
    second = ValidationStatus.error("second")
    statuses = [ValidationStatus.ok(), first, ValidationStatus.warning("w"), second]
    assert most_severe(statuses) is second
    assert most_severe([]).is_ok()
    assert most_severe([None, ValidationStatus.info("i")]).kind == StatusKind.INFO


@pytest.mark.parametrize("text", ["0", "7", "+12", "2147483647"])
def test_positive_numbers_accepted(text):
    assert Validator.validate_positive_number(text).is_ok()


def test_empty_number():
    status = Validator.validate_positive_number("")
    assert status.is_error()
    assert status.message == "empty input"


@pytest.mark.parametrize("text", ["-1", "12abc", " 5", "1_000", "2147483648", "abc"])
def test_invalid_numbers(text):
    status = Validator.validate_positive_number(text)
    assert status.is_error()
    assert status.message == f"invalid number: {text}"


def test_string_length_validator_takes_tk_string_args():
    assert Validator.validate_string_length("3", "abc")
    assert not Validator.validate_string_length("3", "abcd")
