from __future__ import annotations

import re

from models.validation_status import ValidationStatus

EMPTY_INPUT = "empty input"
INVALID_INPUT = "invalid number: {}"

_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1
# int() would also take whitespace, underscores and non-ASCII digits.
_INT_RE = re.compile(r"[+-]?[0-9]+")


class Validator:
    @staticmethod
    def parse_int(text: str) -> int | None:
        """
        Parses text as a 32-bit signed integer.
        Returns None when it isn't one.
        """
        if not _INT_RE.fullmatch(text or ""):
            return None
        value = int(text)
        if value < _INT_MIN or value > _INT_MAX:
            return None
        return value

    @staticmethod
    def validate_positive_number(number: str) -> ValidationStatus:
        """
        Checks a number field's text.
          - ""                       -> ERROR "empty input"
          - not an int / negative    -> ERROR "invalid number: <text>"
          - otherwise                -> OK
        """
        if number == "":
            return ValidationStatus.error(EMPTY_INPUT)
        value = Validator.parse_int(number)
        if value is None or value < 0:
            return ValidationStatus.error(INVALID_INPUT.format(number))
        return ValidationStatus.ok()

    @staticmethod
    def validate_string_length(max_len: str, string: str) -> bool:
        """returns True if the string length is within the max allowed.

        Registered as a Tk validatecommand, so max_len arrives as a string.
        """
        return len(string) <= int(max_len)
