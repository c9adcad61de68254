# SPDX-License-Identifier: MIT

import re

from ganttfmt.model.field_type import FieldType

KEYWORD_FIELDS: dict[str, FieldType] = {
    "done": FieldType.STATUS_DONE,
    "active": FieldType.STATUS_ACTIVE,
    "crit": FieldType.MODIFIER_CRIT,
    "milestone": FieldType.MODIFIER_MILESTONE,
}

# YYYY-MM-DD with an optional time part (e.g. "2014-01-06 12:00")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[ T]\S.*)?$")
AFTER_PATTERN = re.compile(r"^after\s+\S")
UNTIL_PATTERN = re.compile(r"^until\s+\S")
DURATION_PATTERN = re.compile(r"^\d+(?:\.\d+)?(?:ms|[smhdwMy])$")
# A number directly followed by letters that is not a valid duration, e.g. "3x"
DURATION_LIKE_PATTERN = re.compile(r"^\d+(?:\.\d+)?[A-Za-z]+$")


class UnknownFieldError(ValueError):
    """Raised when a metadata token matches no field of the dialect."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"'{token}': {reason}")
        self.token = token
        self.reason = reason


def is_date_literal(token: str) -> bool:
    return DATE_PATTERN.match(token) is not None


def classify_token(token: str) -> FieldType:
    """
    Decide which task field a single metadata token represents.

    The decision is made on the token's content alone, never on its position
    in the metadata list.

    Args:
        token: One comma-separated metadata segment, already stripped

    Returns:
        The field type of the token. Anything not matching a keyword, start or
        span pattern is the task's identifier.

    Raises:
        UnknownFieldError: If the token looks like a duration with an unknown unit
    """
    keyword_field = KEYWORD_FIELDS.get(token)
    if keyword_field is not None:
        return keyword_field

    if is_date_literal(token) or AFTER_PATTERN.match(token):
        return FieldType.START

    if DURATION_PATTERN.match(token) or UNTIL_PATTERN.match(token):
        return FieldType.SPAN

    if DURATION_LIKE_PATTERN.match(token):
        raise UnknownFieldError(token, "unknown duration unit")

    return FieldType.IDENTIFIER
