# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from ganttfmt.model.column import Column


class Status(StrEnum):
    NONE = ""
    DONE = "done"
    ACTIVE = "active"


class Modifier(StrEnum):
    NONE = ""
    CRIT = "crit"
    MILESTONE = "milestone"


@dataclass(frozen=True)
class Task:
    """
    A single timeline entry.

    Fields:
        label: Free text before the colon, stripped.
        status: done / active, or Status.NONE.
        modifier: crit / milestone, or Modifier.NONE.
        id: Task identifier that other tasks reference with `after <id>`.
        start: ISO date literal or `after <id...>` reference.
        span: Duration literal, explicit end date or `until <id>` reference.
        line_number: 1-based line of the task in the input.
    """

    label: str
    status: Status = Status.NONE
    modifier: Modifier = Modifier.NONE
    id: Optional[str] = None
    start: Optional[str] = None
    span: Optional[str] = None
    line_number: int = 0

    def field_text(self, column: Column) -> Optional[str]:
        """Rendered text of a metadata column, or None when the field is empty."""
        if column == Column.STATUS:
            return self.status.value or None
        if column == Column.MODIFIER:
            return self.modifier.value or None
        if column == Column.ID:
            return self.id
        if column == Column.START:
            return self.start
        return self.span

    def fields(self) -> dict[Column, str]:
        """Non-empty metadata fields keyed by column."""
        result: dict[Column, str] = {}
        for column in Column:
            text = self.field_text(column)
            if text is not None:
                result[column] = text
        return result
