# SPDX-License-Identifier: MIT

from enum import StrEnum


class Column(StrEnum):
    STATUS = "status"
    MODIFIER = "modifier"
    ID = "id"
    START = "start"
    SPAN = "span"


# Render order of the metadata columns on a task line
COLUMN_ORDER: tuple[Column, ...] = (
    Column.STATUS,
    Column.MODIFIER,
    Column.ID,
    Column.START,
    Column.SPAN,
)
