# SPDX-License-Identifier: MIT

from dataclasses import dataclass

from ganttfmt.model.column import Column


@dataclass(frozen=True)
class ColumnWidths:
    title: int = 0
    status: int = 0
    modifier: int = 0
    id: int = 0
    start: int = 0
    span: int = 0

    def width(self, column: Column) -> int:
        return int(getattr(self, column.value))
