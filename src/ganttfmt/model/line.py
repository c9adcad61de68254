# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import Union

from ganttfmt.model.document import PassthroughLine
from ganttfmt.model.task import Task


@dataclass(frozen=True)
class Blank:
    line_number: int = 0


@dataclass(frozen=True)
class DiagramHeader:
    text: str
    line_number: int = 0


@dataclass(frozen=True)
class TitleDirective:
    value: str
    line_number: int = 0


@dataclass(frozen=True)
class DateFormatDirective:
    value: str
    line_number: int = 0


@dataclass(frozen=True)
class SectionHeader:
    name: str
    line_number: int = 0


ParsedLine = Union[
    Blank,
    DiagramHeader,
    TitleDirective,
    DateFormatDirective,
    SectionHeader,
    Task,
    PassthroughLine,
]
