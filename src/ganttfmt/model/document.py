# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import Iterator, Optional

from ganttfmt.model.section import Section
from ganttfmt.model.task import Task


@dataclass(frozen=True)
class PassthroughLine:
    """A line kept verbatim: comments, other directives, unrecognized text."""

    text: str
    line_number: int = 0


@dataclass(frozen=True)
class Document:
    diagram: Optional[str] = None
    title: Optional[str] = None
    date_format: Optional[str] = None
    preamble: tuple[PassthroughLine, ...] = ()
    sections: tuple[Section, ...] = ()

    def iter_tasks(self) -> Iterator[Task]:
        for section in self.sections:
            yield from section.tasks
