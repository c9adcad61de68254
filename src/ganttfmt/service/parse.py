# SPDX-License-Identifier: MIT

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from ganttfmt.model.document import Document, PassthroughLine
from ganttfmt.model.field_type import FieldType
from ganttfmt.model.line import (
    Blank,
    DateFormatDirective,
    DiagramHeader,
    ParsedLine,
    SectionHeader,
    TitleDirective,
)
from ganttfmt.model.section import Section
from ganttfmt.model.task import Modifier, Status, Task
from ganttfmt.service.classify import UnknownFieldError, classify_token, is_date_literal

logger = logging.getLogger(__name__)

DIAGRAM_KEYWORD = "gantt"
TITLE_KEYWORD = "title"
DATE_FORMAT_KEYWORD = "dateFormat"
SECTION_KEYWORD = "section"
COMMENT_PREFIX = "%%"

# Other Gantt directives, kept verbatim. Not an exhaustive list of Mermaid keywords.
PASSTHROUGH_KEYWORDS: frozenset[str] = frozenset(
    {
        "accDescr",
        "accTitle",
        "axisFormat",
        "barGap",
        "barHeight",
        "bottomMarginAdj",
        "click",
        "displayMode",
        "excludes",
        "fontSize",
        "gridLineStartPadding",
        "includes",
        "inclusiveEndDates",
        "leftPadding",
        "mirrorActor",
        "numberSectionStyles",
        "rightPadding",
        "sectionFontSize",
        "tickInterval",
        "titleTopMargin",
        "todayMarker",
        "topAxis",
        "topPadding",
        "weekday",
        "weekend",
    }
)

KEYWORD_PATTERN = re.compile(r"^([A-Za-z]+)(?=\s|:|$)")
# The label ends at the first colon not escaped with a backslash
TASK_SEPARATOR_PATTERN = re.compile(r"(?<!\\):")

STATUS_FIELDS: dict[FieldType, Status] = {
    FieldType.STATUS_DONE: Status.DONE,
    FieldType.STATUS_ACTIVE: Status.ACTIVE,
}
MODIFIER_FIELDS: dict[FieldType, Modifier] = {
    FieldType.MODIFIER_CRIT: Modifier.CRIT,
    FieldType.MODIFIER_MILESTONE: Modifier.MILESTONE,
}


class GanttParseError(Exception):
    """Raised when a line of the diagram cannot be parsed."""

    def __init__(self, message: str, line_number: int, line: str) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class MalformedTaskLineError(GanttParseError):
    def __init__(self, line_number: int, line: str, token: str, reason: str) -> None:
        super().__init__(
            f"Line {line_number}: malformed task line, {reason} '{token}': {line}",
            line_number,
            line,
        )
        self.token = token
        self.reason = reason


class MissingColonError(GanttParseError):
    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(
            f"Line {line_number}: missing ':' between task label and metadata: {line}",
            line_number,
            line,
        )


@dataclass
class TaskBuilder:
    """Accumulates the classified tokens of one task line before freezing them."""

    label: str
    line_number: int
    line: str
    status: Status = Status.NONE
    modifier: Modifier = Modifier.NONE
    id: Optional[str] = None
    start: Optional[str] = None
    span: Optional[str] = None

    def add(self, field_type: FieldType, token: str) -> None:
        if field_type in STATUS_FIELDS:
            if self.status != Status.NONE:
                self.__reject(token, "second status")
            self.status = STATUS_FIELDS[field_type]
        elif field_type in MODIFIER_FIELDS:
            if self.modifier != Modifier.NONE:
                self.__reject(token, "second modifier")
            self.modifier = MODIFIER_FIELDS[field_type]
        elif field_type == FieldType.START:
            if self.start is None:
                self.start = token
            elif self.span is None and is_date_literal(token):
                # Two dates: the second one is the explicit end date
                self.span = token
            else:
                self.__reject(token, "second start")
        elif field_type == FieldType.SPAN:
            if self.span is not None:
                self.__reject(token, "second duration")
            self.span = token
        else:
            if self.id is not None:
                self.__reject(token, "ambiguous id")
            self.id = token

    def build(self) -> Task:
        return Task(
            label=self.label,
            status=self.status,
            modifier=self.modifier,
            id=self.id,
            start=self.start,
            span=self.span,
            line_number=self.line_number,
        )

    def __reject(self, token: str, reason: str) -> None:
        raise MalformedTaskLineError(self.line_number, self.line, token, reason)


def parse_task(text: str, line_number: int, line: Optional[str] = None) -> Task:
    """
    Parse a task line into a Task.

    Args:
        text: The stripped line, containing an unescaped colon
        line_number: 1-based line number used in error messages
        line: The raw line for error messages, defaults to text

    Raises:
        MissingColonError: If the line has no unescaped colon
        MalformedTaskLineError: If the metadata breaks a field cardinality rule
    """
    raw = text if line is None else line
    separator = TASK_SEPARATOR_PATTERN.search(text)
    if separator is None:
        raise MissingColonError(line_number, raw)

    builder = TaskBuilder(
        label=text[: separator.start()].strip(), line_number=line_number, line=raw
    )
    for segment in text[separator.end() :].split(","):
        token = segment.strip()
        if not token:
            continue
        try:
            field_type = classify_token(token)
        except UnknownFieldError as e:
            raise MalformedTaskLineError(line_number, raw, e.token, e.reason) from e
        logger.debug("line %d: '%s' -> %s", line_number, token, field_type)
        builder.add(field_type, token)

    return builder.build()


def parse_line(line: str, line_number: int, strict: bool = False) -> ParsedLine:
    """
    Turn one raw input line into exactly one parsed node.

    Args:
        line: Raw line, indentation and line ending included or not
        line_number: 1-based line number used in error messages
        strict: Reject colon-less unrecognized lines instead of passing them through

    Returns:
        A Blank, DiagramHeader, TitleDirective, DateFormatDirective,
        SectionHeader, Task or PassthroughLine

    Raises:
        GanttParseError: If the line looks like a task but cannot be parsed
    """
    text = line.strip()
    if not text:
        return Blank(line_number)
    if text.startswith(COMMENT_PREFIX):
        return PassthroughLine(text, line_number)

    keyword_match = KEYWORD_PATTERN.match(text)
    keyword = keyword_match.group(1) if keyword_match else None
    remainder = text[keyword_match.end() :].strip() if keyword_match else ""

    if keyword == DIAGRAM_KEYWORD:
        return DiagramHeader(text, line_number)
    if keyword == TITLE_KEYWORD:
        return TitleDirective(remainder, line_number)
    if keyword == DATE_FORMAT_KEYWORD:
        return DateFormatDirective(remainder, line_number)
    if keyword == SECTION_KEYWORD:
        return SectionHeader(remainder.removesuffix(":").rstrip(), line_number)
    if keyword in PASSTHROUGH_KEYWORDS:
        return PassthroughLine(text, line_number)

    if TASK_SEPARATOR_PATTERN.search(text):
        return parse_task(text, line_number, line.rstrip("\r\n"))

    if strict:
        raise MissingColonError(line_number, line.rstrip("\r\n"))
    return PassthroughLine(text, line_number)


def parse_document(lines: Iterable[str], strict: bool = False) -> Document:
    """
    Parse a whole diagram into an immutable Document.

    Any parse error aborts the whole document.
    """
    diagram: Optional[str] = None
    title: Optional[str] = None
    date_format: Optional[str] = None
    preamble: list[PassthroughLine] = []
    sections: list[tuple[Optional[str], list[Union[Task, PassthroughLine]]]] = []

    for line_number, line in enumerate(lines, start=1):
        parsed = parse_line(line, line_number, strict=strict)

        if isinstance(parsed, Blank):
            continue
        elif isinstance(parsed, DiagramHeader):
            if diagram is not None:
                logger.debug("line %d: repeated diagram header", line_number)
            diagram = parsed.text
        elif isinstance(parsed, TitleDirective):
            if title is not None:
                logger.debug("line %d: title replaces '%s'", line_number, title)
            title = parsed.value
        elif isinstance(parsed, DateFormatDirective):
            if date_format is not None:
                logger.debug(
                    "line %d: dateFormat replaces '%s'", line_number, date_format
                )
            date_format = parsed.value
        elif isinstance(parsed, SectionHeader):
            logger.debug("line %d: section '%s'", line_number, parsed.name)
            sections.append((parsed.name, []))
        elif isinstance(parsed, Task):
            if not sections:
                sections.append((None, []))
            sections[-1][1].append(parsed)
        elif not sections:
            preamble.append(parsed)
        else:
            sections[-1][1].append(parsed)

    return Document(
        diagram=diagram,
        title=title,
        date_format=date_format,
        preamble=tuple(preamble),
        sections=tuple(Section(name, tuple(items)) for name, items in sections),
    )
