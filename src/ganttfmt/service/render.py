# SPDX-License-Identifier: MIT

from rich.cells import cell_len

from ganttfmt.model.column import COLUMN_ORDER, Column
from ganttfmt.model.column_widths import ColumnWidths
from ganttfmt.model.document import Document, PassthroughLine
from ganttfmt.model.options import DEFAULT_OPTIONS, FormatOptions
from ganttfmt.model.section import Section
from ganttfmt.model.task import Task

TASK_SEPARATOR = " : "
FIELD_TERMINATOR = ","


def pad(text: str, width: int) -> str:
    return text + " " * max(width - cell_len(text), 0)


def visible_columns(
    widths: ColumnWidths, options: FormatOptions = DEFAULT_OPTIONS
) -> list[Column]:
    if not options.collapse_empty_columns:
        return list(COLUMN_ORDER)
    return [column for column in COLUMN_ORDER if widths.width(column) > 0]


def render_task(
    task: Task, widths: ColumnWidths, options: FormatOptions = DEFAULT_OPTIONS
) -> str:
    """
    Render one task line.

    Every non-final slot reserves its column width plus one cell for the
    comma, whether or not the task has the field, so all columns start at the
    same offset on every task line. The span slot comes last and has no comma.
    """
    columns = visible_columns(widths, options)
    slots: list[str] = []
    for column in columns:
        width = widths.width(column)
        text = task.field_text(column)
        if column == Column.SPAN:
            slots.append(pad(text, width) if text is not None else " " * width)
        elif text is not None:
            slots.append(pad(text + FIELD_TERMINATOR, width + 1))
        else:
            slots.append(" " * (width + 1))

    line = (
        " " * options.task_indent
        + pad(task.label, widths.title)
        + TASK_SEPARATOR
        + (" " * options.column_gap).join(slots)
    )
    return line.rstrip()


def render_section(
    section: Section, widths: ColumnWidths, options: FormatOptions = DEFAULT_OPTIONS
) -> list[str]:
    indent = " " * options.section_indent
    lines: list[str] = []
    if section.name is not None:
        lines.append(f"{indent}section {section.name}".rstrip())
    for item in section.items:
        if isinstance(item, PassthroughLine):
            lines.append(indent + item.text)
        else:
            lines.append(render_task(item, widths, options))
    return lines


def render_document(
    document: Document, widths: ColumnWidths, options: FormatOptions = DEFAULT_OPTIONS
) -> list[str]:
    """
    Re-emit a parsed document in the canonical layout.

    Args:
        document: The parsed document
        widths: Column widths computed for this document
        options: Indentation, gap and section separation settings

    Returns:
        The output lines, without line terminators
    """
    indent = " " * options.section_indent
    lines: list[str] = []

    if document.diagram is not None:
        lines.append(document.diagram)
    if document.title is not None:
        lines.append(f"{indent}title {document.title}".rstrip())
    if document.date_format is not None:
        lines.append(f"{indent}dateFormat {document.date_format}".rstrip())
    for passthrough in document.preamble:
        lines.append(indent + passthrough.text)

    for index, section in enumerate(document.sections):
        if index > 0 or (options.blank_line_before_first_section and lines):
            lines.append("")
        lines.extend(render_section(section, widths, options))

    return lines
