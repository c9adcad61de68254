# SPDX-License-Identifier: MIT

from typing import Iterable

from ganttfmt.model.options import DEFAULT_OPTIONS, FormatOptions
from ganttfmt.service.parse import parse_document
from ganttfmt.service.render import render_document
from ganttfmt.service.width import compute_column_widths


def format_lines(
    lines: Iterable[str], options: FormatOptions = DEFAULT_OPTIONS
) -> list[str]:
    """
    Parse, measure and render a diagram.

    Raises:
        GanttParseError: If any line cannot be parsed. Nothing is rendered.
    """
    document = parse_document(lines, strict=options.strict)
    widths = compute_column_widths(document)
    return render_document(document, widths, options)


def format_text(text: str, options: FormatOptions = DEFAULT_OPTIONS) -> str:
    lines = format_lines(text.splitlines(), options)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
