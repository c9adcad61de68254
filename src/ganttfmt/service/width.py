# SPDX-License-Identifier: MIT

import logging

from rich.cells import cell_len

from ganttfmt.model.column import Column
from ganttfmt.model.column_widths import ColumnWidths
from ganttfmt.model.document import Document

logger = logging.getLogger(__name__)


def compute_column_widths(document: Document) -> ColumnWidths:
    """
    Measure every column of the document in a single pass.

    Widths are global: the title width is the longest label of any task in any
    section, and each metadata width is the longest text of that field over all
    tasks where it is present. A field no task uses has a width of zero.

    Widths are terminal cells, so wide characters in labels still line up.
    """
    title = 0
    maximums: dict[Column, int] = {column: 0 for column in Column}

    for task in document.iter_tasks():
        title = max(title, cell_len(task.label))
        for column, text in task.fields().items():
            maximums[column] = max(maximums[column], cell_len(text))

    widths = ColumnWidths(
        title=title,
        status=maximums[Column.STATUS],
        modifier=maximums[Column.MODIFIER],
        id=maximums[Column.ID],
        start=maximums[Column.START],
        span=maximums[Column.SPAN],
    )
    logger.debug("column widths: %s", widths)
    return widths
