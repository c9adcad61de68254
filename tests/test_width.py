# SPDX-License-Identifier: MIT

from ganttfmt.model.column_widths import ColumnWidths
from ganttfmt.model.document import Document
from ganttfmt.service.parse import parse_document
from ganttfmt.service.width import compute_column_widths


class TestComputeColumnWidths:
    def test_example(self, example_diagram: str) -> None:
        widths = compute_column_widths(parse_document(example_diagram.splitlines()))
        assert widths == ColumnWidths(
            title=len("Task in Another"),
            status=len("active"),
            modifier=len("milestone"),
            id=len("taskid1"),
            start=len("after taskid1"),
            span=len("30d"),
        )

    def test_unused_columns_are_zero(self) -> None:
        widths = compute_column_widths(parse_document(["A :1d", "Longer :2w"]))
        assert widths == ColumnWidths(title=6, span=2)

    def test_title_width_is_global(self) -> None:
        document = parse_document(
            ["section One", "a :1d", "section Two", "A much longer label :1d"]
        )
        assert compute_column_widths(document).title == len("A much longer label")

    def test_empty_document(self) -> None:
        assert compute_column_widths(Document()) == ColumnWidths()

    def test_wide_characters_measured_in_cells(self) -> None:
        widths = compute_column_widths(parse_document(["設計 :1d", "ab :2d"]))
        assert widths.title == 4
