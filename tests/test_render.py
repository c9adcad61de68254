# SPDX-License-Identifier: MIT

from ganttfmt.model.column_widths import ColumnWidths
from ganttfmt.model.document import Document, PassthroughLine
from ganttfmt.model.options import FormatOptions
from ganttfmt.model.section import Section
from ganttfmt.model.task import Modifier, Status, Task
from ganttfmt.service.render import render_document, render_task


# ---------- render_task ----------


class TestRenderTask:
    def test_all_columns_present(self) -> None:
        task = Task(
            label="A",
            status=Status.DONE,
            modifier=Modifier.CRIT,
            id="a1",
            start="2014-01-01",
            span="3d",
        )
        widths = ColumnWidths(title=3, status=6, modifier=9, id=2, start=10, span=3)
        assert render_task(task, widths) == (
            "    A   : "
            + "done,  "
            + "  "
            + "crit,     "
            + "  "
            + "a1,"
            + "  "
            + "2014-01-01,"
            + "  "
            + "3d"
        )

    def test_absent_fields_reserve_space_without_comma(self) -> None:
        task = Task(label="B", span="until x")
        widths = ColumnWidths(title=1, status=4, id=2, span=7)
        assert render_task(task, widths) == "    B : " + " " * (5 + 2 + 3 + 2) + "until x"

    def test_unused_columns_collapse(self) -> None:
        task = Task(label="A", span="1d")
        assert render_task(task, ColumnWidths(title=1, span=2)) == "    A : 1d"

    def test_unused_columns_kept_when_not_collapsing(self) -> None:
        task = Task(label="A", span="1d")
        options = FormatOptions(collapse_empty_columns=False)
        # four empty one-cell slots, each followed by the gap
        assert render_task(task, ColumnWidths(title=1, span=2), options) == (
            "    A : " + " " * (4 * 3) + "1d"
        )

    def test_last_visible_column_keeps_comma(self) -> None:
        task = Task(label="A", status=Status.ACTIVE, id="a1")
        assert render_task(task, ColumnWidths(title=1, status=6, id=2)) == (
            "    A : active,  a1,"
        )

    def test_start_keeps_comma_without_span_column(self) -> None:
        task = Task(label="A", start="2014-01-01")
        widths = ColumnWidths(title=1, id=2, start=10)
        assert render_task(task, widths) == "    A : " + " " * (3 + 2) + "2014-01-01,"

    def test_no_metadata(self) -> None:
        assert render_task(Task(label="Bare"), ColumnWidths(title=4)) == "    Bare :"

    def test_trailing_whitespace_stripped(self) -> None:
        task = Task(label="A", status=Status.DONE)
        widths = ColumnWidths(title=1, status=4, span=3)
        assert render_task(task, widths) == "    A : done,"

    def test_custom_gap_and_indent(self) -> None:
        task = Task(label="A", id="a1", span="1d")
        options = FormatOptions(column_gap=1, task_indent=2)
        assert render_task(task, ColumnWidths(title=1, id=2, span=2), options) == (
            "  A : a1, 1d"
        )


# ---------- render_document ----------


class TestRenderDocument:
    def test_directives_and_sections(self) -> None:
        document = Document(
            diagram="gantt",
            title="Plan",
            date_format="YYYY-MM-DD",
            preamble=(PassthroughLine("excludes weekends"),),
            sections=(
                Section("One", (Task(label="a", span="1d"),)),
                Section("Two", (PassthroughLine("%% later"), Task(label="bb", span="2d"))),
            ),
        )
        widths = ColumnWidths(title=2, span=2)
        assert render_document(document, widths) == [
            "gantt",
            "  title Plan",
            "  dateFormat YYYY-MM-DD",
            "  excludes weekends",
            "  section One",
            "    a  : 1d",
            "",
            "  section Two",
            "  %% later",
            "    bb : 2d",
        ]

    def test_unnamed_section_has_no_header(self) -> None:
        document = Document(sections=(Section(None, (Task(label="a", span="1d"),)),))
        assert render_document(document, ColumnWidths(title=1, span=2)) == [
            "    a : 1d"
        ]

    def test_blank_line_before_first_section(self) -> None:
        document = Document(title="Plan", sections=(Section("One"),))
        options = FormatOptions(blank_line_before_first_section=True)
        assert render_document(document, ColumnWidths(), options) == [
            "  title Plan",
            "",
            "  section One",
        ]

    def test_empty_document(self) -> None:
        assert render_document(Document(), ColumnWidths()) == []
