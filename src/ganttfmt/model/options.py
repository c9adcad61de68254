# SPDX-License-Identifier: MIT

from dataclasses import dataclass

from ganttfmt.configuration import Configuration


@dataclass(frozen=True)
class FormatOptions:
    """
    Layout and parsing settings threaded through the formatting pipeline.

    Fields:
        column_gap: Spaces between metadata slots on a task line.
        section_indent: Indent of directives, section headers and passthrough lines.
        task_indent: Indent of task lines.
        collapse_empty_columns: Elide columns no task uses instead of keeping a slot.
        blank_line_before_first_section: Also separate the first section with a blank line.
        strict: Reject colon-less lines instead of passing them through.
    """

    column_gap: int = 2
    section_indent: int = 2
    task_indent: int = 4
    collapse_empty_columns: bool = True
    blank_line_before_first_section: bool = False
    strict: bool = False

    def __post_init__(self) -> None:
        if self.column_gap < 0:
            raise ValueError(f"column_gap must be >= 0, got {self.column_gap}")
        if self.section_indent < 0:
            raise ValueError(f"section_indent must be >= 0, got {self.section_indent}")
        if self.task_indent < 0:
            raise ValueError(f"task_indent must be >= 0, got {self.task_indent}")


DEFAULT_OPTIONS = FormatOptions()


def options_from_config(config: Configuration) -> FormatOptions:
    return FormatOptions(
        column_gap=config["column_gap"],
        section_indent=config["section_indent"],
        task_indent=config["task_indent"],
        collapse_empty_columns=config["collapse_empty_columns"],
        blank_line_before_first_section=config["blank_line_before_first_section"],
        strict=config["strict"],
    )
