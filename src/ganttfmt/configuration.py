# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

APP_NAME = "ganttfmt"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    column_gap: int
    section_indent: int
    task_indent: int
    collapse_empty_columns: bool
    blank_line_before_first_section: bool
    strict: bool


def get_default_config() -> Configuration:
    return {
        "column_gap": 2,
        "section_indent": 2,
        "task_indent": 4,
        "collapse_empty_columns": True,
        "blank_line_before_first_section": False,
        "strict": False,
    }
