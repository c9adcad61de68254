# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ganttfmt import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        data: Optional[dict[str, Any]] = None
        if configuration.APP_CONFIG_PATH.is_file():
            data = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration file {configuration.APP_CONFIG_PATH} must contain a mapping"
            )

        # Migration: add any setting missing from an older config file
        for key, value in configuration.get_default_config().items():
            if key not in data:
                data[key] = value

        self._config = cast(configuration.Configuration, data)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        column_gap: Optional[int] = None,
        section_indent: Optional[int] = None,
        task_indent: Optional[int] = None,
        collapse_empty_columns: Optional[bool] = None,
        blank_line_before_first_section: Optional[bool] = None,
        strict: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if column_gap is not None:
            self.config["column_gap"] = column_gap
        if section_indent is not None:
            self.config["section_indent"] = section_indent
        if task_indent is not None:
            self.config["task_indent"] = task_indent
        if collapse_empty_columns is not None:
            self.config["collapse_empty_columns"] = collapse_empty_columns
        if blank_line_before_first_section is not None:
            self.config["blank_line_before_first_section"] = (
                blank_line_before_first_section
            )
        if strict is not None:
            self.config["strict"] = strict


CONFIGURATION_REPO = ConfigurationRepository()
