# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from ganttfmt.model.task import Task

if TYPE_CHECKING:
    from ganttfmt.model.document import PassthroughLine


@dataclass(frozen=True)
class Section:
    # None for the implicit section holding tasks that precede any `section` line
    name: Optional[str]
    items: tuple[Union[Task, "PassthroughLine"], ...] = ()

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(item for item in self.items if isinstance(item, Task))
