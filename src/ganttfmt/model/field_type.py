# SPDX-License-Identifier: MIT

from enum import StrEnum


class FieldType(StrEnum):
    STATUS_DONE = "status_done"
    STATUS_ACTIVE = "status_active"
    MODIFIER_CRIT = "modifier_crit"
    MODIFIER_MILESTONE = "modifier_milestone"
    START = "start"
    SPAN = "span"
    IDENTIFIER = "identifier"
