# attendance/cells.py
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Optional, Tuple


class CellState(str, Enum):
    UNSET = "unset"
    PRESENT = "present"
    ABSENT = "absent"

    @classmethod
    def from_present(cls, present):
        if present is None:
            return cls.UNSET
        return cls.PRESENT if present else cls.ABSENT


@dataclass(frozen=True)
class CellAction:
    """A button the cell offers; clicking it stores ``present``."""

    present: bool
    symbol: str
    title: str
    marked: bool


MARK_PRESENT = CellAction(present=True, symbol="✓", title="Mark Present", marked=False)
MARK_ABSENT = CellAction(present=False, symbol="✗", title="Mark Absent", marked=False)
TOGGLE_TO_ABSENT = CellAction(present=False, symbol="✓", title="Present (click to mark absent)", marked=True)
TOGGLE_TO_PRESENT = CellAction(present=True, symbol="✗", title="Absent (click to mark present)", marked=True)


@dataclass(frozen=True)
class AttendanceCell:
    """
    One (student, day) slot of the grid.

    UNSET offers both marks, a marked cell offers a single toggle. Once
    marked a cell never goes back to UNSET.
    """

    student_id: str
    date: date
    present: Optional[bool] = None

    @property
    def state(self) -> CellState:
        return CellState.from_present(self.present)

    @property
    def actions(self) -> Tuple[CellAction, ...]:
        if self.present is None:
            return (MARK_PRESENT, MARK_ABSENT)
        return (TOGGLE_TO_ABSENT,) if self.present else (TOGGLE_TO_PRESENT,)

    @property
    def dom_id(self):
        return f"attendance-{self.student_id}-{self.date:%Y%m%d}"

    def mark(self, present: bool) -> "AttendanceCell":
        if present not in (True, False):
            raise ValueError("present must be a boolean")
        return replace(self, present=present)
