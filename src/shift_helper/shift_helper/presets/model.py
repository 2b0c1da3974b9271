from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..shifts.model import ShiftSegment

PRESET_COLUMNS = frozenset({"id", "name", "segments", "created_at"})


@dataclass(frozen=True)
class ShiftPreset:
    """Reusable named shift template (row in `shift_presets`).

    Columns other than the ones modelled here (colour, notes, ...) are kept in
    `extra` and written back unchanged.
    """

    preset_id: int
    name: str
    segments: Tuple[ShiftSegment, ...] = field(default_factory=tuple)
    created_at: Optional[datetime] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict:
        out = dict(self.extra)
        out.update(
            {
                "id": self.preset_id,
                "name": self.name,
                "segments": [seg.to_dict() for seg in self.segments],
                "created_at": self.created_at.isoformat() if self.created_at else None,
            }
        )
        return out
