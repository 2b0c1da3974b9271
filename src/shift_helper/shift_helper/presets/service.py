from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.validators import require_non_empty, require_positive_id
from ..core.exceptions import ValidationError
from ..schedules.service import build_segments
from .model import PRESET_COLUMNS, ShiftPreset
from .repository import PresetRepository


class PresetService:
    def __init__(self, presets: PresetRepository):
        self._presets = presets

    def fetch_presets(self) -> Sequence[ShiftPreset]:
        return self._presets.list_all()

    def add_preset(
        self, *, name: str, segments: Iterable[dict], extra: Optional[Mapping[str, Any]] = None
    ) -> ShiftPreset:
        """Insert a preset; `extra` holds any further columns of the row."""

        name = require_non_empty(name, "Preset name")
        extra = dict(extra or {})
        reserved = sorted(PRESET_COLUMNS.intersection(extra))
        if reserved:
            raise ValidationError(f"Reserved preset fields: {', '.join(reserved)}")
        return self._presets.create(name=name, segments=build_segments(segments), extra=extra)

    def delete_preset(self, preset_id: int) -> None:
        self._presets.delete(preset_id=require_positive_id(preset_id, "Preset"))
