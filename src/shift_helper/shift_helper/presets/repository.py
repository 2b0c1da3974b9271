from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..shifts.model import ShiftSegment
from .model import ShiftPreset


class PresetRepository(Protocol):
    def list_all(self) -> Sequence[ShiftPreset]:
        """Presets ordered by created_at, oldest first."""

        raise NotImplementedError

    def create(
        self, *, name: str, segments: Sequence[ShiftSegment], extra: Optional[Mapping[str, Any]] = None
    ) -> ShiftPreset:
        raise NotImplementedError

    def delete(self, *, preset_id: int) -> None:
        raise NotImplementedError
