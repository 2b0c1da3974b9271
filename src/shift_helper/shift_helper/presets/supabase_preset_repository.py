from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..core.constants import PRESETS_TABLE
from ..core.exceptions import StoreError
from ..database.connection import SupabaseConnection
from ..database.supabase_base import fetchall, fetchone, row_errors, store_errors
from ..shifts.model import ShiftSegment
from .model import PRESET_COLUMNS, ShiftPreset
from .repository import PresetRepository


def _parse_timestamp(value) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    # PostgREST renders timestamptz as ISO 8601, sometimes with a trailing 'Z'.
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def _to_preset(row: dict) -> ShiftPreset:
    with row_errors(PRESETS_TABLE):
        return ShiftPreset(
            preset_id=int(row["id"]),
            name=row.get("name") or "",
            segments=tuple(ShiftSegment.from_dict(s) for s in (row.get("segments") or [])),
            created_at=_parse_timestamp(row.get("created_at")),
            extra={k: v for k, v in row.items() if k not in PRESET_COLUMNS},
        )


class SupabasePresetRepository(PresetRepository):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory

    def _table(self):
        return self._conn_factory.client().table(PRESETS_TABLE)

    def list_all(self) -> Sequence[ShiftPreset]:
        with store_errors("Fetching presets"):
            response = self._table().select("*").order("created_at", desc=False).execute()
        return [_to_preset(r) for r in fetchall(response)]

    def create(
        self, *, name: str, segments: Sequence[ShiftSegment], extra: Optional[Mapping[str, Any]] = None
    ) -> ShiftPreset:
        payload = dict(extra or {})
        payload.update({"name": name, "segments": [seg.to_dict() for seg in segments]})
        with store_errors("Adding preset"):
            response = self._table().insert([payload]).execute()

        row = fetchone(response)
        if not row:
            raise StoreError("Adding preset returned no row")
        return _to_preset(row)

    def delete(self, *, preset_id: int) -> None:
        with store_errors("Deleting preset"):
            self._table().delete().eq("id", int(preset_id)).execute()
