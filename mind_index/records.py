"""Conversion between loose stored records and strict `Note` values.

Stored records come from whatever the persistence layer kept around, so
every field is treated as untrusted. Records without usable text are
dropped; a malformed embedding downgrades the note to "not embedded"
instead of rejecting it.
"""

import math
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from mind_core.types import Note


def _parse_id(raw: Any) -> str:
    if raw is None or raw == "":
        return uuid.uuid4().hex
    return str(raw)


def _parse_created_at(raw: Any) -> datetime:
    if isinstance(raw, datetime):
        return raw if raw.tzinfo is not None else raw.replace(tzinfo=timezone.utc)
    if isinstance(raw, str) and raw.strip():
        text = raw.strip()
        # fromisoformat() on older interpreters rejects the trailing "Z"
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return datetime.now(timezone.utc)
        return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=timezone.utc)
    return datetime.now(timezone.utc)


def _parse_embedding(raw: Any) -> Optional[tuple]:
    if not isinstance(raw, (list, tuple)) or not raw:
        return None
    values = []
    for x in raw:
        if isinstance(x, bool) or not isinstance(x, (int, float)):
            return None
        if not math.isfinite(x):
            return None
        values.append(float(x))
    return tuple(values)


def _parse_view_count(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return 0
    if not math.isfinite(raw) or raw < 0:
        return 0
    return int(raw)


def note_from_record(raw: Any) -> Optional[Note]:
    if not isinstance(raw, Mapping):
        return None

    content = raw.get("content")
    if not isinstance(content, str) or not content.strip():
        return None

    return Note(
        id=_parse_id(raw.get("id")),
        content=content,
        created_at=_parse_created_at(raw.get("created_at")),
        embedding=_parse_embedding(raw.get("embedding")),
        view_count=_parse_view_count(raw.get("view_count")),
    )


def normalize_notes(raw: Any) -> List[Note]:
    if not isinstance(raw, list):
        return []
    notes = (note_from_record(item) for item in raw)
    return [n for n in notes if n is not None]


def note_to_record(note: Note) -> Dict[str, Any]:
    return {
        "id": note.id,
        "content": note.content,
        "created_at": note.created_at.isoformat() if note.created_at else None,
        "embedding": list(note.embedding) if note.embedding is not None else None,
        "view_count": note.view_count,
    }
