"""Full-store export and import.

Import never trusts incoming ids: every record is inserted fresh and each set's
``sessionId`` is rewritten through an old-id -> new-id map built while the
sessions go in. Validation, the optional wipe and all inserts form one
transaction, so a failed import leaves the store exactly as it was.
"""
from __future__ import annotations
import datetime as dt
import enum
import json
import logging
from typing import Any, Mapping, Union

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from logbook.errors import BackupFormatError, StorageError
from logbook.repositories.session_repo import SessionRepository
from logbook.repositories.set_repo import SetRepository
from logbook.schemas.backup import BackupDocument, BackupSession, BackupSet, ImportResult
from logbook.settings import get_settings

log = logging.getLogger(__name__)

INVALID_BACKUP = "Invalid backup file."

class ImportMode(str, enum.Enum):
    merge = "merge"
    replace = "replace"

def export_backup(db: Session, *, now: dt.datetime | None = None) -> dict[str, Any]:
    now = now or dt.datetime.now(dt.timezone.utc)
    sessions = SessionRepository(db).all()
    sets = SetRepository(db).all()
    return {
        "version": get_settings().BACKUP_VERSION,
        "exportedAt": now.isoformat().replace("+00:00", "Z"),
        "sessions": [BackupSession.model_validate(s).model_dump(mode="json", by_alias=True) for s in sessions],
        "sets": [BackupSet.model_validate(s).model_dump(mode="json", by_alias=True) for s in sets],
    }

def backup_filename(today: dt.date | None = None) -> str:
    return f"logbook_backup_{(today or dt.date.today()).isoformat()}.json"

def parse_document(raw: Union[str, bytes, Mapping[str, Any]]) -> BackupDocument:
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except ValueError as exc:
            raise BackupFormatError(INVALID_BACKUP) from exc
    if not isinstance(raw, Mapping) \
            or not isinstance(raw.get("sessions"), list) \
            or not isinstance(raw.get("sets"), list):
        raise BackupFormatError(INVALID_BACKUP)
    try:
        return BackupDocument.model_validate(raw)
    except ValidationError as exc:
        raise BackupFormatError(INVALID_BACKUP) from exc

def remap_session_id(id_map: Mapping[int, int], session_id: int | None) -> int | None:
    # unmapped ids pass through unchanged
    return id_map.get(session_id, session_id)

def import_backup(db: Session, raw: Union[str, bytes, Mapping[str, Any]],
                  mode: ImportMode = ImportMode.merge) -> ImportResult:
    mode = ImportMode(mode)
    doc = parse_document(raw)
    session_repo = SessionRepository(db)
    set_repo = SetRepository(db)

    try:
        if mode is ImportMode.replace:
            session_repo.delete_all()

        id_map: dict[int, int] = {}
        for s in doc.sessions:
            fields = s.model_dump(exclude={"id"}, exclude_none=True)
            fields["date"] = s.date.isoformat()
            sess = session_repo.stage(**fields)
            if s.id is not None:
                id_map[s.id] = sess.id

        for st in doc.sets:
            fields = st.model_dump(exclude={"id"})
            fields["date"] = st.date.isoformat()
            fields["session_id"] = remap_session_id(id_map, st.session_id)
            set_repo.stage(**fields)

        db.commit()
    except IntegrityError as exc:
        # sets pointing at sessions that exist nowhere, missing required fields
        db.rollback()
        log.warning("backup import rejected by constraints: %s", exc.orig)
        raise BackupFormatError(INVALID_BACKUP) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        log.exception("backup import failed, transaction rolled back")
        raise StorageError("import failed") from exc
    except Exception:
        db.rollback()
        raise

    log.info("imported backup mode=%s sessions=%d sets=%d", mode.value, len(doc.sessions), len(doc.sets))
    return ImportResult(mode=mode.value, sessions=len(doc.sessions), sets=len(doc.sets))
