from typing import Any
from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from logbook.backup import ImportMode, backup_filename, export_backup, import_backup
from logbook.db import get_db
from logbook.errors import BackupFormatError, StorageError
from logbook.schemas.backup import ImportResult

router = APIRouter(prefix="/backup", tags=["backup"])

@router.get("")
def download_backup(db: Session = Depends(get_db)):
    return JSONResponse(
        content=export_backup(db),
        headers={"Content-Disposition": f'attachment; filename="{backup_filename()}"'},
    )

@router.post("/import", response_model=ImportResult)
def restore_backup(
    payload: Any = Body(...),
    mode: ImportMode = Query(ImportMode.merge),
    db: Session = Depends(get_db),
):
    try:
        return import_backup(db, payload, mode)
    except BackupFormatError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Import failed.")
