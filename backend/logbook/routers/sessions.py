from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from logbook.db import get_db
from logbook.errors import StorageError
from logbook.schemas.session import SessionCreate, SessionRead, SessionDetail
from logbook.repositories.session_repo import SessionRepository
from logbook.settings import get_settings

router = APIRouter(prefix="/sessions", tags=["sessions"])

@router.post("", response_model=SessionDetail, status_code=status.HTTP_201_CREATED)
def save_session(payload: SessionCreate, db: Session = Depends(get_db)):
    try:
        sess = SessionRepository(db).create(payload, payload.sets)
    except StorageError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Save failed.")
    return sess

@router.get("", response_model=list[SessionRead])
def list_recent_sessions(
    db: Session = Depends(get_db),
    limit: int = Query(get_settings().SESSIONS_LIMIT, ge=1, le=500),
):
    return SessionRepository(db).recent(limit=limit)

@router.get("/{session_id}", response_model=SessionDetail)
def get_session(session_id: int, db: Session = Depends(get_db)):
    sess = SessionRepository(db).get(session_id)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return sess

@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def wipe_all(db: Session = Depends(get_db)):
    try:
        SessionRepository(db).clear_all()
    except StorageError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Wipe failed.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
