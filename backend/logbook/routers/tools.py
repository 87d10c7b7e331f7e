from fastapi import APIRouter, HTTPException, Query, status
from logbook.plates import PlateError, plate_breakdown
from logbook.schemas.stats import PlatesRead

router = APIRouter(prefix="/tools", tags=["tools"])

@router.get("/plates", response_model=PlatesRead)
def plates(target: float = Query(..., gt=0), bar: float = Query(45, ge=0)):
    try:
        res = plate_breakdown(target, bar)
    except PlateError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return PlatesRead(target=target, bar=bar, per_side=res.per_side, plates=res.plates)
