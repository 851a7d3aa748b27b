from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_hotel_db as get_db
from ...crud.overview import dashboard_crud
from ...schemas.overview.dashboard_schema import DashboardStatsResponse

router = APIRouter(prefix="/api/dashboard",
                   tags=["Dashboard"], dependencies=[Depends(validate_current_token)])


@router.get("/stats", response_model=DashboardStatsResponse)
def get_dashboard_stats(db: Session = Depends(get_db)):
    return dashboard_crud.get_dashboard_stats(db)
