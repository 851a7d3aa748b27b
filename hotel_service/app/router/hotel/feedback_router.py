from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_hotel_db as get_db
from ...crud.hotel import feedback_crud as crud
from ...schemas.hotel.feedback_schemas import FeedbackCreate, FeedbackOut

router = APIRouter(prefix="/api/feedback", tags=["Feedback"],
                   dependencies=[Depends(validate_current_token)])


@router.post("/", response_model=FeedbackOut, status_code=201)
def create_feedback(
    request: FeedbackCreate,
    db: Session = Depends(get_db)
):
    return crud.create_feedback(db, request)


@router.get("/", response_model=List[FeedbackOut])
def get_all_feedback(db: Session = Depends(get_db)):
    return crud.get_all_feedback(db)


@router.get("/{feedback_id}", response_model=FeedbackOut)
def get_feedback(feedback_id: int, db: Session = Depends(get_db)):
    return crud.get_feedback(db, feedback_id)
