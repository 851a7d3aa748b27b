from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from shared.core import auth
from shared.core.database import get_auth_db as get_db
from shared.core.schemas import UserToken
from ..schemas import authschemas
from ..services import authservices

router = APIRouter(prefix="/api/auth", tags=["Hotel Auth"])


@router.post("/login", response_model=authschemas.LoginResponse)
def login(
        request: authschemas.LoginRequest,
        db: Session = Depends(get_db)):
    return authservices.login(db, request)


@router.post("/register", response_model=authschemas.RegisterResponse, status_code=201)
def register(
        request: authschemas.RegisterRequest,
        db: Session = Depends(get_db)):
    return authservices.register(db, request)


@router.get("/me", response_model=UserToken)
def me(current_user: UserToken = Depends(auth.validate_current_token)):
    return current_user
