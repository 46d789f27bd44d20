from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from quizapp.database import get_db
from quizapp.router.api.logics.auth_logic import login_logic
from quizapp.schema.auth_schema import LoginRequest, LoginResponse

router = APIRouter()


@router.post("/login", response_model=LoginResponse, status_code=status.HTTP_200_OK)
def login(request: LoginRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Exchange a username and password for a 24 hour bearer token."""
    return login_logic(db, request)
