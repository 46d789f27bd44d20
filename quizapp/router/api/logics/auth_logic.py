from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from quizapp.auth_util import create_access_token, verify_password
from quizapp.log import get_logger
from quizapp.model.users import User
from quizapp.schema.auth_schema import LoginRequest

log = get_logger(__name__)


def login_logic(db: Session, request: LoginRequest) -> dict:
    """Check a username/password pair and issue an access token.

    Args:
        db (Session): Database session
        request (LoginRequest): username and plaintext password

    Raises:
        HTTPException: 401 when the user is unknown or the password is wrong

    Returns:
        dict: token plus the public user fields
    """
    user = db.query(User).filter(User.username == request.username).first()

    if not user or not verify_password(request.password, user.password):
        log.info("Failed login for username %r", request.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    access_token = create_access_token(
        subject=user.user_id,
        username=user.username,
        role=user.role,
    )
    return {
        "token": access_token,
        "user": {
            "id": user.user_id,
            "username": user.username,
            "full_name": user.full_name,
            "role": user.role,
        },
    }
