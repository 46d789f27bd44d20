from typing import Union

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import OAuth2PasswordBearer

from quizapp.auth_util import InvalidTokenError, decode_access_token
from quizapp.log import get_logger
from quizapp.model.users import ROLE_ADMIN
from quizapp.schema.auth_schema import TokenPayload

log = get_logger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login", auto_error=False)


def get_token(token: Union[str, None] = Security(oauth2_scheme)) -> TokenPayload:
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Access token required")
    try:
        return decode_access_token(token)
    except InvalidTokenError as e:
        log.info("Rejected token: %s", e)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token") from e


def get_current_user(token: TokenPayload = Depends(get_token)) -> TokenPayload:
    """Identity and role come from the token; the store is not consulted."""
    return token


def get_current_admin(
    current_user: TokenPayload = Depends(get_current_user),
) -> TokenPayload:
    if current_user.role != ROLE_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user
