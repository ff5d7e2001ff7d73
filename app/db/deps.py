from typing import Optional

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.security import Authenticated, Unauthenticated, authenticate_token


# Bearer header is accepted when no session cookie is sent
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)

COOKIE_MAX_AGE = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60


# Dependency to get DB
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_token(request: Request, bearer: Optional[str] = Depends(oauth2_scheme)) -> Optional[str]:
    return request.cookies.get(settings.AUTH_COOKIE_NAME) or bearer


# Dependency to get the caller's identity from the session token
def get_current_user(token: Optional[str] = Depends(get_token)) -> Authenticated:
    result = authenticate_token(token)
    if isinstance(result, Unauthenticated):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=result.reason)
    return result


def set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=COOKIE_MAX_AGE,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.AUTH_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
