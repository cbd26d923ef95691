from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from skilldrill.config import settings


# ==========================
# AUTH CONFIG
# ==========================

bearer_scheme = HTTPBearer(auto_error=False)


# ==========================
# IDENTITY TOKEN
# ==========================

def decode_identity_token(token: str) -> dict:
    """
    Verify a token issued by the identity provider.
    Audience is only checked when one is configured.
    """
    options = {"verify_aud": settings.AUTH_AUDIENCE is not None}
    return jwt.decode(
        token,
        settings.AUTH_SECRET_KEY,
        algorithms=[settings.AUTH_ALGORITHM],
        audience=settings.AUTH_AUDIENCE,
        options=options,
    )


# ==========================
# AUTH HELPERS
# ==========================

def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    try:
        payload = decode_identity_token(credentials.credentials)
    except JWTError:
        raise credentials_exception

    subject: Optional[str] = payload.get("sub")
    if not subject:
        raise credentials_exception

    return subject
