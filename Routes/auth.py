import os
from typing import Annotated
from fastapi import Depends, HTTPException, Header, status
from jose import JWTError, jwt

# Dependency for getting the current user
def get_current_user(auth_token: Annotated[str | None, Header()] = None) -> tuple[str, bool]:
    if not auth_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authorized, no token")
    secret_key = os.environ.get("JWT_SECRET")
    try:
        payload = jwt.decode(auth_token, secret_key, algorithms=["HS256"])
        user_id = payload.get("user_id")
        isAdmin = payload.get("isAdmin", False)
        if user_id is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token.")
        return user_id, isAdmin
    except JWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials")

# Dependency for admin-only routes
def require_admin(user: tuple = Depends(get_current_user)) -> tuple[str, bool]:
    user_id, isAdmin = user
    if not isAdmin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized as an admin")
    return user
