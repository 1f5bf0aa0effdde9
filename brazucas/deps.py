"""FastAPI dependencies: bearer token -> Principal."""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from brazucas.errors import AuthenticationError
from brazucas.services.auth_service import decode_access_token
from brazucas.services.permissions import Principal

# auto_error=False: missing header becomes our 401 envelope, not FastAPI's 403.
bearer_scheme = HTTPBearer(auto_error=False)


async def get_optional_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Principal]:
    """Principal when a bearer token is sent, None otherwise. A bad token is still a 401."""
    if credentials is None:
        return None
    return decode_access_token(credentials.credentials)


async def get_current_principal(
    principal: Optional[Principal] = Depends(get_optional_principal),
) -> Principal:
    if principal is None:
        raise AuthenticationError("Authorization header is required", code="missing_token")
    return principal
