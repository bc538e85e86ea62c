"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from vagaflow.config import get_settings
from vagaflow.core import container
from vagaflow.database import DatabaseSession
from vagaflow.domain.common.exceptions import NotFoundError, ValidationError
from vagaflow.domain.identity.entities.user import User
from vagaflow.exceptions import CredentialsException
from vagaflow.infrastructure.common.di import resolve_with_session

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{get_settings().API_V1_PREFIX}/auth/login")


def get_current_user(token: Annotated[str, Depends(oauth2_scheme)], db: DatabaseSession) -> User:
    """
    Resolve the bearer token to the user it was issued for.

    A token that fails verification, or names a user that no longer
    exists, is answered with 401.

    Raises:
        CredentialsException: If the token is invalid or the user is gone
    """
    claims = container.token_service().verify_access_token(token)
    if claims is None:
        raise CredentialsException

    try:
        return resolve_with_session(container.get_user_by_id_use_case, db).execute(
            claims.user_id
        )
    except (NotFoundError, ValidationError):
        raise CredentialsException from None


CurrentUser = Annotated[User, Depends(get_current_user)]
