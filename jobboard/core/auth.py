from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from jobboard.services.auth_service import AuthService, require_candidate_id

# Create an OAuth2 scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token")


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


async def get_current_candidate_id(
    token: str = Depends(oauth2_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> str:
    """
    Dependency resolving the authenticated candidate's id
    """
    payload = await auth_service.validate_token(token)
    return require_candidate_id(payload)
