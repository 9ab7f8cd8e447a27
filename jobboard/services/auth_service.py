from typing import Any, Dict, Optional

import httpx
from jose import JWTError, jwt

from jobboard.config.base_config import BaseConfig
from jobboard.core.constants import ErrorCodes
from jobboard.utils.error_handling import AuthenticationError
from jobboard.utils.logger import get_logger

logger = get_logger(__name__)

# Claims that may carry the candidate id, in order of preference.
CANDIDATE_ID_CLAIMS = ("user_id", "userId", "sub")


class AuthServiceUnavailable(Exception):
    """The auth service could not be reached or answered unexpectedly."""


class AuthService:
    def __init__(self, config: BaseConfig):
        self.config = config

    async def validate_token(self, token: str) -> Dict[str, Any]:
        """
        Validate token with the auth service, decoding it locally when the
        service is unreachable.
        """
        try:
            return await self._make_auth_request(token)
        except AuthServiceUnavailable as e:
            logger.warning(
                "Auth service unavailable, falling back to local validation", error=str(e)
            )
            return self.decode_token(token)

    async def _make_auth_request(self, token: str) -> Dict[str, Any]:
        """Make the actual HTTP request to auth service"""
        timeout = httpx.Timeout(self.config.AUTH_SERVICE_TIMEOUT, connect=2.0)
        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.post(
                    f"{self.config.AUTH_SERVICE_URL}{self.config.API_V1_STR}/auth/validate-token",
                    headers={
                        "Authorization": f"Bearer {token}",
                        "Content-Type": "application/json",
                    },
                )
        except httpx.RequestError as e:
            raise AuthServiceUnavailable(str(e)) from e

        if response.status_code == 200:
            return response.json()
        if response.status_code == 401:
            raise AuthenticationError("Invalid or expired token")
        raise AuthServiceUnavailable(f"Auth service returned {response.status_code}")

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Decode token locally as a fallback
        """
        try:
            return jwt.decode(
                token, self.config.SECRET_KEY, algorithms=[self.config.ALGORITHM]
            )
        except JWTError:
            raise AuthenticationError("Could not validate credentials")


def extract_candidate_id(payload: Dict[str, Any]) -> Optional[str]:
    """Candidate id from a validated token payload, also looking inside a nested ``user``."""
    sources = [payload]
    if isinstance(payload.get("user"), dict):
        sources.append(payload["user"])
    for source in sources:
        for claim in CANDIDATE_ID_CLAIMS:
            value = source.get(claim)
            if value:
                return str(value)
    return None


def require_candidate_id(payload: Dict[str, Any]) -> str:
    candidate_id = extract_candidate_id(payload)
    if not candidate_id:
        raise AuthenticationError(
            "Token does not identify a candidate", error_code=ErrorCodes.AUTH_TOKEN_INVALID
        )
    return candidate_id
