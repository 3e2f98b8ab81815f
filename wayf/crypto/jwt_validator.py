"""Bearer token extraction and RS256 signature verification."""

import logging
from typing import Any

import httpx
import jwt
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey
from jwt.types import Options

from wayf.core.errors import (
    InvalidAuthorizationError,
    MissingAuthorizationError,
    SignatureValidationError,
)

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"
BEARER_PREFIX = "Bearer "
ALLOWED_ALGORITHMS = ["RS256", "RS384", "RS512"]

# Only the signature is enforced; lifetime, audience and issuer are not checked.
VERIFY_OPTIONS: Options = {
    "verify_signature": True,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
    "verify_aud": False,
    "verify_iss": False,
}


def extract_bearer_token(response: httpx.Response) -> str:
    """Return the token from the first Authorization header of a response."""
    values = response.headers.get_list(AUTHORIZATION_HEADER)
    if not values:
        logger.warning("No Authorization header received from WAYF")
        raise MissingAuthorizationError("No Authorization header received from WAYF")
    value = values[0].strip()
    if value == BEARER_PREFIX.strip():
        value = ""
    token = value.removeprefix(BEARER_PREFIX).strip()
    if not token:
        logger.warning("Authorization header from WAYF holds no token")
        raise InvalidAuthorizationError("Authorization header invalid")
    return token


class TokenValidator:
    """Verifies WAYF-issued JWTs against the provider public key."""

    def __init__(self, public_key: RSAPublicKey) -> None:
        self._public_key = public_key
        logger.warning(
            "WAYF tokens are verified by signature only; "
            "expiry, audience and issuer are not enforced"
        )

    def verify_token(self, token: str) -> dict[str, Any]:
        """Verify the token signature and return its claims."""
        try:
            return jwt.decode(
                token,
                self._public_key,
                algorithms=ALLOWED_ALGORITHMS,
                options=VERIFY_OPTIONS,
            )
        except jwt.PyJWTError as exc:
            raise SignatureValidationError(f"Token rejected: {exc}") from exc

    def validate(self, response: httpx.Response) -> dict[str, Any]:
        """Extract the bearer token from a WAYF response and verify it."""
        token = extract_bearer_token(response)
        return self.verify_token(token)
