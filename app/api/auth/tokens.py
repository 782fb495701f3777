"""
Token service.
Owns: Issuing and verifying signed, time-limited identity tokens.

Tokens are HMAC-signed JWTs carrying the principal id (``userID``) and an
absolute expiry (``exp``). They are stateless: nothing is stored server side
and there is no revocation, a token simply stops verifying once it expires.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from uuid import UUID

import jwt
from jwt.exceptions import (
    DecodeError,
    ExpiredSignatureError,
    InvalidAlgorithmError,
    InvalidSignatureError,
    InvalidTokenError,
)

PRINCIPAL_CLAIM = "userID"

# Only the HMAC family is accepted on verify; "none" and asymmetric
# algorithms are refused whatever the token header claims.
HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")


class AuthErrorReason(str, Enum):
    MALFORMED = "malformed"
    SIGNATURE_INVALID = "signature_invalid"
    EXPIRED = "expired"
    UNPARSABLE_PRINCIPAL = "unparsable_principal"


class AuthError(Exception):
    """Token verification failed. ``reason`` says why; callers should not leak it."""

    def __init__(self, reason: AuthErrorReason, message: str | None = None):
        self.reason = reason
        super().__init__(message or reason.value)


class SigningError(Exception):
    """Raised when a token cannot be signed."""


class TokenService:
    def __init__(self, secret: str, ttl_seconds: int, algorithm: str = "HS256"):
        if algorithm not in HMAC_ALGORITHMS:
            raise ValueError(f"Unsupported signing algorithm: {algorithm}")
        self._secret = secret
        self._ttl = timedelta(seconds=ttl_seconds)
        self._algorithm = algorithm

    @property
    def ttl_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    def issue(self, principal: UUID) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            PRINCIPAL_CLAIM: str(principal),
            "iat": now,
            "exp": now + self._ttl,
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (InvalidTokenError, TypeError, ValueError) as e:
            raise SigningError("failed to sign token") from e

    def verify(self, token: str) -> UUID:
        """
        Verify signature and expiry, then extract the principal.

        Raises:
            AuthError: MALFORMED, SIGNATURE_INVALID, EXPIRED or
                UNPARSABLE_PRINCIPAL
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=list(HMAC_ALGORITHMS),
                options={"require": ["exp"]},
            )
        except ExpiredSignatureError:
            raise AuthError(AuthErrorReason.EXPIRED)
        except (InvalidSignatureError, InvalidAlgorithmError):
            raise AuthError(AuthErrorReason.SIGNATURE_INVALID)
        except DecodeError:
            raise AuthError(AuthErrorReason.MALFORMED)
        except InvalidTokenError:
            # Missing or non-numeric exp, bad iat
            raise AuthError(AuthErrorReason.MALFORMED)

        raw_principal = claims.get(PRINCIPAL_CLAIM)
        if not isinstance(raw_principal, str):
            raise AuthError(AuthErrorReason.UNPARSABLE_PRINCIPAL)
        try:
            return UUID(raw_principal)
        except ValueError:
            raise AuthError(AuthErrorReason.UNPARSABLE_PRINCIPAL)


def issue_token(principal: UUID, secret: str, ttl_seconds: int) -> str:
    return TokenService(secret, ttl_seconds).issue(principal)


def verify_token(token: str, secret: str) -> UUID:
    # ttl only matters when issuing
    return TokenService(secret, ttl_seconds=1).verify(token)
