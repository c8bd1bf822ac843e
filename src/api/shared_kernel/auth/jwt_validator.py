"""JWT issuing and validation for first-party logins.

Tokens are signed with a shared secret (HS256 by default). The identity they
carry is trusted by the core without re-verifying credentials.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError

if TYPE_CHECKING:
    from shared_kernel.auth.observability import JWTValidatorProbe


@dataclass(frozen=True)
class TokenClaims:
    """Validated JWT claims."""

    sub: str
    preferred_username: str | None


class InvalidTokenError(Exception):
    """Raised when JWT validation fails."""

    pass


class TokenIssuer:
    """Issues signed access tokens for authenticated users."""

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(minutes=60),
    ):
        self._secret_key = secret_key
        self._issuer = issuer
        self._algorithm = algorithm
        self._ttl = ttl

    def issue(self, user_id: str, username: str) -> str:
        """Issue an access token.

        Args:
            user_id: Value for the ``sub`` claim
            username: Value for the ``preferred_username`` claim

        Returns:
            The encoded JWT
        """
        now = datetime.now(tz=timezone.utc)
        claims = {
            "sub": user_id,
            "preferred_username": username,
            "iss": self._issuer,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    @property
    def ttl(self) -> timedelta:
        """Lifetime of issued tokens."""
        return self._ttl


class JWTValidator:
    """Validates access tokens issued by TokenIssuer.

    Validates token signature, expiry and issuer.
    """

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        probe: JWTValidatorProbe,
        algorithm: str = "HS256",
    ):
        """Initialize the JWT validator.

        Args:
            secret_key: Shared signing secret.
            issuer: Expected issuer claim value.
            probe: Observability probe for logging events.
            algorithm: Signing algorithm (default: HS256).
        """
        self._secret_key = secret_key
        self._issuer = issuer
        self._probe = probe
        self._algorithm = algorithm

    def validate_token(self, token: str) -> TokenClaims:
        """Validate JWT and return claims.

        Args:
            token: The JWT token string.

        Returns:
            TokenClaims containing the validated claims.

        Raises:
            InvalidTokenError: If token is invalid, expired, or verification fails.
        """
        # First, do a quick check for malformed tokens
        try:
            unverified_header = jwt.get_unverified_header(token)
        except JWTError as e:
            self._probe.token_validation_failed(reason=f"Malformed token: {e}")
            raise InvalidTokenError(f"Invalid token format: {e}") from e

        if not unverified_header:
            self._probe.token_validation_failed(reason="Missing token header")
            raise InvalidTokenError("Invalid token: missing header")

        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                options={
                    "verify_signature": True,
                    "verify_aud": False,
                    "verify_iss": True,
                    "verify_exp": True,
                    "verify_iat": True,
                },
            )
        except ExpiredSignatureError as e:
            self._probe.token_validation_failed(reason="Token expired")
            raise InvalidTokenError("Token has expired") from e
        except JWTClaimsError as e:
            if "issuer" in str(e).lower():
                self._probe.token_validation_failed(reason="Invalid issuer")
                raise InvalidTokenError("Invalid issuer claim") from e
            self._probe.token_validation_failed(reason=f"Claims error: {e}")
            raise InvalidTokenError(f"Invalid token claims: {e}") from e
        except JWTError as e:
            if "signature" in str(e).lower():
                self._probe.token_validation_failed(reason="Invalid signature")
                raise InvalidTokenError("Invalid token signature") from e
            self._probe.token_validation_failed(reason=f"JWT error: {e}")
            raise InvalidTokenError(f"Invalid token: {e}") from e

        user_id = claims.get("sub")
        if user_id is None:
            self._probe.token_validation_failed(reason="Missing sub claim")
            raise InvalidTokenError("Missing required claim: sub")

        username = claims.get("preferred_username")

        self._probe.token_validated(user_id=str(user_id))

        return TokenClaims(
            sub=str(user_id),
            preferred_username=str(username) if username is not None else None,
        )
