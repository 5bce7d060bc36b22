"""
auth/tokens.py -- JWT issue and verification for session tokens.

Security design decisions:
  JWT: python-jose with HS256. Tokens are signed with JwtConfig.secret_key
       and carry iss, aud, iat, exp and, when the caller is known, sub.
       Verification returns None on any failure -- the auth gate turns that
       into a 401.

  No server-side state: a token is valid exactly when its signature checks
       out against the configured key, iss/aud match the configured values
       and exp is in the future. Nothing is stored per token, so there is no
       revocation short of rotating the key.

  Configuration is passed in explicitly (JwtConfig) rather than read from a
       module-level settings singleton, so tests and the app can use
       different keys in the same process.

Layer rule: no imports from api/ or pizza/. Import from core/ is allowed --
core/ is the kernel and has no reverse dependencies.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from core.config import JwtConfig

logger = logging.getLogger("pizzastore.auth")

_ALGORITHM = "HS256"

# Every claim the issuer writes except sub must be present on decode.
_DECODE_OPTIONS = {
    "require_iss": True,
    "require_aud": True,
    "require_exp": True,
}


def create_access_token(
    config: JwtConfig,
    subject: str | None = None,
    issued_at: datetime | None = None,
) -> str:
    """Encode a signed JWT carrying issuer, audience and expiry claims.

    Args:
        config:    Signing key, issuer, audience and lifetime.
        subject:   Username stored as the sub claim. Omitted when None.
        issued_at: Issue time; defaults to now (UTC). Expiry is
                   issued_at + config.lifetime_minutes.
    """
    now = issued_at or datetime.now(timezone.utc)
    payload = {
        "iss": config.issuer,
        "aud": config.audience,
        "iat": now,
        "exp": now + timedelta(minutes=config.lifetime_minutes),
    }
    if subject is not None:
        payload["sub"] = subject
    return jwt.encode(payload, config.secret_key, algorithm=_ALGORITHM)


def decode_access_token(config: JwtConfig, token: str) -> dict | None:
    """Decode and verify a JWT. Returns the claims dict or None on any failure.

    Checks the HS256 signature, iss == config.issuer, aud == config.audience
    and exp > now. Returning None (rather than raising) keeps the caller
    simple: any invalid token is treated as unauthenticated.
    """
    try:
        return jwt.decode(
            token,
            config.secret_key,
            algorithms=[_ALGORITHM],
            audience=config.audience,
            issuer=config.issuer,
            options=_DECODE_OPTIONS,
        )
    except JWTError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        return None
