"""Bearer-token identification and subscription tier resolution.

Architectural role:
- Identifies the caller of the HTTP adapter from an optional
  `Authorization: Bearer <jwt>` header.
- Maps the verified claims plus the client-declared tier to one of
  `anonymous`, `free` or `pro`.

Verification:
- Tokens are verified as HS256 with `JWT_SECRET`.
- An unset secret disables verification entirely; every caller is anonymous.

Failure handling:
- Missing, malformed, expired or wrongly signed tokens are never errors.
  They resolve to an anonymous caller and are logged at debug level.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os

import jwt


logger = logging.getLogger(__name__)

JWT_SECRET = os.getenv("JWT_SECRET")
JWT_ALGORITHMS = ["HS256"]

TIER_ANONYMOUS = "anonymous"
TIER_FREE = "free"
TIER_PRO = "pro"


def extract_bearer_token(header):
    """Return the token from an `Authorization` header value, or `None`."""
    if not header or not isinstance(header, str):
        return None
    scheme, _, token = header.partition(" ")
    if scheme != "Bearer" or not token.strip():
        return None
    return token.strip()


def decode_bearer_token(token, secret=None):
    """Verify `token` and return its claims, or `None` when unverifiable."""
    secret = secret if secret is not None else JWT_SECRET
    if not token or not secret:
        return None

    try:
        claims = jwt.decode(token, secret, algorithms=JWT_ALGORITHMS)
    except jwt.PyJWTError as err:
        logger.debug("Bearer token rejected: %s", err)
        return None

    return claims if isinstance(claims, dict) else None


def get_user_from_header(header, secret=None):
    """Return verified claims for an `Authorization` header value, or `None`."""
    return decode_bearer_token(extract_bearer_token(header), secret)


def _claims_pro(claims) -> bool:
    if claims.get("subscription") == TIER_PRO:
        return True
    if claims.get("subscription_tier") == TIER_PRO:
        return True
    for metadata_key in ("user_metadata", "app_metadata"):
        metadata = claims.get(metadata_key)
        if isinstance(metadata, dict) and metadata.get("subscription_tier") == TIER_PRO:
            return True
    return False


def resolve_tier(claims, user_tier=None) -> str:
    """Resolve the effective tier for one request.

    Rules:
        - Unauthenticated callers are `anonymous`; a declared tier is ignored.
        - Authenticated callers are pro when they declare `"pro"` or their
          claims carry a pro subscription.
        - Other authenticated callers are `free`.
    """
    if claims is None:
        return TIER_ANONYMOUS
    if user_tier == TIER_PRO or _claims_pro(claims):
        return TIER_PRO
    return TIER_FREE
