"""
Identity token decoding for debugging.

Reads the claims of a Google Sign-In ID token (compact JWT) without checking
its signature. Use it to look at what the page received, never to decide
who the shopper is: verification belongs on the server that issued sessions.
"""
import base64
import binascii
import json
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from storefront.logging import get_logger

logger = get_logger(__name__)


class IdentityProfile(BaseModel):
    """Profile claims commonly present in a Google ID token."""
    model_config = ConfigDict(extra="allow")

    sub: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None


def _b64url_decode(segment: str) -> bytes:
    padding = "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(segment + padding)


def decode_token_claims(token: str) -> Optional[dict]:
    """
    Decode the payload segment of a header.payload.signature token.

    Args:
        token: Compact token string

    Returns:
        Claims dict, or None if the token is malformed
    """
    if not token or not isinstance(token, str):
        logger.error("Empty identity token")
        return None

    parts = token.split(".")
    if len(parts) != 3:
        logger.error(f"Identity token has {len(parts)} segments, expected 3")
        return None

    try:
        claims = json.loads(_b64url_decode(parts[1]).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        logger.error(f"Failed to decode identity token payload: {e}")
        return None

    if not isinstance(claims, dict):
        logger.error("Identity token payload is not an object")
        return None

    logger.debug(f"Decoded identity token claims (unverified): {sorted(claims)}")
    return claims


def extract_profile(token: str) -> Optional[IdentityProfile]:
    """Profile from an unverified token, or None if it cannot be read."""
    claims = decode_token_claims(token)
    if claims is None:
        return None
    try:
        return IdentityProfile(**claims)
    except ValidationError as e:
        logger.error(f"Identity token claims do not look like a profile: {e}")
        return None
