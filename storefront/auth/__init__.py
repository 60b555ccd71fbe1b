"""Identity helpers (debug only)."""
from .token import IdentityProfile, decode_token_claims, extract_profile

__all__ = ["IdentityProfile", "decode_token_claims", "extract_profile"]
