"""Debug-only endpoints. Mounted when DEBUG is enabled."""
from fastapi import APIRouter, HTTPException

from storefront.auth import extract_profile
from .models import DecodeTokenRequest

router = APIRouter(prefix="/api/debug", tags=["debug"])


@router.post("/token")
def decode_token(request: DecodeTokenRequest):
    """Show the unverified profile carried by a sign-in credential."""
    profile = extract_profile(request.credential)
    if profile is None:
        raise HTTPException(status_code=400, detail="Malformed token")
    return {"profile": profile.model_dump(), "verified": False}
