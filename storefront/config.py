"""
Storefront settings.

Values come from the environment; a local .env file is loaded first.
"""
import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Upstash Redis - standard env var names per docs
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")

# Cart persistence
CART_STORAGE_KEY = os.environ.get("CART_STORAGE_KEY", "cart")

# Checkout handoff (WhatsApp + Yape)
STORE_NAME = os.environ.get("STORE_NAME", "IDOS")
WHATSAPP_PHONE = os.environ.get("WHATSAPP_PHONE", "51916796360")
WHATSAPP_BASE_URL = os.environ.get("WHATSAPP_BASE_URL", "https://wa.me")

# Presentation
CURRENCY_PREFIX = os.environ.get("CURRENCY_PREFIX", "S/")
NAVBAR_SCROLL_THRESHOLD = int(os.environ.get("NAVBAR_SCROLL_THRESHOLD", "50"))

# Enables the token decoding endpoint
DEBUG = _env_bool("DEBUG")
