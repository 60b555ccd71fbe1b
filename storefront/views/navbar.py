"""Navbar style toggle."""
from storefront import config

SCROLLED_CLASS = "scrolled"


def navbar_css_class(scroll_y: float, threshold: int = config.NAVBAR_SCROLL_THRESHOLD) -> str:
    """Class to put on the navbar for a given vertical scroll offset."""
    return SCROLLED_CLASS if scroll_y > threshold else ""
