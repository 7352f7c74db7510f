"""Handheld launcher helpers: play activity, slideshows, key events, install progress, themes and tweaks."""

__version__ = "4.0.3"

__all__ = [
    "images",
    "install_slides",
    "play_activity",
    "sendkeys",
    "slideshow",
    "themes",
    "tweaks",
]