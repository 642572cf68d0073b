"""
API route handlers.

This package contains all route definitions for the Heritage Archive API.
"""

from heritage_archive.api.routes import artifacts, auth, contact, embeds, health, uploads

__all__ = [
    "artifacts",
    "auth",
    "contact",
    "embeds",
    "health",
    "uploads",
]
