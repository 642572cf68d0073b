"""
Heritage Archive API Module.

REST API for browsing and curating the artifact archive.
"""

from heritage_archive.api.app import create_app

__all__ = ["create_app"]
