"""
Heritage Archive - Digital Heritage Artifact Service.

Catalogue of 3D-scanned cultural artifacts with an administrator-managed
record store, embedded viewer references, and a contact inbox.
"""

from heritage_archive.version import __version__

# API module is available but not exported by default
# Import explicitly: from heritage_archive.api import create_app

__all__ = ["__version__"]
