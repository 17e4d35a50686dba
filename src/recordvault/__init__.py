"""
RecordVault Backend - Personal Record Collection Catalog

Keeps a user's vinyl records with their tags, and shares the collection
read-only through revocable tokens.
"""

__version__ = "1.0.0"
