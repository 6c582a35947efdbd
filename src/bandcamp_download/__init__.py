"""
bandcamp-download - download Bandcamp albums and artist catalogs.
"""

__version__ = "1.0.0"
