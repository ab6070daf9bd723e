"""
Catalog Import

Imports third-party media content (videos, channels) into the catalog.
"""

__version__ = "1.0.0"
