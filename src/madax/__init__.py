"""Hogs of War MAD/MTD package extractor"""

__version__ = "0.1.0"
