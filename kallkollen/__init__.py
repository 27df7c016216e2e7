"""Källkollen: a media-literacy trainer built around cognitive-bias challenges."""

__version__ = "0.1.0"
