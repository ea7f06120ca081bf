"""Listing output package."""

from __future__ import annotations

from .listing import ListingGenerator

__all__ = ["ListingGenerator"]
