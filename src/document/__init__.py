"""SPDX tag/value document model."""

from .model import Blank, Comment, Entry, MissingEntryError, SpdxDocument, SpdxLine, SpdxSection

__all__ = [
    "Blank",
    "Comment",
    "Entry",
    "MissingEntryError",
    "SpdxDocument",
    "SpdxLine",
    "SpdxSection",
]
