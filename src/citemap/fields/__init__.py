"""Centralized field tables for both document formats."""

from citemap.fields.cff import CFF_FIELDS, REFERENCE_FIELDS
from citemap.fields.csl import ITEM_FIELDS

__all__ = ["CFF_FIELDS", "REFERENCE_FIELDS", "ITEM_FIELDS"]
