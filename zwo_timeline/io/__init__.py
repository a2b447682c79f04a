"""Loading workout files as raw text."""

from .zwo_loader import load_document

__all__ = ["load_document"]
