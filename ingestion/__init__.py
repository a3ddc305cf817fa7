"""Ingestion layer - read input documents."""
from .text_reader import read_text, normalize_newlines

__all__ = ["read_text", "normalize_newlines"]
