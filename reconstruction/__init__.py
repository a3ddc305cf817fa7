"""Reconstruction layer - reassemble and emit translated text."""
from .builders import join_segments, write_translation, print_translation

__all__ = ["join_segments", "write_translation", "print_translation"]
