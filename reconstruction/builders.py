"""Reassemble translated chunks and hand them to the output."""
from typing import List, Optional, TextIO
import sys

from translation.chunker import PARAGRAPH_SEPARATOR


def join_segments(segments: List[str]) -> str:
    """Join translated chunks in order, one blank line between each."""
    return PARAGRAPH_SEPARATOR.join(segments)


def write_translation(text: str, output_path: str) -> str:
    """Write the translated text as-is and return the path."""
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(text)
    return output_path


def print_translation(
    text: str,
    source_lang: str,
    target_lang: str,
    stream: Optional[TextIO] = None,
) -> None:
    """Print the translation framed by a banner naming both languages."""
    stream = stream or sys.stdout
    print(f"\n--- Translated Text ({source_lang} -> {target_lang}) ---", file=stream)
    print(text, file=stream)
    print("--- End of Translation ---", file=stream)
