"""Paragraph-aware splitting of documents into request-sized chunks."""
from typing import Dict, List

PARAGRAPH_SEPARATOR = "\n\n"

# Widest UTF-8 character; smaller limits could not always make progress
MIN_CHUNK_SIZE = 4

_WHITESPACE = (" ", "\t", "\n", "\r", "\f", "\v")


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _split_oversized(paragraph: str, max_size: int) -> List[str]:
    """
    Cut a paragraph longer than max_size into pieces of at most max_size bytes.

    Each cut lands on the last whitespace inside the size window. When the
    window holds no usable whitespace the cut is made at max_size, even
    mid-word. Whitespace at the start of each remainder is dropped.
    """
    pieces = []
    remaining = paragraph

    while remaining:
        if _byte_len(remaining) <= max_size:
            pieces.append(remaining)
            break

        # Truncating the encoded bytes never leaves half a character behind
        window = remaining.encode("utf-8")[:max_size].decode("utf-8", "ignore")
        end = max(window.rfind(ch) for ch in _WHITESPACE)
        if end <= 0:
            end = len(window)

        pieces.append(remaining[:end])
        remaining = remaining[end:].lstrip()

    return pieces


def chunk_text(text: str, max_size: int) -> List[str]:
    """
    Group paragraphs into chunks no larger than max_size UTF-8 bytes.

    Paragraphs are separated by a blank line and kept whole whenever they fit;
    blank paragraphs are dropped. A paragraph that alone exceeds max_size is
    split on its own (see _split_oversized) and never shares a chunk.

    Args:
        text: Document text with "\\n" line endings
        max_size: Maximum chunk size in bytes

    Returns:
        Ordered list of chunks; empty for a blank document
    """
    if max_size < MIN_CHUNK_SIZE:
        raise ValueError(f"max_size must be at least {MIN_CHUNK_SIZE} bytes, got {max_size}")

    paragraphs = [p for p in text.split(PARAGRAPH_SEPARATOR) if p.strip()]
    chunks = []
    current_chunk = ""

    for paragraph in paragraphs:
        paragraph_size = _byte_len(paragraph)

        if paragraph_size > max_size:
            if current_chunk:
                chunks.append(current_chunk)
                current_chunk = ""
            chunks.extend(_split_oversized(paragraph, max_size))
        elif current_chunk and _byte_len(current_chunk) + len(PARAGRAPH_SEPARATOR) + paragraph_size > max_size:
            chunks.append(current_chunk)
            current_chunk = paragraph
        elif current_chunk:
            current_chunk += PARAGRAPH_SEPARATOR + paragraph
        else:
            current_chunk = paragraph

    if current_chunk:
        chunks.append(current_chunk)

    return chunks


def segment_statistics(segments: List[str]) -> Dict[str, int]:
    """Byte-size statistics for a list of chunks."""
    if not segments:
        return {"count": 0, "avg_size": 0, "min_size": 0, "max_size": 0, "total_size": 0}

    sizes = [_byte_len(segment) for segment in segments]

    return {
        "count": len(sizes),
        "avg_size": sum(sizes) // len(sizes),
        "min_size": min(sizes),
        "max_size": max(sizes),
        "total_size": sum(sizes),
    }
