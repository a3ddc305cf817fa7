"""Plain text ingestion."""
import os

from config import Config
from models import Document
from translation.chunker import chunk_text


def normalize_newlines(text: str) -> str:
    """Collapse Windows line endings to a single newline."""
    return text.replace("\r\n", "\n")


def read_text(file_path: str, config: Config) -> Document:
    """
    Read a text file and split it into request-sized segments.

    The whole file is read into memory. A file with no non-blank paragraph
    yields a Document with no segments.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            text = normalize_newlines(f.read())
    except UnicodeDecodeError as e:
        raise ValueError(f"Input file is not valid UTF-8: {file_path} ({e})") from e

    return Document(
        source_path=file_path,
        text=text,
        segments=chunk_text(text, config.max_chunk_size),
    )
