"""Main translation pipeline orchestrator."""
import argparse
import asyncio
import logging
import sys
import time
from typing import Awaitable, Callable, List, Optional

from config import APP_NAME, APP_VERSION, DEFAULT_API_URL, MAX_CHUNK_SIZE, Config
from ingestion import read_text
from models import TranslationRun
from progress import ProgressReporter
from reconstruction import join_segments, print_translation, write_translation
from translation import (
    MIN_CHUNK_SIZE,
    LibreTranslateClient,
    TranslationError,
    chunk_text,
    segment_statistics,
)

logger = logging.getLogger(__name__)


class TranslationPipeline:
    """Orchestrates reading, chunking, translating and writing a document."""

    def __init__(
        self,
        config: Optional[Config] = None,
        client: Optional[LibreTranslateClient] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        reporter: Optional[ProgressReporter] = None,
    ):
        self.config = config or Config.from_env()
        self.sleep = sleep
        self.reporter = reporter or ProgressReporter()
        self.client = client or LibreTranslateClient(
            self.config, sleep=sleep, report=self.reporter.println
        )

    async def translate_segments(self, segments: List[str]) -> List[str]:
        """
        Translate chunks one at a time, in order.

        The first failure aborts the loop and propagates; nothing translated so
        far is returned.
        """
        translated: List[str] = []
        self.reporter.start(len(segments))

        try:
            for segment in segments:
                # Be polite to the public API by waiting between requests
                await self.sleep(self.config.request_delay)

                translated.append(await self.client.translate(
                    segment,
                    self.config.source_lang,
                    self.config.target_lang,
                ))
                self.reporter.advance()

            self.reporter.finish("Translation complete!")
        finally:
            self.reporter.close()

        return translated

    async def translate_text(self, text: str) -> str:
        """Translate a whole text held in memory."""
        segments = chunk_text(text, self.config.max_chunk_size)
        if not segments:
            return ""
        return join_segments(await self.translate_segments(segments))

    async def translate_file(
        self,
        input_path: str,
        output_path: Optional[str] = None,
    ) -> TranslationRun:
        """
        Translate a text file.

        Args:
            input_path: Path to input file
            output_path: Optional output path (prints to console if not provided)

        Returns:
            Summary of the run
        """
        start_time = time.time()

        self.reporter.println(f"Reading file: {input_path}")
        document = read_text(input_path, self.config)
        run = TranslationRun(source_path=input_path, chunks_total=len(document.segments))

        if document.is_empty:
            self.reporter.println("Input file is empty. Nothing to translate.")
            return run

        self.reporter.println(f"Text split into {run.chunks_total} chunks for translation.")
        logger.debug("Chunk statistics: %s", segment_statistics(document.segments))

        translated = await self.translate_segments(document.segments)
        run.chunks_done = len(translated)
        run.translated_text = join_segments(translated)

        if output_path:
            run.output_path = write_translation(run.translated_text, output_path)
            self.reporter.println(f"Translated text saved to: {output_path}")
        else:
            print_translation(run.translated_text, self.config.source_lang, self.config.target_lang)

        run.duration_seconds = time.time() - start_time
        logger.debug("Translated %d chunks in %.1fs", run.chunks_done, run.duration_seconds)
        return run

    async def close(self):
        """Clean up resources."""
        await self.client.close()


def _chunk_size(value: str) -> int:
    number = int(value)
    if number < MIN_CHUNK_SIZE:
        raise argparse.ArgumentTypeError(f"must be at least {MIN_CHUNK_SIZE} bytes, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Command-line interface."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Translate text files using the LibreTranslate API",
    )
    parser.add_argument("input_file", help="Path to the input text file to translate")
    parser.add_argument(
        "-o", "--output-file",
        help="Path to the output file (prints to console if not provided)",
    )
    parser.add_argument(
        "--api-url",
        help=f"The LibreTranslate API endpoint URL (default: {DEFAULT_API_URL})",
    )
    parser.add_argument("-s", "--source", help="Source language for translation (default: en)")
    parser.add_argument("-t", "--target", help="Target language for translation (default: hu)")
    parser.add_argument(
        "--chunk-size", type=_chunk_size,
        help=f"Maximum chunk size in bytes (default: {MAX_CHUNK_SIZE})",
    )
    parser.add_argument(
        "--delay", type=float,
        help="Seconds to wait before each request (default: 10)",
    )
    parser.add_argument(
        "--max-retries", type=int,
        help="Retries per chunk after the first attempt (default: 3)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def config_from_args(args: argparse.Namespace, base: Optional[Config] = None) -> Config:
    """Apply command-line flags on top of the environment configuration."""
    base = base or Config.from_env()
    return base.with_overrides(
        api_url=args.api_url,
        source_lang=args.source,
        target_lang=args.target,
        max_chunk_size=args.chunk_size,
        request_delay=args.delay,
        max_retries=args.max_retries,
    )


# CLI entry point
async def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point for direct pipeline execution."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    pipeline = TranslationPipeline(config)

    try:
        await pipeline.translate_file(args.input_file, args.output_file)
    except (TranslationError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        await pipeline.close()

    return 0


def run():
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
