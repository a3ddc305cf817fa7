"""Tests for configuration and the command-line interface."""
import pytest

from config import DEFAULT_API_URL, MAX_CHUNK_SIZE, USER_AGENT, Config
from pipeline import build_parser, config_from_args, main


class TestConfig:

    def test_defaults(self):
        config = Config()

        assert config.api_url == DEFAULT_API_URL
        assert (config.source_lang, config.target_lang) == ("en", "hu")
        assert config.max_chunk_size == MAX_CHUNK_SIZE == 4500
        assert config.request_delay == 10.0
        assert config.max_retries == 3
        assert config.backoff_base == 30.0

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("TRANSLATE_API_URL", "http://localhost:5000/translate")
        monkeypatch.setenv("TRANSLATE_TARGET_LANG", "de")
        monkeypatch.setenv("TRANSLATE_MAX_CHUNK_SIZE", "1000")
        monkeypatch.setenv("TRANSLATE_REQUEST_DELAY", "0.5")

        config = Config.from_env()

        assert config.api_url == "http://localhost:5000/translate"
        assert config.source_lang == "en"
        assert config.target_lang == "de"
        assert config.max_chunk_size == 1000
        assert config.request_delay == 0.5

    def test_from_env_rejects_malformed_number(self, monkeypatch):
        monkeypatch.setenv("TRANSLATE_MAX_RETRIES", "abc")

        with pytest.raises(ValueError, match="TRANSLATE_MAX_RETRIES"):
            Config.from_env()

    def test_from_env_rejects_malformed_float(self, monkeypatch):
        monkeypatch.setenv("TRANSLATE_REQUEST_DELAY", "soon")

        with pytest.raises(ValueError, match="TRANSLATE_REQUEST_DELAY"):
            Config.from_env()

    def test_with_overrides_skips_none(self):
        config = Config().with_overrides(target_lang="fr", source_lang=None)

        assert config.target_lang == "fr"
        assert config.source_lang == "en"

    def test_user_agent_names_tool_and_version(self):
        assert USER_AGENT.startswith("text-translator/")


class TestCli:

    def test_defaults_come_from_base_config(self):
        args = build_parser().parse_args(["book.txt"])

        config = config_from_args(args, base=Config())

        assert args.input_file == "book.txt"
        assert args.output_file is None
        assert config == Config()

    def test_flags_override(self):
        args = build_parser().parse_args([
            "book.txt", "-o", "out.txt", "--api-url", "http://x/translate",
            "-s", "de", "-t", "fr", "--chunk-size", "2000", "--delay", "1", "--max-retries", "5",
        ])

        config = config_from_args(args, base=Config())

        assert args.output_file == "out.txt"
        assert config.api_url == "http://x/translate"
        assert (config.source_lang, config.target_lang) == ("de", "fr")
        assert config.max_chunk_size == 2000
        assert config.request_delay == 1.0
        assert config.max_retries == 5

    def test_rejects_non_positive_chunk_size(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["book.txt", "--chunk-size", "0"])

    def test_rejects_chunk_size_below_one_character(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["book.txt", "--chunk-size", "3"])

    def test_accepts_smallest_chunk_size(self):
        args = build_parser().parse_args(["book.txt", "--chunk-size", "4"])

        assert args.chunk_size == 4

    def test_input_file_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    @pytest.mark.asyncio
    async def test_main_reports_missing_file(self, tmp_path, capsys):
        exit_code = await main([str(tmp_path / "missing.txt")])

        assert exit_code == 1
        assert "Error: File not found" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_main_empty_file_succeeds(self, tmp_path):
        source = tmp_path / "empty.txt"
        source.write_text("", encoding="utf-8")

        assert await main([str(source), "-o", str(tmp_path / "out.txt")]) == 0
        assert not (tmp_path / "out.txt").exists()

    @pytest.mark.asyncio
    async def test_main_reports_non_utf8_input(self, tmp_path, capsys):
        source = tmp_path / "latin1.txt"
        source.write_bytes(b"hello \xff world")

        assert await main([str(source)]) == 1
        assert "Error: Input file is not valid UTF-8" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_main_reports_malformed_environment(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("TRANSLATE_MAX_RETRIES", "abc")
        source = tmp_path / "book.txt"
        source.write_text("hello", encoding="utf-8")

        assert await main([str(source)]) == 1
        err = capsys.readouterr().err
        assert "Error: TRANSLATE_MAX_RETRIES must be an integer" in err
