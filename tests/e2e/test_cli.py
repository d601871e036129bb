# ABOUTME: End-to-end tests for the Shelfcode CLI.
# ABOUTME: Tests CLI commands via Click's CliRunner with faked network clients.

import json
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from shelfcode.cli import cli
from shelfcode.metadata.advisor import GenreAdvisor
from shelfcode.metadata.http import MetadataFetchError
from shelfcode.metadata.openlibrary import OpenLibraryLookup
from tests.fixtures.openlibrary_responses import (
    BRIEF_RESPONSE,
    BRIEF_RESPONSE_EMPTY,
    CHAT_COMPLETION_RESPONSE,
)
from tests.unit.test_advisor import FakeChatClient
from tests.unit.test_openlibrary_lookup import FakeHttpClient


class TestCliGenerate:
    """E2e tests for `shelfcode generate`."""

    def test_generate_from_flags(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "generate",
                "--category",
                "Fantasy",
                "--author",
                "J.K. Rowling",
                "--isbn",
                "978-0-7475-3269-9",
            ],
        )
        assert result.exit_code == 0
        assert "FAN-JRO-2699-001" in result.output
        assert "Fantasy section" in result.output

    def test_generate_with_copy_number(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["generate", "--author", "Jane Doe", "--isbn", "12", "--copy", "7"]
        )
        assert result.exit_code == 0
        assert "GEN-JDO-0012-007" in result.output

    def test_generate_without_data_uses_defaults(self) -> None:
        result = CliRunner().invoke(cli, ["generate"])
        assert result.exit_code == 0
        assert "GEN-XXX-0000-001" in result.output

    def test_generate_rejects_zero_copy(self) -> None:
        result = CliRunner().invoke(cli, ["generate", "--copy", "0"])
        assert result.exit_code != 0

    def test_generate_from_json(self, book_json: Path) -> None:
        result = CliRunner().invoke(cli, ["generate", "--from-json", str(book_json)])
        assert result.exit_code == 0
        assert "FAN-JRO-2699-001" in result.output

    def test_flags_override_json(self, book_json: Path) -> None:
        result = CliRunner().invoke(
            cli, ["generate", "--from-json", str(book_json), "--category", "Horror"]
        )
        assert result.exit_code == 0
        assert "HOR-JRO-2699-001" in result.output

    def test_json_must_be_object(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text(json.dumps(["Fantasy"]), encoding="utf-8")
        result = CliRunner().invoke(cli, ["generate", "--from-json", str(path)])
        assert result.exit_code == 1
        assert "JSON object" in result.output


class TestCliExplain:
    """E2e tests for `shelfcode explain`."""

    def test_explain_valid_code(self) -> None:
        result = CliRunner().invoke(cli, ["explain", "FAN-JRO-2699-001"])
        assert result.exit_code == 0
        assert "Fantasy" in result.output
        assert "JRO" in result.output
        assert "2699" in result.output

    def test_explain_with_author(self) -> None:
        result = CliRunner().invoke(cli, ["explain", "FAN-JRO-2699-001", "--author", "Rowling"])
        assert result.exit_code == 0
        assert "Author (Rowling)" in result.output

    def test_explain_invalid_code(self) -> None:
        result = CliRunner().invoke(cli, ["explain", "not-a-valid"])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert "Invalid code format" in result.output


class TestCliGenres:
    """E2e tests for `shelfcode genres`."""

    def test_lists_vocabulary(self) -> None:
        result = CliRunner().invoke(cli, ["genres"])
        assert result.exit_code == 0
        assert "Science Fiction" in result.output
        assert "SMU" in result.output
        assert "22 genre(s)" in result.output


class TestCliLookup:
    """E2e tests for `shelfcode lookup`."""

    def test_lookup_shows_code(self) -> None:
        lookup = OpenLibraryLookup(FakeHttpClient({"/api/volumes/brief/isbn/": BRIEF_RESPONSE}))
        with patch("shelfcode.cli.commands.lookup_cmd._create_lookup", return_value=lookup):
            result = CliRunner().invoke(cli, ["lookup", "9780747532699", "--copy", "2"])
        assert result.exit_code == 0
        assert "J.K. Rowling" in result.output
        assert "FAN-JRO-2699-002" in result.output

    def test_lookup_not_found(self) -> None:
        lookup = OpenLibraryLookup(
            FakeHttpClient({"/api/volumes/brief/isbn/": BRIEF_RESPONSE_EMPTY})
        )
        with patch("shelfcode.cli.commands.lookup_cmd._create_lookup", return_value=lookup):
            result = CliRunner().invoke(cli, ["lookup", "0000000000"])
        assert result.exit_code == 1
        assert "No book found" in result.output


class TestCliClassify:
    """E2e tests for `shelfcode classify`."""

    def test_classify_prints_theme(self) -> None:
        advisor = GenreAdvisor(FakeChatClient(CHAT_COMPLETION_RESPONSE), "k")
        with patch(
            "shelfcode.cli.commands.classify_cmd._create_advisor", return_value=advisor
        ) as factory:
            result = CliRunner().invoke(
                cli, ["classify", "9780747532699"], env={"SHELFCODE_AI_API_KEY": "k"}
            )
        assert result.exit_code == 0
        assert "FAN" in result.output
        assert "Fantasy" in result.output
        factory.assert_called_once_with("k", "gpt-3.5-turbo")

    def test_classify_requires_api_key(self) -> None:
        result = CliRunner().invoke(
            cli, ["classify", "9780747532699"], env={"SHELFCODE_AI_API_KEY": None}
        )
        assert result.exit_code != 0
        assert "api-key" in result.output

    def test_classify_reports_advisor_error(self) -> None:
        advisor = GenreAdvisor(FakeChatClient(MetadataFetchError("HTTP 401")), "k")
        with patch("shelfcode.cli.commands.classify_cmd._create_advisor", return_value=advisor):
            result = CliRunner().invoke(cli, ["classify", "1", "--api-key", "k"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestCliQr:
    """E2e tests for `shelfcode qr`."""

    def test_prints_payload(self) -> None:
        result = CliRunner().invoke(
            cli, ["qr", "book-1", "SF-FHE-3593-001", "--title", "Dune", "--author", "Frank Herbert"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["location"] == "SF-FHE-3593-001"
        assert data["type"] == "library_book"


class TestCliRoot:
    """E2e tests for the root command group."""

    def test_verbose_flag(self) -> None:
        result = CliRunner().invoke(cli, ["-v", "generate", "--category", "Zorblaxian"])
        assert result.exit_code == 0
        assert "ZOR-XXX-0000-001" in result.output
