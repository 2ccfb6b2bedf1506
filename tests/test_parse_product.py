"""Tests for the parse_product.py CLI"""

import json
from unittest.mock import patch

import pytest

import parse_product
from amazon_parser.errors import FetchError, TransportTimeoutError
from amazon_parser.models import ParseResult, ProductRecord


def run_cli(monkeypatch, *args):
    """Run main() with the given arguments and return the exit code."""
    monkeypatch.setattr("sys.argv", ["parse_product.py", *args])
    with patch.object(parse_product, "load_dotenv"), patch.object(parse_product, "setup_logging"):
        with pytest.raises(SystemExit) as exc_info:
            parse_product.main()
    return exc_info.value.code


class TestMain:
    def test_requires_an_input(self, monkeypatch):
        assert run_cli(monkeypatch) == 2

    def test_parses_html_file_and_writes_json(self, monkeypatch, tmp_path, product_page_html,
                                              wrapping_paper_data, capsys):
        html_file = tmp_path / "page.html"
        html_file.write_text(product_page_html, encoding="utf-8")
        output = tmp_path / "out" / "product.json"
        result = ParseResult(product=ProductRecord.from_dict(wrapping_paper_data))

        with patch.object(parse_product, "AmazonProductParser") as mock_parser_cls:
            mock_parser = mock_parser_cls.return_value.__enter__.return_value
            mock_parser.parse.return_value = result
            code = run_cli(monkeypatch, "--html-file", str(html_file), "--model", "mistral",
                           "--output-json", str(output))

        assert code == 0
        config = mock_parser_cls.call_args.args[0]
        assert config.model == "mistral"
        assert mock_parser.parse.call_args.kwargs["html"] == product_page_html
        assert json.loads(output.read_text(encoding="utf-8"))["data"] == wrapping_paper_data
        assert "PARSE REPORT" in capsys.readouterr().out

    @pytest.mark.parametrize("error,text", [
        (FetchError("Failed to fetch Amazon page: boom"), "Parse failed"),
        (TransportTimeoutError("Ollama request timed out"), "Timed out"),
    ])
    def test_errors_exit_with_failure(self, monkeypatch, capsys, error, text):
        with patch.object(parse_product, "AmazonProductParser") as mock_parser_cls:
            mock_parser_cls.return_value.__enter__.return_value.parse.side_effect = error
            code = run_cli(monkeypatch, "--asin", "B08XYZ1234")

        assert code == 1
        assert text in capsys.readouterr().out
