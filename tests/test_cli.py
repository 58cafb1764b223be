"""
Unit tests for the CLI
"""
from unittest.mock import patch

from mcp_webfetch_ux.cli import main


class TestCli:
    """Test CLI commands that need no network."""

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_list_tools(self, capsys):
        assert main(["list-tools"]) == 0
        out = capsys.readouterr().out
        assert "Tool: webfetch" in out
        assert "Tool: search_content" in out
        assert "Tool: extract_content" in out

    def test_search_file(self, tmp_path, capsys):
        path = tmp_path / "notes.txt"
        path.write_text("alpha\nbeta\ngamma\n", encoding="utf-8")

        assert main(["search", str(path), "BETA", "-B", "1"]) == 0
        out = capsys.readouterr().out
        assert "     1-alpha" in out
        assert "     2:beta" in out

    def test_search_negative_limit(self, tmp_path, capsys):
        path = tmp_path / "notes.txt"
        path.write_text("alpha", encoding="utf-8")

        assert main(["search", str(path), "alpha", "--limit", "-1"]) == 1
        assert capsys.readouterr().out.startswith("ERROR:")

    def test_extract_raw(self, tmp_path, capsys):
        path = tmp_path / "page.html"
        path.write_text("<p>raw</p>", encoding="utf-8")

        assert main(["extract", str(path), "--mode", "raw"]) == 0
        assert capsys.readouterr().out == "<p>raw</p>\n"

    def test_fetch_uses_handler(self, capsys):
        with patch("mcp_webfetch_ux.cli.MCPHandlers.webfetch") as mock_webfetch:
            mock_webfetch.return_value = {"success": False, "error": "Failed to fetch x: boom"}
            assert main(["fetch", "https://example.com/"]) == 1

        assert "ERROR: Failed to fetch x: boom" in capsys.readouterr().out
