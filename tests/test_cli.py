"""CLI smoke tests for pagepress."""

from unittest.mock import AsyncMock, patch

import httpx
from typer.testing import CliRunner

from pagepress.cli import app
from pagepress.models import RenderedPage, UploadResult
from pagepress.services import PublishReport

runner = CliRunner()


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_app_shows_help(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Publish Pinboard bookmarks" in result.output

    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "pagepress" in result.output

    def test_schedule_help(self) -> None:
        result = runner.invoke(app, ["schedule", "--help"])
        assert result.exit_code == 0
        assert "Run in the foreground" in result.output

    def test_config_masks_tokens(self) -> None:
        with patch("pagepress.cli.settings.dropbox_token", "sl.secret-token-9876"):
            result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "secret" not in result.output
        assert "9876" in result.output


class TestRunCommand:
    """Test the run command."""

    def test_run_success(self) -> None:
        report = PublishReport(
            bookmark_count=7,
            post_count=3,
            uploads=[UploadResult(path="/ylukem/pages/bookmarks.md")],
        )
        with patch("pagepress.services.run_once", AsyncMock(return_value=report)):
            result = runner.invoke(app, ["run"])

        assert result.exit_code == 0
        assert "Bookmarks: 7" in result.output
        assert "/ylukem/pages/bookmarks.md" in result.output

    def test_run_failure_exits_nonzero(self) -> None:
        error = httpx.ConnectError("network down")
        with patch("pagepress.services.run_once", AsyncMock(side_effect=error)):
            result = runner.invoke(app, ["run"])

        assert result.exit_code == 1
        assert "Publish failed: network down" in result.output


class TestRenderCommand:
    """Test the render command."""

    def test_writes_pages(self, tmp_path) -> None:
        pages = [
            RenderedPage(name="bookmarks", markdown="Title: bookmarks"),
            RenderedPage(name="about", markdown="Title: about"),
        ]
        with patch("pagepress.services.render_pages", AsyncMock(return_value=pages)):
            result = runner.invoke(app, ["render", "--output-dir", str(tmp_path / "out")])

        assert result.exit_code == 0
        assert (tmp_path / "out" / "bookmarks.md").read_text() == "Title: bookmarks"
        assert (tmp_path / "out" / "about.md").read_text() == "Title: about"
