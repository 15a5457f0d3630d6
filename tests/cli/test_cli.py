"""Tests for the codeatlas command line."""

import json
import logging

from typer.testing import CliRunner

from codeatlas import __version__
from codeatlas.cli import app

runner = CliRunner()


class TestRoot:
    """Root callback."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"codeatlas version {__version__}" in result.stdout

    def test_no_command_prints_help(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "scan" in result.stdout


class TestScanCommand:
    """codeatlas scan."""

    def test_json_to_stdout(self, fullstack_project):
        result = runner.invoke(app, ["scan", str(fullstack_project), "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["metadata"]["totalFiles"] == 24
        assert sorted(data["features"]) == ["auth", "budget"]
        assert all("content" not in f for f in data["files"])

    def test_include_content(self, fullstack_project):
        result = runner.invoke(app, ["scan", str(fullstack_project), "-f", "json", "--include-content"])
        data = json.loads(result.stdout)
        readme = next(f for f in data["files"] if f["path"] == "README.md")
        assert readme["content"] == "# Budget app\n"

    def test_output_file(self, fullstack_project, tmp_path):
        out = tmp_path / "scan.json"
        result = runner.invoke(app, ["scan", str(fullstack_project), "--output", str(out)])
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["metadata"]["projectType"] == "fullstack"

    def test_max_depth(self, fullstack_project):
        result = runner.invoke(app, ["scan", str(fullstack_project), "-f", "json", "--max-depth", "0"])
        data = json.loads(result.stdout)
        assert "server/models/User.js" not in data["features"]["auth"]["allFiles"]

    def test_rich_summary(self, fullstack_project):
        result = runner.invoke(app, ["scan", str(fullstack_project)])
        assert result.exit_code == 0, result.output
        assert "Project Scan" in result.stdout
        assert "fullstack" in result.stdout
        assert "Express" in result.stdout

    def test_unknown_format(self, fullstack_project):
        result = runner.invoke(app, ["scan", str(fullstack_project), "--format", "xml"])
        assert result.exit_code == 1
        assert "Unknown format" in result.stdout

    def test_missing_path(self, tmp_path):
        result = runner.invoke(app, ["scan", str(tmp_path / "nope")])
        assert result.exit_code != 0

    def test_invalid_config(self, fullstack_project, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("feature_max_depth = -1\n")
        result = runner.invoke(app, ["scan", str(fullstack_project), "--config", str(bad)])
        assert result.exit_code == 1
        assert "Error" in result.stdout


class TestLoggingVerbosity:
    """Log level follows the resolved configuration."""

    def package_level(self):
        return logging.getLogger("codeatlas").level

    def test_config_file_verbosity(self, fullstack_project, tmp_path):
        config = tmp_path / "quiet.toml"
        config.write_text('verbosity = "quiet"\n')
        result = runner.invoke(app, ["scan", str(fullstack_project), "-f", "json", "--config", str(config)])
        assert result.exit_code == 0, result.output
        assert self.package_level() == logging.ERROR

    def test_environment_verbosity(self, fullstack_project, monkeypatch):
        monkeypatch.setenv("CODEATLAS_VERBOSITY", "verbose")
        result = runner.invoke(app, ["scan", str(fullstack_project), "-f", "json"])
        assert result.exit_code == 0, result.output
        assert self.package_level() == logging.DEBUG

    def test_flag_beats_config_file(self, fullstack_project, tmp_path):
        config = tmp_path / "quiet.toml"
        config.write_text('verbosity = "quiet"\n')
        result = runner.invoke(
            app, ["scan", str(fullstack_project), "-f", "json", "--config", str(config), "--verbose"]
        )
        assert result.exit_code == 0, result.output
        assert self.package_level() == logging.DEBUG

    def test_default_is_warnings(self, fullstack_project):
        runner.invoke(app, ["scan", str(fullstack_project), "-f", "json"])
        assert self.package_level() == logging.WARNING


class TestFeaturesCommand:
    """codeatlas features."""

    def test_json(self, fullstack_project):
        result = runner.invoke(app, ["features", str(fullstack_project), "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert list(data) == ["auth", "budget"]
        assert data["budget"]["sharedDependencies"] == ["client/src/lib/utils.js"]

    def test_rich(self, fullstack_project):
        result = runner.invoke(app, ["features", str(fullstack_project)])
        assert result.exit_code == 0, result.output
        assert "Coverage" in result.stdout

    def test_no_features(self, make_project):
        root = make_project({"src/index.js": "export default 1;\n"})
        result = runner.invoke(app, ["features", str(root)])
        assert result.exit_code == 0
        assert "No features detected" in result.stdout


class TestFileCommand:
    """codeatlas file."""

    def test_explains_route_file(self, fullstack_project):
        result = runner.invoke(app, ["file", str(fullstack_project), "server/routes/authRoutes.js"])
        assert result.exit_code == 0, result.output
        assert "route" in result.stdout
        assert "POST /login" in result.stdout
        assert "Features: auth" in result.stdout

    def test_unknown_target(self, fullstack_project):
        result = runner.invoke(app, ["file", str(fullstack_project), "nope.js"])
        assert result.exit_code == 1
        assert "not part of the scan" in result.stdout
