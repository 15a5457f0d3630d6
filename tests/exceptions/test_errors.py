"""Tests for the codeatlas exception hierarchy and safe file reads."""

from pathlib import Path

import pytest

from codeatlas.exceptions import (
    AnalysisError,
    CodeAtlasError,
    ConfigurationError,
    FileAccessError,
    InvalidConfigError,
    InvalidPathError,
)
from codeatlas.file_ops import read_file_content, safe_read_file, should_skip_file


class TestHierarchy:
    """Every error is a CodeAtlasError."""

    def test_subclasses(self):
        assert issubclass(FileAccessError, AnalysisError)
        assert issubclass(AnalysisError, CodeAtlasError)
        assert issubclass(InvalidPathError, ConfigurationError)
        assert issubclass(InvalidConfigError, ConfigurationError)

    def test_details_in_message(self):
        err = InvalidPathError(Path("/x"), "Directory does not exist")
        assert str(err) == "Invalid path: /x (path=/x, reason=Directory does not exist)"
        assert err.reason == "Directory does not exist"

    def test_plain_message(self):
        assert str(CodeAtlasError("boom")) == "boom"


class TestFileOps:
    """Size-limited reads."""

    def test_read(self, tmp_path):
        path = tmp_path / "a.js"
        path.write_text("const a = 1;\n")
        assert read_file_content(path) == "const a = 1;\n"

    def test_oversized_is_none(self, tmp_path):
        path = tmp_path / "big.js"
        path.write_text("x" * 100)
        assert read_file_content(path, max_bytes=10) is None
        with pytest.raises(FileAccessError, match="Cannot access file"):
            safe_read_file(path, max_bytes=10)

    def test_missing_is_none(self, tmp_path):
        assert read_file_content(tmp_path / "missing.js") is None

    def test_skip_patterns(self):
        assert should_skip_file("src/a.generated.ts", ["*.generated.ts"])
        assert not should_skip_file("src/a.ts", ["*.generated.ts"])
