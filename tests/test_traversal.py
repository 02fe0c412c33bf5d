"""Tests for file system traversal functionality."""

from pathlib import Path

import pytest

from guardian.traversal import (
    DEFAULT_IGNORE_DIRS,
    find_source_files,
    is_source_file,
    should_ignore_directory,
)


class TestFileTypeChecks:
    def test_is_source_file_recognizes_js_and_ts(self):
        for name in ("App.tsx", "api.ts", "index.js", "Button.jsx", "server.mjs", "cfg.cjs"):
            assert is_source_file(Path(name)), name

    def test_is_source_file_case_insensitive(self):
        assert is_source_file(Path("APP.TSX"))
        assert is_source_file(Path("Index.JS"))

    def test_is_source_file_rejects_other_files(self):
        for name in ("styles.css", "README.md", "package.json", "main.c", "Makefile"):
            assert not is_source_file(Path(name)), name


class TestDirectoryFiltering:
    def test_should_ignore_directory(self):
        ignore_set = {"node_modules", "dist"}
        assert should_ignore_directory(Path("node_modules"), ignore_set)
        assert should_ignore_directory(Path("web/dist"), ignore_set)
        assert not should_ignore_directory(Path("src"), ignore_set)

    def test_default_ignore_dirs(self):
        assert "node_modules" in DEFAULT_IGNORE_DIRS
        assert ".git" in DEFAULT_IGNORE_DIRS
        assert "src" not in DEFAULT_IGNORE_DIRS


class TestFindSourceFiles:
    @pytest.fixture
    def project(self, tmp_path):
        (tmp_path / "src" / "components").mkdir(parents=True)
        (tmp_path / "src" / "hooks").mkdir()
        (tmp_path / "node_modules" / "react").mkdir(parents=True)
        (tmp_path / "dist").mkdir()
        (tmp_path / "src" / "components" / "App.tsx").write_text("")
        (tmp_path / "src" / "hooks" / "useUser.ts").write_text("")
        (tmp_path / "src" / "index.js").write_text("")
        (tmp_path / "src" / "styles.css").write_text("")
        (tmp_path / "node_modules" / "react" / "index.js").write_text("")
        (tmp_path / "dist" / "bundle.js").write_text("")
        return tmp_path

    def test_finds_sources_sorted_and_skips_ignored(self, project):
        files = find_source_files(project)
        rel = [p.relative_to(project.resolve()).as_posix() for p in files]
        assert rel == ["src/components/App.tsx", "src/hooks/useUser.ts", "src/index.js"]

    def test_custom_ignore_dirs(self, project):
        files = find_source_files(project, ignore_dirs={"src"})
        rel = sorted(p.relative_to(project.resolve()).as_posix() for p in files)
        assert rel == ["dist/bundle.js", "node_modules/react/index.js"]

    def test_filter_fn(self, project):
        files = find_source_files(project, filter_fn=lambda p: p.name.startswith("use"))
        assert [p.name for p in files] == ["useUser.ts"]

    def test_missing_root(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            find_source_files(tmp_path / "nope")

    def test_root_must_be_directory(self, tmp_path):
        path = tmp_path / "App.tsx"
        path.write_text("")
        with pytest.raises(NotADirectoryError):
            find_source_files(path)

    def test_empty_directory(self, tmp_path):
        assert find_source_files(tmp_path) == []
