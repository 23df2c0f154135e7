# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 Headstamp
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, see <https://www.gnu.org/licenses/>.
#  */
# -----------------------------------------------------------------------------

from pathlib import Path

import pytest

from headstamp.core.files.resolver import expand_patterns


@pytest.fixture
def project(tmp_path, monkeypatch):
    (tmp_path / "src" / "pkg").mkdir(parents=True)
    (tmp_path / "src" / "main.go").write_text("package main\n")
    (tmp_path / "src" / "pkg" / "util.go").write_text("package pkg\n")
    (tmp_path / "src" / "pkg" / "notes.md").write_text("# notes\n")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_text("[core]\n")
    (tmp_path / "README.md").write_text("readme\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_recursive_glob(project):
    assert expand_patterns(["**/*.go"]) == [
        Path("src/main.go"),
        Path("src/pkg/util.go"),
    ]


def test_directory_expands_to_files_beneath(project):
    assert expand_patterns(["src"]) == [
        Path("src/main.go"),
        Path("src/pkg/notes.md"),
        Path("src/pkg/util.go"),
    ]


def test_version_control_directories_are_skipped(project):
    files = expand_patterns(["."])

    assert Path(".git/config") not in files
    assert Path("README.md") in files


def test_unmatched_pattern_is_kept_literally(project):
    assert expand_patterns(["*.rs", "missing.go"]) == [
        Path("*.rs"),
        Path("missing.go"),
    ]


def test_duplicates_keep_first_occurrence(project):
    assert expand_patterns(["src/main.go", "src/*.go", "./src/main.go"]) == [
        Path("src/main.go"),
    ]


def test_no_patterns():
    assert expand_patterns([]) == []
