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

import pytest
from typer.testing import CliRunner

from headstamp import cli

MPL2_FIRST_LINE = (
    "// This Source Code Form is subject to the terms of the Mozilla Public\n"
)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "GLOBAL_CONFIG_FILE", tmp_path / "global.toml")
    monkeypatch.setattr(cli, "setup_logger", lambda *args, **kwargs: None)
    monkeypatch.setattr(cli, "setup_signal_handlers", lambda: None)
    for key in ("HEADSTAMP_WORKERS", "HEADSTAMP_THEME", "HEADSTAMP_YEAR"):
        monkeypatch.delenv(key, raising=False)
    return tmp_path


def invoke(runner, *args):
    return runner.invoke(cli.app, ["--theme", "mono", "--year", "2024", *args])


def test_list_prints_every_license(runner):
    result = invoke(runner, "list")

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 12
    assert "apache2" in lines
    assert "unlicense" in lines


def test_set_then_detect(runner, isolated_cli):
    source = isolated_cli / "main.go"
    source.write_text("package main\n")

    result = invoke(runner, "set", "mpl2", "Jane Doe", "//", "main.go")
    assert result.exit_code == 0, result.output
    assert source.read_text().startswith(MPL2_FIRST_LINE)

    result = invoke(runner, "detect", "main.go")
    assert result.exit_code == 0
    assert "main.go: mpl2" in result.output


def test_set_and_unset_with_glob(runner, isolated_cli):
    (isolated_cli / "pkg").mkdir()
    for name in ("a.py", "pkg/b.py"):
        (isolated_cli / name).write_text("x = 1\n")

    result = invoke(runner, "set", "gpl3", "ACME", "#", "**/*.py")
    assert result.exit_code == 0, result.output
    assert "# Copyright (C) 2024 ACME" in (isolated_cli / "pkg/b.py").read_text()

    result = invoke(runner, "unset", "gpl3", "ACME", "#", "**/*.py")
    assert result.exit_code == 0, result.output
    assert (isolated_cli / "a.py").read_text() == "x = 1\n"
    assert (isolated_cli / "pkg/b.py").read_text() == "x = 1\n"


def test_unknown_license_fails(runner, isolated_cli):
    (isolated_cli / "main.go").write_text("package main\n")

    result = invoke(runner, "set", "wtfpl", "Jane Doe", "//", "main.go")

    assert result.exit_code == 1
    assert (isolated_cli / "main.go").read_text() == "package main\n"


def test_missing_file_is_reported_and_others_processed(runner, isolated_cli):
    (isolated_cli / "main.go").write_text("package main\n")

    result = invoke(runner, "set", "mpl2", "Jane Doe", "//", "main.go", "gone.go")

    assert result.exit_code == 1
    assert "! " in result.output
    assert "gone.go" in result.output
    assert (isolated_cli / "main.go").read_text().startswith(MPL2_FIRST_LINE)


def test_dump_prints_license_text(runner):
    result = invoke(runner, "dump", "mpl2", "Jane Doe")

    assert result.exit_code == 0
    assert result.output.startswith("Mozilla Public License")


def test_config_set_writes_local_file(runner, isolated_cli):
    result = runner.invoke(cli.app, ["config", "workers", "3"])

    assert result.exit_code == 0, result.output
    assert "workers = 3" in (isolated_cli / "headstampconfig.toml").read_text()


def test_config_rejects_invalid_value(runner, isolated_cli):
    result = runner.invoke(cli.app, ["config", "workers", "zero"])

    assert result.exit_code == 1
    assert not (isolated_cli / "headstampconfig.toml").exists()


def test_config_describe(runner):
    result = runner.invoke(cli.app, ["config", "--describe"])

    assert result.exit_code == 0
    assert "detection_threshold" in result.output


def test_version(runner):
    result = runner.invoke(cli.app, ["--version"])

    assert result.exit_code == 0
    assert result.output.startswith("headstamp version")
