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

import os
from dataclasses import MISSING, fields
from enum import Enum
from pathlib import Path
from textwrap import shorten
from typing import Any

import tomllib
import typer

from headstamp.constants import (
    CONFIG_FILENAME,
    ENV_APP_PREFIX,
    GLOBAL_CONFIG_FILE,
    LOCAL_CONFIG_FILE,
)
from headstamp.context import GlobalConfig
from headstamp.core.exceptions import ConfigurationError, handle_headstamp_exception
from headstamp.core.ui.theme import themed


class ConfigScope(str, Enum):
    LOCAL = "local"
    GLOBAL = "global"
    ENV = "env"


def display_config(data: list[dict], max_value_length: int = 50) -> None:
    """
    Display config entries in a two-line format:
    Key: Description
      Value (Source)
    """
    for item in data:
        value_display = shorten(
            str(item["Value"]), width=max_value_length, placeholder="..."
        )
        print(f"{themed('config_key', item['Key'])}: {item['Description']}")
        print(
            f"  {themed('config_value', value_display)} {themed('config_source', '(' + item['Source'] + ')')}"
        )
        print()


def _get_config_schema() -> dict[str, dict[str, Any]]:
    """Get the schema of available config options from GlobalConfig."""
    schema = {}
    for field in fields(GlobalConfig):
        schema[field.name] = {
            "description": GlobalConfig.descriptions.get(
                field.name, "No description available"
            ),
            "default": None if field.default is MISSING else field.default,
            "constraint": GlobalConfig.constraints.get(field.name),
        }
    return schema


def print_describe_options() -> None:
    print(themed("heading", "Available configuration options:") + "\n")

    table_data = []
    for key, info in sorted(_get_config_schema().items()):
        table_data.append(
            {
                "Key": key,
                "Description": info["description"],
                "Value": str(info["default"]),
                "Source": "Options: " + str(info["constraint"]),
            }
        )
    display_config(table_data, max_value_length=80)


def _check_key_exists(key: str) -> dict:
    """Return the schema entry of ``key`` or fail with the list of valid keys."""
    schema = _get_config_schema()
    if key not in schema:
        raise ConfigurationError(
            f"Unknown configuration key '{key}'",
            f"Valid keys: {', '.join(sorted(schema))}",
        )
    return schema[key]


def _config_path(scope: str) -> Path:
    return GLOBAL_CONFIG_FILE if scope == "global" else LOCAL_CONFIG_FILE


def _read_config_file(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Failed to parse {path}", str(e)) from e


def _format_toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    # literal strings (single quotes) for TOML
    return f"'{value}'"


def _write_config_file(path: Path, data: dict) -> None:
    if not data:
        if path.exists():
            path.unlink()
            print(f"Removed empty config file: {path}")
        return

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for k, v in data.items():
            if v is not None:
                f.write(f"{k} = {_format_toml_value(v)}\n")


def _env_values() -> dict:
    return {
        k[len(ENV_APP_PREFIX) :].lower(): v
        for k, v in os.environ.items()
        if k.lower().startswith(ENV_APP_PREFIX.lower())
    }


def _add_to_gitignore() -> None:
    """Keep the local config file out of version control when a .gitignore exists."""
    gitignore_path = Path(".gitignore")
    if not gitignore_path.exists():
        return

    content = gitignore_path.read_text(encoding="utf-8")
    if CONFIG_FILENAME in content.splitlines():
        return
    with gitignore_path.open("a", encoding="utf-8") as f:
        if content and not content.endswith("\n"):
            f.write("\n")
        f.write(f"{CONFIG_FILENAME}\n")
    print(f"Added {CONFIG_FILENAME} to .gitignore")


def set_config(key: str, value: str, scope: str) -> None:
    """Set a configuration value in the specified scope."""
    field_info = _check_key_exists(key)
    final_value = field_info["constraint"].coerce(value)

    if scope == "env":
        env_var = f"{ENV_APP_PREFIX}{key.upper()}"
        print(themed("done", "To set this as an environment variable:"))
        print(f"  Windows (PowerShell): $env:{env_var}='{value}'")
        print(f"  Windows (CMD): set {env_var}={value}")
        print(f"  Linux/macOS: export {env_var}='{value}'")
        return

    if scope == "local":
        _add_to_gitignore()

    config_path = _config_path(scope)
    config_data = _read_config_file(config_path)

    if final_value is None:
        config_data.pop(key, None)
    else:
        config_data[key] = final_value
    _write_config_file(config_path, config_data)

    print(
        themed("done", f"Set {key} = {_format_toml_value(final_value)} ({scope})")
    )
    print(f"Config file: {config_path.absolute()}")


def get_config(key: str | None, scope: str | None) -> None:
    """Show configuration value(s), highest priority source first."""
    schema = _get_config_schema()
    if key is not None:
        _check_key_exists(key)

    sources = []
    if scope in (None, "local"):
        sources.append(
            ("Set from: Local Config", _read_config_file(LOCAL_CONFIG_FILE))
        )
    if scope in (None, "env"):
        sources.append(("Environment", _env_values()))
    if scope in (None, "global"):
        sources.append(
            ("Set from: Global Config", _read_config_file(GLOBAL_CONFIG_FILE))
        )

    keys = [key] if key is not None else sorted(schema)

    table_data = []
    for k in keys:
        matches = [(name, data[k]) for name, data in sources if k in data]
        if key is None:
            # only the winning source when listing everything
            matches = matches[:1]
        if not matches:
            matches = [("Default", schema[k]["default"])]

        for source_name, value in matches:
            table_data.append(
                {
                    "Key": k,
                    "Description": schema[k]["description"],
                    "Value": str(value),
                    "Source": source_name,
                }
            )

    display_config(table_data)


def delete_config(key: str | None, scope: str) -> None:
    """Delete one key, or every key, from the specified scope."""
    if scope == "env":
        target = f"{ENV_APP_PREFIX}{key.upper()}" if key else f"{ENV_APP_PREFIX}*"
        print(
            f"{themed('notice', 'Info:')} Cannot delete environment variables through headstamp.\n"
            f"Please unset {target} in your shell."
        )
        return

    config_path = _config_path(scope)
    config_data = _read_config_file(config_path)
    if not config_data:
        print(f"{themed('notice', 'Info:')} {scope.capitalize()} config is already empty")
        return

    if key is not None:
        _check_key_exists(key)
        if key not in config_data:
            print(f"{themed('notice', 'Info:')} Key '{key}' not found in {scope} config")
            return
        if not typer.confirm(f"Delete '{key}' from {scope} config?"):
            print("Delete cancelled.")
            return
        del config_data[key]
    else:
        if not typer.confirm(
            f"Delete ALL config from {scope} scope? Keys: {', '.join(config_data)}"
        ):
            print("Delete cancelled.")
            return
        config_data.clear()

    _write_config_file(config_path, config_data)
    print(themed("done", f"Deleted {key or 'all keys'} from {scope} config"))


def describe_callback(ctx: typer.Context, param, value: bool):
    if not value or ctx.resilient_parsing:
        return

    print_describe_options()
    raise typer.Exit()


def main(
    ctx: typer.Context,
    describe: bool = typer.Option(
        False,
        "--describe",
        callback=describe_callback,
        is_eager=True,
        help="Describe available configuration options and exit.",
    ),
    key: str | None = typer.Argument(None, help="Configuration key to get or set."),
    value: str | None = typer.Argument(
        None, help="Value to set (omit to get current value)."
    ),
    scope: ConfigScope | None = typer.Option(
        None,
        "--scope",
        help="Scope to read or modify. Defaults to local for set/delete, all for get.",
    ),
    delete: bool = typer.Option(
        False,
        "--delete",
        help="Delete the key (or every key when none is given) from the scope.",
    ),
) -> None:
    """
    Manage global and local headstamp configuration.

    Priority order: program arguments > custom config > local config > environment variables > global config

    Examples:
        # Show all configuration
        headstamp config

        # Use 4 worker threads for this project
        headstamp config workers 4

        # Be stricter when detecting licenses, for every project
        headstamp config detection_threshold 0.9 --scope global

        # Delete a key from the local config
        headstamp config workers --delete
    """
    scope_name = scope.value if scope is not None else None

    with handle_headstamp_exception():
        if delete:
            if value is not None:
                raise ConfigurationError("Cannot specify a value when deleting")
            delete_config(key, scope_name or "local")
        elif value is not None:
            if key is None:
                raise ConfigurationError("Key is required when setting a value")
            set_config(key, value, scope_name or "local")
        else:
            get_config(key, scope_name)
