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

"""
Terminal colours for headstamp output.

Each theme maps an output role (a file path, a license label, a config row
part) to a colorama prefix. Roles a theme does not define print uncoloured,
so the ``mono`` theme is simply an empty palette.
"""

from colorama import Fore, Style

from headstamp.core.exceptions import ConfigurationError

_PALETTES: dict[str, dict[str, str]] = {
    "classic": {
        "path": Fore.WHITE + Style.BRIGHT,
        "license": Fore.GREEN + Style.BRIGHT,
        "license_unknown": Fore.YELLOW + Style.DIM,
        "heading": Fore.CYAN + Style.BRIGHT,
        "config_key": Fore.CYAN,
        "config_value": Fore.GREEN,
        "config_source": Fore.YELLOW,
        "notice": Fore.YELLOW,
        "done": Fore.GREEN + Style.BRIGHT,
    },
    "ocean": {
        "path": Fore.BLUE + Style.BRIGHT,
        "license": Fore.CYAN + Style.BRIGHT,
        "license_unknown": Fore.MAGENTA + Style.DIM,
        "heading": Fore.CYAN + Style.BRIGHT,
        "config_key": Fore.BLUE + Style.BRIGHT,
        "config_value": Fore.WHITE + Style.BRIGHT,
        "config_source": Fore.BLUE,
        "notice": Fore.MAGENTA,
        "done": Fore.CYAN + Style.BRIGHT,
    },
    "mono": {},
}

THEME_NAMES = tuple(_PALETTES)

_active: dict[str, str] = _PALETTES["classic"]


def set_theme(name: str) -> None:
    global _active
    if name not in _PALETTES:
        raise ConfigurationError(
            f"Unknown theme '{name}'", f"Available themes: {', '.join(THEME_NAMES)}"
        )
    _active = _PALETTES[name]


def themed(role: str, text: str) -> str:
    prefix = _active.get(role)
    if not prefix:
        return text
    return f"{prefix}{text}{Style.RESET_ALL}"
