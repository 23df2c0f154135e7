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

from collections.abc import Sequence
from typing import Any

from headstamp.core.exceptions import ConfigurationError

_TRUE_VALUES = {"true", "1", "yes", "y", "on"}
_FALSE_VALUES = {"false", "0", "no", "n", "off"}


class TypeConstraint:
    """Coerces a raw command line string into a valid config value."""

    def coerce(self, value: Any) -> Any:
        raise NotImplementedError

    def __str__(self) -> str:
        return "any"


class StringConstraint(TypeConstraint):
    def coerce(self, value: Any) -> str:
        return str(value)

    def __str__(self) -> str:
        return "any text"


class BoolConstraint(TypeConstraint):
    def coerce(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"'{value}' is not a boolean (use true or false)")

    def __str__(self) -> str:
        return "true, false"


class LiteralTypeConstraint(TypeConstraint):
    def __init__(self, allowed: Sequence[str]):
        self.allowed = tuple(allowed)

    def coerce(self, value: Any) -> str:
        text = str(value).strip()
        if text not in self.allowed:
            raise ConfigurationError(
                f"'{value}' is not one of: {', '.join(self.allowed)}"
            )
        return text

    def __str__(self) -> str:
        return ", ".join(self.allowed)


class RangeTypeConstraint(TypeConstraint):
    """Numeric value within an inclusive range, int or float depending on the bounds."""

    def __init__(
        self,
        min_value: float | None = None,
        max_value: float | None = None,
        is_int: bool = False,
    ):
        self.min_value = min_value
        self.max_value = max_value
        self.is_int = is_int

    def coerce(self, value: Any) -> int | float:
        try:
            number = int(value) if self.is_int else float(value)
        except (TypeError, ValueError) as e:
            kind = "an integer" if self.is_int else "a number"
            raise ConfigurationError(f"'{value}' is not {kind}") from e

        if self.min_value is not None and number < self.min_value:
            raise ConfigurationError(f"{number} is below the minimum of {self.min_value}")
        if self.max_value is not None and number > self.max_value:
            raise ConfigurationError(f"{number} is above the maximum of {self.max_value}")
        return number

    def __str__(self) -> str:
        low = "-inf" if self.min_value is None else self.min_value
        high = "inf" if self.max_value is None else self.max_value
        return f"{'integer' if self.is_int else 'number'} in [{low}, {high}]"


class OptionalConstraint(TypeConstraint):
    """Wraps another constraint and additionally accepts 'none' to clear the value."""

    def __init__(self, inner: TypeConstraint):
        self.inner = inner

    def coerce(self, value: Any) -> Any:
        if value is None or str(value).strip().lower() in {"none", "null", ""}:
            return None
        return self.inner.coerce(value)

    def __str__(self) -> str:
        return f"{self.inner} or none"
