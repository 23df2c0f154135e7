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

from headstamp.context import GlobalConfig
from headstamp.core.config.type_constraints import (
    BoolConstraint,
    LiteralTypeConstraint,
    OptionalConstraint,
    RangeTypeConstraint,
)
from headstamp.core.exceptions import ConfigurationError


@pytest.mark.parametrize(
    "raw,expected", [("true", True), ("YES", True), ("0", False), ("off", False)]
)
def test_bool_constraint(raw, expected):
    assert BoolConstraint().coerce(raw) is expected


def test_bool_constraint_rejects_garbage():
    with pytest.raises(ConfigurationError):
        BoolConstraint().coerce("maybe")


def test_range_constraint_int_and_float():
    assert RangeTypeConstraint(min_value=1, is_int=True).coerce("8") == 8
    assert RangeTypeConstraint(0.0, 1.0).coerce("0.25") == 0.25


@pytest.mark.parametrize("raw", ["-1", "2", "abc"])
def test_range_constraint_rejects(raw):
    with pytest.raises(ConfigurationError):
        RangeTypeConstraint(0.0, 1.0).coerce(raw)


def test_literal_constraint():
    constraint = LiteralTypeConstraint(allowed=("classic", "mono"))

    assert constraint.coerce(" mono ") == "mono"
    assert str(constraint) == "classic, mono"
    with pytest.raises(ConfigurationError):
        constraint.coerce("neon")


def test_optional_constraint_clears_with_none():
    constraint = OptionalConstraint(RangeTypeConstraint(min_value=1, is_int=True))

    assert constraint.coerce("none") is None
    assert constraint.coerce("2020") == 2020


def test_every_config_field_has_constraint_and_description():
    from dataclasses import fields

    for field in fields(GlobalConfig):
        assert field.name in GlobalConfig.constraints
        assert field.name in GlobalConfig.descriptions
        assert field.name in GlobalConfig.cli_options
