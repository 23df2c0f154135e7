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

from headstamp.core.detect.comment_block import extract_leading_comment


@pytest.mark.parametrize(
    "content,expected",
    [
        ("// a\n// b\npackage x\n", "a\nb"),
        ("#!/bin/sh\n# a\n# b\n\necho hi\n", "a\nb"),
        ("/*\n * Foo\n * Bar\n */\nint x;\n", "Foo\nBar"),
        ("/* one line */\nint x;\n", "one line"),
        ("<!-- a -->\n<html></html>\n", "a"),
        ("-- sql comment\nSELECT 1;\n", "sql comment"),
        ("(* pascal *)\nprogram X;\n", "pascal"),
        ("{- haskell -}\nmodule Main where\n", "haskell"),
    ],
)
def test_extracts_common_comment_styles(content, expected):
    assert extract_leading_comment(content) == expected


def test_keeps_blank_lines_inside_the_block():
    assert extract_leading_comment("# a\n#\n# b\n\n# c\ncode\n") == "a\n\nb\n\nc"


def test_stops_at_first_code_line():
    content = "// header\nint x = 1; // trailing\n// not header\n"

    assert extract_leading_comment(content) == "header"


def test_no_comment_gives_empty_text():
    assert extract_leading_comment("package main\n// later\n") == ""
    assert extract_leading_comment("") == ""


def test_skips_bom_shebang_and_encoding_cookie():
    content = "\ufeff#!/usr/bin/env python\n# -*- coding: utf-8 -*-\n# hello\nimport os\n"

    assert extract_leading_comment(content) == "hello"


def test_skips_xml_declaration():
    content = '<?xml version="1.0" encoding="UTF-8"?>\n<!--\n  notice\n-->\n<root/>\n'

    assert extract_leading_comment(content) == "notice"


def test_extra_markers_are_recognised():
    content = "' Visual Basic notice\nDim x As Integer\n"

    assert extract_leading_comment(content) == ""
    assert extract_leading_comment(content, ("'",)) == "Visual Basic notice"


def test_module_docstring_counts_when_first():
    content = '"""\nLicensed to you.\n"""\nimport os\n'

    assert extract_leading_comment(content) == "Licensed to you."


def test_docstring_after_comments_ends_the_block():
    content = '# notice\n"""Module docs."""\nimport os\n'

    assert extract_leading_comment(content) == "notice"


def test_leading_blank_lines_are_dropped():
    assert extract_leading_comment("\n\n// a\n") == "a"
