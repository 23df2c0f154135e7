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

import re
from collections.abc import Iterable

LINE_MARKERS = ("//", "#", "--", ";", "%", "!")

BLOCK_DELIMITERS = (
    ("/*", "*/"),
    ("<!--", "-->"),
    ("(*", "*)"),
    ("{-", "-}"),
    ('"""', '"""'),
    ("'''", "'''"),
)

DOCSTRING_DELIMITERS = {'"""', "'''"}

_ENCODING_RE = re.compile(r"^[ \t\f]*#.*?coding[:=][ \t]*[-\w.]+")
_XML_DECLARATION_RE = re.compile(r"^\s*<\?xml\b.*\?>\s*$")


def _skip_prologue(lines: list[str]) -> int:
    """Index of the first line after a shebang, encoding cookie or XML declaration."""
    index = 0
    if index < len(lines) and lines[index].startswith("#!"):
        index += 1
    if index < len(lines) and _ENCODING_RE.match(lines[index]):
        index += 1
    if index < len(lines) and _XML_DECLARATION_RE.match(lines[index]):
        index += 1
    return index


def _block_opener(line: str) -> tuple[str, str] | None:
    for start, end in BLOCK_DELIMITERS:
        if line.startswith(start):
            return start, end
    return None


def _clean_block_line(line: str) -> str:
    line = line.strip()
    # javadoc style gutter
    if line.startswith("*"):
        line = line.lstrip("*").strip()
    return line


def extract_leading_comment(content: str, extra_markers: Iterable[str] = ()) -> str:
    """
    Return the text of the comment block at the top of ``content``.

    Comment markers, block delimiters and ``*`` gutters are removed and each
    line is trimmed. Collection stops at the first line that is not part of a
    comment. Python docstrings only count when nothing was collected before.
    """
    lines = content.lstrip("\ufeff").splitlines()
    markers = sorted(
        set(LINE_MARKERS) | {m for m in extra_markers if m}, key=len, reverse=True
    )

    collected: list[str] = []
    block_end: str | None = None

    for raw in lines[_skip_prologue(lines) :]:
        line = raw.strip()

        if block_end is not None:
            if block_end in line:
                collected.append(_clean_block_line(line.split(block_end, 1)[0]))
                block_end = None
            else:
                collected.append(_clean_block_line(line))
            continue

        if not line:
            collected.append("")
            continue

        opener = _block_opener(line)
        if opener is not None:
            start, end = opener
            if start in DOCSTRING_DELIMITERS and any(collected):
                break
            rest = line[len(start) :]
            if end in rest:
                collected.append(_clean_block_line(rest.split(end, 1)[0]))
            else:
                collected.append(_clean_block_line(rest))
                block_end = end
            continue

        marker = next((m for m in markers if line.startswith(m)), None)
        if marker is None:
            break
        collected.append(line[len(marker) :].strip())

    return "\n".join(collected).strip("\n")
