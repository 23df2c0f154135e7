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
from datetime import datetime

from headstamp.constants import OWNER_PLACEHOLDER, YEAR_PLACEHOLDER
from headstamp.core.catalog.license_catalog import LicenseCatalog, LicenseIdentifier
from headstamp.core.exceptions import ValidationError

_PLACEHOLDER_RE = re.compile(
    re.escape(OWNER_PLACEHOLDER) + "|" + re.escape(YEAR_PLACEHOLDER)
)

# blank lines left behind a removed header, right before a package/module declaration
_DECLARATION_GAP_RE = re.compile(
    r"\A(?:[ \t]*\r?\n){2,}(?=[ \t]*(?:package|module|namespace|library|unit|program)\b)"
)


def validate_comment_style(comment_style: str) -> str:
    if comment_style is None or not comment_style.strip():
        raise ValidationError(
            "Comment style must not be empty",
            "Pass the end-of-line comment marker of the target files, e.g. '//' or '#'",
        )
    return comment_style


class HeaderEngine:
    """
    Renders license headers and inserts or strips them from file contents.

    All methods are pure string transforms; file access lives in
    ``headstamp.core.transform.source_file``.
    """

    def __init__(self, catalog: LicenseCatalog, year: int | None = None):
        self.catalog = catalog
        self.year = year

    def current_year(self) -> str:
        return str(self.year if self.year is not None else datetime.now().year)

    def substitute(self, template: str, owner: str) -> str:
        values = {OWNER_PLACEHOLDER: owner, YEAR_PLACEHOLDER: self.current_year()}
        return _PLACEHOLDER_RE.sub(lambda m: values[m.group(0)], template)

    def comment_block(self, text: str, comment_style: str) -> str:
        validate_comment_style(comment_style)
        return "".join(
            (comment_style + " " + line).strip() + "\n" for line in text.splitlines()
        )

    def build_header(
        self, license: LicenseIdentifier, owner: str, comment_style: str
    ) -> str:
        definition = self.catalog.lookup(license)

        blocks = []
        if definition.copyright_template is not None:
            blocks.append(
                self.comment_block(
                    self.substitute(definition.copyright_template, owner),
                    comment_style,
                )
            )
        if definition.header_template is not None:
            blocks.append(
                self.comment_block(
                    self.substitute(definition.header_template, owner), comment_style
                )
            )

        if not blocks:
            return ""
        return "\n".join(blocks) + "\n"

    def insert(
        self,
        content: str,
        license: LicenseIdentifier,
        owner: str,
        comment_style: str,
    ) -> str:
        """
        Prepend the rendered copyright and header blocks to ``content``.

        Calling this twice duplicates the header; callers check first.
        """
        header = self.build_header(license, owner, comment_style)
        if not header:
            return content
        return header + content

    def remove(
        self, content: str, license: LicenseIdentifier, comment_style: str
    ) -> str:
        """
        Strip a header previously added by :meth:`insert`.

        Copyright lines are matched by prefix so that owner and year drift is
        tolerated; the header block itself must still be present verbatim.
        Licenses without a header template leave ``content`` untouched.
        """
        validate_comment_style(comment_style)
        header_template = self.catalog.header_template(license)
        if header_template is None:
            return content

        stripped = self._strip_copyright_lines(content, comment_style)

        block = self.comment_block(header_template, comment_style)
        if block + "\n" in stripped:
            return stripped.replace(block + "\n", "")

        if block not in stripped:
            return stripped

        parts = stripped.split(block)
        return parts[0] + "".join(
            _DECLARATION_GAP_RE.sub("\n", part) for part in parts[1:]
        )

    def _strip_copyright_lines(self, content: str, comment_style: str) -> str:
        prefix = comment_style + " Copyright"

        kept = []
        skip_blank = False
        # the separator blank line is only dropped inside the leading comment run
        in_leading_comments = True
        for line in content.splitlines(keepends=True):
            if line.startswith(prefix):
                skip_blank = in_leading_comments
                continue
            if skip_blank and not line.strip():
                skip_blank = False
                continue
            skip_blank = False
            if line.strip() and not line.startswith(comment_style):
                in_leading_comments = False
            kept.append(line)

        return "".join(kept)

    def render_license(self, license: LicenseIdentifier, owner: str) -> str:
        """Full license text with the copyright notice on top, as used by ``dump``."""
        full_text = self.substitute(self.catalog.full_text(license), owner)

        copyright_template = self.catalog.copyright_template(license)
        if copyright_template is None:
            return full_text
        return self.substitute(copyright_template, owner) + "\n\n" + full_text
