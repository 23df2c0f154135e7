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
Fuzzy license classification of a file's leading comment block.

Texts are reduced to lowercase alphanumeric token sequences with the
copyright notice and template placeholders removed, then compared with
``difflib.SequenceMatcher`` against every license's header template and
full text. An ``SPDX-License-Identifier`` tag short-circuits the comparison.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from difflib import SequenceMatcher

from loguru import logger

from headstamp.constants import DEFAULT_AMBIGUITY_MARGIN, DEFAULT_DETECTION_THRESHOLD
from headstamp.core.catalog.license_catalog import LicenseCatalog, LicenseIdentifier
from headstamp.core.detect.comment_block import extract_leading_comment
from headstamp.core.exceptions import ConfigurationError

_COPYRIGHT_LINE_RE = re.compile(
    r"^[\s\W]*(?:copyright|\(c\)|©).*?(?:\b\d{4}\b|@@year@@)", re.IGNORECASE
)
_PLACEHOLDER_RE = re.compile(r"@@\w+@@")
_TOKEN_RE = re.compile(r"[a-z0-9]+")
_SPDX_RE = re.compile(r"SPDX-License-Identifier:\s*\(?\s*([A-Za-z0-9.+-]+)")

# url fragments carry no license signal and vary between copies
_NOISE_TOKENS = frozenset({"http", "https", "www"})


@dataclass(frozen=True)
class _Reference:
    identifier: LicenseIdentifier
    tokens: tuple[str, ...]


def normalize(text: str) -> list[str]:
    lines = [line for line in text.splitlines() if not _COPYRIGHT_LINE_RE.match(line)]
    body = _PLACEHOLDER_RE.sub(" ", "\n".join(lines)).lower()
    return [token for token in _TOKEN_RE.findall(body) if token not in _NOISE_TOKENS]


def _similarity(tokens: list[str], reference: tuple[str, ...], threshold: float) -> float:
    la, lb = len(tokens), len(reference)
    if not la or not lb:
        return 0.0
    # upper bound of the ratio from lengths alone
    if 2.0 * min(la, lb) / (la + lb) < threshold:
        return 0.0

    matcher = SequenceMatcher(None, tokens, reference, autojunk=False)
    if matcher.quick_ratio() < threshold:
        return 0.0
    return matcher.ratio()


class LicenseDetector:
    """
    Classifies license text against a catalog.

    Reference texts are normalized once here; classification itself keeps no
    state, so one detector can be shared by every worker thread.
    """

    def __init__(
        self,
        catalog: LicenseCatalog,
        threshold: float = DEFAULT_DETECTION_THRESHOLD,
        ambiguity_margin: float = DEFAULT_AMBIGUITY_MARGIN,
    ):
        if not 0.0 <= threshold <= 1.0:
            raise ConfigurationError(
                f"Detection threshold must be between 0 and 1, got {threshold}"
            )
        if ambiguity_margin < 0.0:
            raise ConfigurationError(
                f"Ambiguity margin must not be negative, got {ambiguity_margin}"
            )

        self.catalog = catalog
        self.threshold = threshold
        self.ambiguity_margin = ambiguity_margin
        self._references = self._build_references(catalog)

    @staticmethod
    def _build_references(catalog: LicenseCatalog) -> list[_Reference]:
        references = []
        for definition in catalog.definitions():
            for text in (definition.header_template, definition.full_text):
                if text is None:
                    continue
                tokens = tuple(normalize(text))
                if tokens:
                    references.append(_Reference(definition.identifier, tokens))
        return references

    def normalize(self, text: str) -> list[str]:
        return normalize(text)

    def scores(self, text: str) -> dict[LicenseIdentifier, float]:
        """Best similarity of ``text`` to each catalog license, 0.0 when hopeless."""
        tokens = normalize(text)
        scores = {identifier: 0.0 for identifier in self.catalog.identifiers()}
        if not tokens:
            return scores

        for reference in self._references:
            score = _similarity(tokens, reference.tokens, self.threshold)
            if score > scores[reference.identifier]:
                scores[reference.identifier] = score
        return scores

    def _match_spdx(self, text: str) -> LicenseIdentifier | None:
        match = _SPDX_RE.search(text)
        if match is None:
            return None

        identifier = LicenseIdentifier.from_spdx(match.group(1))
        if identifier is None or identifier not in self.catalog:
            logger.debug(f"Ignoring SPDX tag outside the catalog: {match.group(1)}")
            return None
        return identifier

    def classify(self, text: str) -> LicenseIdentifier:
        """
        Return the license ``text`` represents, or ``LicenseIdentifier.UNKNOWN``.

        Scores below the threshold, and a runner-up license within the
        ambiguity margin of the best score, both yield ``UNKNOWN``.
        """
        if not normalize(text):
            return LicenseIdentifier.UNKNOWN

        spdx_match = self._match_spdx(text)
        if spdx_match is not None:
            return spdx_match

        ranked = sorted(self.scores(text).items(), key=lambda kv: kv[1], reverse=True)
        if not ranked:
            return LicenseIdentifier.UNKNOWN

        best_identifier, best_score = ranked[0]
        logger.debug(
            "Best license match: {identifier} score={score:.3f}",
            identifier=best_identifier.value,
            score=best_score,
        )

        if best_score < self.threshold:
            return LicenseIdentifier.UNKNOWN

        if len(ranked) > 1 and ranked[1][1] >= best_score - self.ambiguity_margin:
            logger.debug(
                f"Ambiguous match between {best_identifier.value} and {ranked[1][0].value}"
            )
            return LicenseIdentifier.UNKNOWN

        return best_identifier

    def classify_source(
        self, content: str, extra_markers: Iterable[str] = ()
    ) -> LicenseIdentifier:
        return self.classify(extract_leading_comment(content, extra_markers))
