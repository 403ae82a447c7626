"""Search-narrowed view of the launch modes with a highlighted row."""

from __future__ import annotations

from typing import Sequence

from rapidfuzz import fuzz, process

from ms_core.selection import Choice

# WRatio score a mode needs to stay visible while searching
MATCH_CUTOFF = 50


def search_text(choice: Choice) -> str:
    return f"{choice.title} {choice.description}"


class ModeList:
    """Catalog indices visible for the current query, best match first.

    ``rows`` never holds filtered positions, only catalog indices, so the
    highlighted row can be reported to the controller as is.
    """

    def __init__(self, choices: Sequence[Choice]) -> None:
        self.choices = list(choices)
        self._haystack = [search_text(choice) for choice in self.choices]
        self.rows: list[int] = list(range(len(self.choices)))
        self.cursor = 0

    def narrow(self, query: str) -> None:
        """Show the modes matching ``query`` and highlight the best one."""
        query = query.strip()
        if query:
            matches = process.extract(
                query,
                self._haystack,
                scorer=fuzz.WRatio,
                limit=None,
                score_cutoff=MATCH_CUTOFF,
            )
            self.rows = [index for _, _, index in matches]
        else:
            self.rows = list(range(len(self.choices)))
        self.cursor = 0

    def move(self, delta: int) -> None:
        if self.rows:
            self.cursor = max(0, min(self.cursor + delta, len(self.rows) - 1))

    @property
    def highlighted(self) -> int | None:
        """Catalog index under the cursor; None when nothing matches."""
        if not self.rows:
            return None
        return self.rows[self.cursor]
