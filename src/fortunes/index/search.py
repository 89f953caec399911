"""Pattern search over a parsed corpus."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from fortunes.models import Fortune


def filter_fortunes(corpus: Sequence[Fortune], pattern: re.Pattern[str]) -> Iterator[Fortune]:
    """Lazily yield fortunes whose text contains a match, in corpus order."""
    for fortune in corpus:
        if pattern.search(fortune.text):
            yield fortune


def iter_source_changes(fortunes: Iterable[Fortune]) -> Iterator[Tuple[Fortune, bool]]:
    """Pair each fortune with whether its source differs from the previous one."""
    previous: Optional[str] = None
    for fortune in fortunes:
        yield fortune, fortune.source != previous
        previous = fortune.source
