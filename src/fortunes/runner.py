"""Pipeline glue: collect, parse, then search or select."""

from __future__ import annotations

import logging
import random
import sys
from typing import Optional, TextIO

from fortunes.config import FortuneConfig
from fortunes.index.search import filter_fortunes, iter_source_changes
from fortunes.index.selector import pick_fortune
from fortunes.ingestion.parser import DELIMITER, read_fortunes
from fortunes.utils.files import collect_paths

LOGGER = logging.getLogger(__name__)

NO_FORTUNES = "No fortunes found"


def run(
    config: FortuneConfig,
    *,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    rng: Optional[random.Random] = None,
) -> None:
    """Execute one invocation and write its output.

    Raises DiscoveryError when a source path cannot be inspected.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    paths = collect_paths(config.sources)
    corpus = read_fortunes(paths)

    if config.pattern is not None:
        matches = filter_fortunes(corpus, config.pattern)
        for fortune, new_source in iter_source_changes(matches):
            if new_source:
                err.write(f"({fortune.source})\n{DELIMITER}\n")
            out.write(f"{fortune.text}\n{DELIMITER}\n")
        return

    fortune = pick_fortune(corpus, config.seed, rng=rng)
    if fortune is None:
        LOGGER.debug("Corpus is empty")
    out.write(f"{fortune.text if fortune is not None else NO_FORTUNES}\n")
