from __future__ import annotations
import logging
from typing import List, Sequence, Tuple

from .models import VerbRecord

logger = logging.getLogger(__name__)


def _same_verb(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def find_verbs(verbs: Sequence[VerbRecord], query: str | None) -> Tuple[List[VerbRecord], bool]:
    """Return the records whose verb equals `query` ignoring case, in dataset order.

    An empty query matches every record. Duplicates are all kept.
    """
    query = query or ""
    if not query:
        matches = list(verbs)
    else:
        matches = [v for v in verbs if _same_verb(v.verb, query)]
    logger.debug("Query %r matched %d of %d record(s)", query, len(matches), len(verbs))
    return matches, bool(matches)
