from __future__ import annotations
import logging
from typing import List

from pydantic import ValidationError

from .errors import ParseFailure
from .models import VerbList, VerbRecord
from .sources import DatasetSource

logger = logging.getLogger(__name__)


def parse_verbs(raw: bytes) -> List[VerbRecord]:
    """Deserialize the JSON array of verbs; conjugation lines keep their stored order."""
    try:
        verbs = VerbList.validate_json(raw)
    except ValidationError as e:
        raise ParseFailure(e) from e
    logger.debug("Parsed %d verb record(s)", len(verbs))
    return verbs


def load_verbs(source: DatasetSource) -> List[VerbRecord]:
    """Read and parse the whole dataset. Raises ReadFailure or ParseFailure."""
    raw = source.read()
    logger.debug("Read %d byte(s) from %s", len(raw), source)
    return parse_verbs(raw)
