from __future__ import annotations
from typing import List, Sequence

from .config import (
    DATASET_NAME,
    LABEL_GERMAN,
    LABEL_ITALIAN,
    LABEL_VERB,
    MSG_EMPTY_DATASET,
    MSG_FILTER_HINT,
    MSG_FOUND,
    MSG_FULL_LISTING,
    MSG_NOT_FOUND,
    SEPARATOR,
)
from .models import VerbRecord


def display_verb_info(verb: VerbRecord) -> None:
    """Print one record: verb, German lines, Italian lines, separator."""
    print(f"\n{LABEL_VERB} {verb.verb}")

    print(f"\n{LABEL_GERMAN}")
    for line in verb.german_forms:
        print(line)

    print(f"\n{LABEL_ITALIAN}")
    for line in verb.italian_forms:
        print(line)
    print(SEPARATOR)


def display_verbs(verbs: Sequence[VerbRecord]) -> None:
    for verb in verbs:
        display_verb_info(verb)


def summary_message(query: str, found: bool, total: int, name: str = DATASET_NAME) -> List[str]:
    """Pick the closing message lines for a search outcome."""
    if query and not found:
        return [MSG_NOT_FOUND.format(query=query, name=name)]
    if not query and not found and total == 0:
        return [MSG_EMPTY_DATASET.format(name=name)]
    if not query and found and total > 0:
        return [MSG_FULL_LISTING.format(name=name), MSG_FILTER_HINT]
    if query and found:
        return [MSG_FOUND.format(query=query)]
    # an empty query always matches every record of a non-empty dataset
    raise ValueError(f"inconsistent search result: query={query!r} found={found} total={total}")


def handle_output_messages(query: str, found: bool, total: int, name: str = DATASET_NAME) -> None:
    lines = summary_message(query, found, total, name)
    print("\n" + "\n".join(lines))
