"""Splitting of seed-data scripts into batch fragments."""
from typing import List

from ..config import SEED_SEPARATOR


def split_seed_script(text: str, separator: str = SEED_SEPARATOR) -> List[str]:
    """
    Split a seed script into statement fragments on a literal separator.

    The split is naive: a separator inside a string literal or a comment also
    ends a fragment. Fragments that are empty or only whitespace are dropped.

    Args:
        text (str): The seed script, typically with its newlines already removed.
        separator (str): Statement separator, ';' by default.

    Returns:
        List[str]: The non-empty fragments, in script order.
    """
    return [fragment for fragment in text.split(separator) if fragment.strip()]
