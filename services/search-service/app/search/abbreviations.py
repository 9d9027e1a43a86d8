"""
Subject abbreviations used by the fuzzy matcher.

Maps the short forms people type into a search box ("maths", "bio", "s4")
to the full forms that appear in catalog listings. The table is read-only
for the lifetime of the process.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Tuple, Union

from ..domain.exceptions import ValidationException

# "math" and "maths" list each other on purpose: reverse lookups depend on it
ABBREVIATIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "maths": ("math", "mathematics"),
        "math": ("maths", "mathematics"),
        "sci": ("science",),
        "eng": ("english",),
        "bio": ("biology",),
        "chem": ("chemistry",),
        "phys": ("physics",),
        "lit": ("literature",),
        "hist": ("history",),
        "geo": ("geography",),
        "s1": ("senior 1",),
        "s2": ("senior 2",),
        "s3": ("senior 3",),
        "s4": ("senior 4",),
        "s5": ("senior 5",),
        "s6": ("senior 6",),
    }
)


def freeze_abbreviations(
    table: Mapping[str, Union[str, Iterable[str]]],
) -> Mapping[str, Tuple[str, ...]]:
    """
    Build a read-only, lowercased copy of an abbreviation table.

    A single string value is one expansion, not a sequence of characters.

    Args:
        table: Mapping of abbreviation -> expansion or iterable of expansions

    Returns:
        Read-only mapping with lowercase keys and tuple values

    Raises:
        ValidationException: If a key is blank, or an entry has no expansions
                             or a blank expansion
    """
    frozen = {}
    for key, expansions in table.items():
        abbreviation = key.lower().strip()
        if not abbreviation:
            raise ValidationException("abbreviation", key, "must not be blank")

        if isinstance(expansions, str):
            expansions = (expansions,)
        normalized = tuple(expansion.lower().strip() for expansion in expansions)
        if not normalized:
            raise ValidationException(
                abbreviation, expansions, "needs at least one expansion"
            )
        if not all(normalized):
            raise ValidationException(
                abbreviation, expansions, "expansions must not be blank"
            )

        frozen[abbreviation] = normalized

    return MappingProxyType(frozen)
