"""Course name normalisation used to group tee times by course."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence, Tuple

PREFIX_STRATEGY = "prefix"
SEPARATOR_STRATEGY = "separator"
STRATEGIES = (PREFIX_STRATEGY, SEPARATOR_STRATEGY)

BACK_NINE_SUFFIX = " Back Nine"
NAME_SEPARATOR = " - "

# Courses whose listings carry a loop or sub-venue after the base name.
DEFAULT_COURSE_PREFIXES: Tuple[str, ...] = (
    # Denver
    "Kennedy",
    "Fox Hollow",
    "Homestead",
    "Harvard Gulch",
    "South Suburban",
    "Foothills",
    "Meadows",
    "Broken Tee",
    "Fossil Trace",
    "Bear Creek",
    "Riverdale",
    # Phoenix
    "McCormick Ranch",
    "TPC Scottsdale",
    "Verrado",
    "Grayhawk",
    "Coyote Lakes",
    "Granite Falls",
    "Wigwam",
    "Troon North",
    "Aguila",
    "Encanto",
    "AZ Biltmore",
    "We-Ko-Pa",
    "Talking Stick",
    "Whirlwind",
    "Wildfire",
    "Camelback",
    "Gold Canyon",
)


class CourseNameNormalizer(Protocol):
    """Maps a raw listing name to the canonical course it belongs to."""

    def normalize(self, raw_name: str) -> str:
        ...


class PrefixTableNormalizer:
    """Match against an ordered table of known course names.

    The first canonical name that prefixes the raw name wins. Names that match
    nothing lose a trailing back-nine qualifier and are otherwise kept.
    """

    def __init__(self, prefixes: Iterable[str] = DEFAULT_COURSE_PREFIXES):
        self._prefixes: Tuple[str, ...] = tuple(p for p in prefixes if p)

    @property
    def prefixes(self) -> Tuple[str, ...]:
        return self._prefixes

    def normalize(self, raw_name: str) -> str:
        name = raw_name or ""
        for prefix in self._prefixes:
            if name.startswith(prefix):
                return prefix
        while name.endswith(BACK_NINE_SUFFIX):
            name = name[: -len(BACK_NINE_SUFFIX)]
        return name


class SeparatorNormalizer:
    """Keep whatever precedes the first ``" - "`` separator."""

    def normalize(self, raw_name: str) -> str:
        name = raw_name or ""
        head, found, _ = name.partition(NAME_SEPARATOR)
        return head if found else name


def build_normalizer(
    strategy: str = PREFIX_STRATEGY,
    prefixes: Optional[Sequence[str]] = None,
) -> CourseNameNormalizer:
    """Construct the normaliser configured for this deployment."""
    key = (strategy or "").strip().lower()
    if key == PREFIX_STRATEGY:
        return PrefixTableNormalizer(prefixes if prefixes else DEFAULT_COURSE_PREFIXES)
    if key == SEPARATOR_STRATEGY:
        return SeparatorNormalizer()
    raise ValueError(f"Unknown course name strategy {strategy!r}; expected one of {', '.join(STRATEGIES)}")


DEFAULT_NORMALIZER: CourseNameNormalizer = PrefixTableNormalizer()
