"""Pattern compilation: turns a wildcard string into an immutable segment sequence."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from globber.errors import InvalidPatternError

__all__ = [
    "WILDCARD",
    "LiteralSegment",
    "WildcardSegment",
    "Segment",
    "PatternShape",
    "Pattern",
    "compile_pattern",
]

logger = logging.getLogger(__name__)

WILDCARD = "*"


@dataclass(frozen=True)
class LiteralSegment:
    """A non-empty run of characters that must appear verbatim."""

    kind: ClassVar[str] = "literal"

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("LiteralSegment text must be non-empty")


@dataclass(frozen=True)
class WildcardSegment:
    """Matches any run of zero or more characters."""

    kind: ClassVar[str] = "wildcard"


Segment = Union[LiteralSegment, WildcardSegment]

_WILDCARD_SEGMENT = WildcardSegment()


class PatternShape(enum.Enum):
    """Classification of a compiled pattern, used to pick a matching fast path.

    Attributes:
        ANY: Only wildcards, e.g. ``*``.
        EXACT: No wildcards at all, including the empty pattern.
        PREFIX: ``lit*``.
        SUFFIX: ``*lit``.
        PREFIX_SUFFIX: ``lit*lit``.
        MULTIPART: Everything else; handled by the general matcher.
    """

    ANY = "any"
    EXACT = "exact"
    PREFIX = "prefix"
    SUFFIX = "suffix"
    PREFIX_SUFFIX = "prefix_suffix"
    MULTIPART = "multipart"


@dataclass(frozen=True)
class Pattern:
    """A compiled wildcard pattern.

    Immutable, so a single instance can be shared between threads and
    reused for any number of candidates. Everything the matcher derives
    from the segments is computed once, on construction.

    Attributes:
        source: The pattern string the instance was compiled from.
        segments: Literal runs and wildcards in pattern order. Adjacent
            wildcards are collapsed into one.
        case_sensitive: Match mode used when a match call does not
            override it.
    """

    source: str
    segments: tuple[Segment, ...]
    case_sensitive: bool = True
    _literals: tuple[str, ...] = field(init=False, repr=False, compare=False)
    _upper_literals: tuple[str, ...] = field(init=False, repr=False, compare=False)
    _shape: PatternShape = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        literals = tuple(
            s.text for s in self.segments if isinstance(s, LiteralSegment)
        )
        object.__setattr__(self, "_literals", literals)
        object.__setattr__(
            self, "_upper_literals", tuple(text.upper() for text in literals)
        )
        object.__setattr__(self, "_shape", _classify(self.segments))

    def __str__(self) -> str:
        return self.source

    @property
    def literals(self) -> tuple[str, ...]:
        """Literal texts in order; joined they give the source without wildcards."""
        return self._literals

    @property
    def upper_literals(self) -> tuple[str, ...]:
        """literals upper-cased, as compared in case-insensitive mode."""
        return self._upper_literals

    @property
    def has_wildcards(self) -> bool:
        return self._shape is not PatternShape.EXACT

    @property
    def shape(self) -> PatternShape:
        return self._shape


def _classify(segments: tuple[Segment, ...]) -> PatternShape:
    wild = [isinstance(s, WildcardSegment) for s in segments]
    if not any(wild):
        return PatternShape.EXACT
    if all(wild):
        return PatternShape.ANY
    if len(wild) == 2:
        return PatternShape.PREFIX if wild[1] else PatternShape.SUFFIX
    if wild == [False, True, False]:
        return PatternShape.PREFIX_SUFFIX
    return PatternShape.MULTIPART


def compile_pattern(
    pattern: Any,
    *,
    case_sensitive: bool = True,
    strict: bool = False,
) -> Pattern:
    """Compile a wildcard pattern string.

    ``*`` matches zero or more characters; every other character,
    including ``?``, is literal. The empty pattern matches only the empty
    string and a pattern made only of ``*`` matches everything.

    Args:
        pattern: The pattern string.
        case_sensitive: Match mode stored on the compiled pattern.
        strict: Reject runs of consecutive wildcards instead of
            collapsing them.

    Returns:
        The compiled Pattern.

    Raises:
        InvalidPatternError: If pattern is not a string, or strict is set
            and the pattern contains ``**``.
    """
    if not isinstance(pattern, str):
        raise InvalidPatternError(
            pattern, f"expected str, got {type(pattern).__name__}"
        )

    segments: list[Segment] = []
    run_start = 0
    i = 0
    end = len(pattern)
    while i < end:
        if pattern[i] != WILDCARD:
            i += 1
            continue
        if i > run_start:
            segments.append(LiteralSegment(pattern[run_start:i]))
        star = i
        while i < end and pattern[i] == WILDCARD:
            i += 1
        if strict and i - star > 1:
            raise InvalidPatternError(
                pattern, "consecutive wildcards", position=star + 1
            )
        segments.append(_WILDCARD_SEGMENT)
        run_start = i
    if run_start < end:
        segments.append(LiteralSegment(pattern[run_start:]))

    compiled = Pattern(
        source=pattern, segments=tuple(segments), case_sensitive=case_sensitive
    )
    logger.debug(
        "Compiled pattern %r: shape=%s segments=%d case_sensitive=%s",
        pattern,
        compiled.shape.value,
        len(compiled.segments),
        case_sensitive,
    )
    return compiled
