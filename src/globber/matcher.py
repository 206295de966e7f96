"""Matching compiled wildcard patterns against candidate strings."""

from __future__ import annotations

from typing import Sequence

from globber.pattern import LiteralSegment, Pattern, PatternShape, compile_pattern

__all__ = [
    "is_match",
    "match",
    "match_sensitive",
    "match_insensitive",
    "glob_match",
]


def is_match(
    pattern: Pattern, candidate: str, case_sensitive: bool | None = None
) -> bool:
    """Return whether candidate matches a compiled pattern.

    Args:
        pattern: A pattern built by compile_pattern().
        candidate: The string to test.
        case_sensitive: Overrides the mode stored on the pattern when given.
            Insensitive matching upper-cases both sides before comparing.

    Returns:
        True if the whole candidate matches the whole pattern.
    """
    if not isinstance(candidate, str):
        raise TypeError(f"candidate must be str, got {type(candidate).__name__}")

    sensitive = pattern.case_sensitive if case_sensitive is None else case_sensitive
    if sensitive:
        literals = pattern.literals
    else:
        candidate = candidate.upper()
        literals = pattern.upper_literals

    shape = pattern.shape
    if shape is PatternShape.ANY:
        return True
    if shape is PatternShape.EXACT:
        return candidate == "".join(literals)
    if shape is PatternShape.PREFIX:
        return candidate.startswith(literals[0])
    if shape is PatternShape.SUFFIX:
        return candidate.endswith(literals[0])
    if shape is PatternShape.PREFIX_SUFFIX:
        head, tail = literals
        # head and tail must not share characters of the candidate
        return (
            len(candidate) >= len(head) + len(tail)
            and candidate.startswith(head)
            and candidate.endswith(tail)
        )

    folded = iter(literals)
    parts = [
        next(folded) if isinstance(segment, LiteralSegment) else None
        for segment in pattern.segments
    ]
    return _match_parts(parts, candidate)


def _match_parts(parts: Sequence[str | None], text: str) -> bool:
    """Walk literal parts (None for a wildcard) over text with one backtrack point.

    Only the most recent wildcard needs a checkpoint: anything an earlier
    wildcard could absorb, the later one can absorb as well. Each retry
    moves the checkpoint one character forward, so the loop is bounded by
    len(parts) * len(text) literal comparisons.
    """
    count = len(parts)
    end = len(text)
    index = 0
    pos = 0
    resume_index = -1
    resume_pos = 0

    while True:
        if index < count:
            part = parts[index]
            if part is None:
                index += 1
                if index == count:
                    return True
                resume_index = index
                resume_pos = pos
                continue
            if text.startswith(part, pos):
                pos += len(part)
                index += 1
                continue
        elif pos == end:
            return True

        if resume_index < 0 or resume_pos >= end:
            return False
        resume_pos += 1
        index = resume_index
        pos = resume_pos


def match(pattern: str, candidate: str, case_sensitive: bool = True) -> bool:
    """Compile pattern and match it against candidate in one step."""
    return is_match(
        compile_pattern(pattern, case_sensitive=case_sensitive), candidate
    )


def match_sensitive(pattern: str, candidate: str) -> bool:
    """Case-sensitive one-step match."""
    return match(pattern, candidate, case_sensitive=True)


def match_insensitive(pattern: str, candidate: str) -> bool:
    """Case-insensitive one-step match."""
    return match(pattern, candidate, case_sensitive=False)


def glob_match(pattern: str, candidate: str) -> bool:
    """Strict one-step match.

    Unlike match_sensitive(), a pattern with consecutive wildcards is
    refused instead of collapsed.

    Raises:
        InvalidPatternError: If the pattern does not compile in strict mode.
    """
    return is_match(compile_pattern(pattern, strict=True), candidate)
