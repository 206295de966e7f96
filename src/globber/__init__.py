"""globber - wildcard pattern matching for strings."""

from __future__ import annotations

# Compilation
from globber.pattern import (
    LiteralSegment,
    Pattern,
    PatternShape,
    WildcardSegment,
    compile_pattern,
)

# Matching
from globber.matcher import (
    glob_match,
    is_match,
    match,
    match_insensitive,
    match_sensitive,
)

# Config
from globber.config import Config, MatchSettings

# Errors
from globber.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    GlobberError,
    InvalidPatternError,
)

__version__ = "0.1.0"

__all__ = [
    # Compilation
    "compile_pattern",
    "Pattern",
    "PatternShape",
    "LiteralSegment",
    "WildcardSegment",
    # Matching
    "is_match",
    "match",
    "match_sensitive",
    "match_insensitive",
    "glob_match",
    # Config
    "Config",
    "MatchSettings",
    # Errors
    "ErrorCodes",
    "GlobberError",
    "InvalidPatternError",
    "ConfigError",
    "ConfigNotFoundError",
]
