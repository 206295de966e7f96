"""Tests for the globber public API surface.

Verifies that all expected names are importable from the top-level
``globber`` package and that ``__all__`` is comprehensive.
"""

import re

import globber


class TestPublicAPIImports:
    """Every public component must be importable from ``import globber``."""

    def test_compile_pattern_importable(self):
        from globber import compile_pattern

        assert callable(compile_pattern)

    def test_match_functions_importable(self):
        from globber import glob_match, is_match, match, match_insensitive, match_sensitive

        for fn in (glob_match, is_match, match, match_insensitive, match_sensitive):
            assert callable(fn)

    def test_types_importable(self):
        from globber import LiteralSegment, Pattern, PatternShape, WildcardSegment

        assert Pattern is not None
        assert PatternShape.ANY is not None
        assert LiteralSegment is not None
        assert WildcardSegment is not None

    def test_errors_importable(self):
        from globber import (
            ConfigError,
            ConfigNotFoundError,
            ErrorCodes,
            GlobberError,
            InvalidPatternError,
        )

        assert issubclass(InvalidPatternError, GlobberError)
        assert issubclass(ConfigError, GlobberError)
        assert issubclass(ConfigNotFoundError, GlobberError)
        assert ErrorCodes.INVALID_PATTERN == "INVALID_PATTERN"

    def test_config_importable(self):
        from globber import Config, MatchSettings

        assert Config is not None
        assert MatchSettings is not None


class TestAll:
    """``__all__`` lists exactly what the package exposes."""

    def test_all_names_resolve(self):
        for name in globber.__all__:
            assert hasattr(globber, name), name

    def test_no_duplicates(self):
        assert len(globber.__all__) == len(set(globber.__all__))

    def test_version(self):
        assert re.fullmatch(r"\d+\.\d+\.\d+", globber.__version__)
