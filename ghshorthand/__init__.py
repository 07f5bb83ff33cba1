"""Resolve terse GitHub shorthand into repositories, issues, paths and queries."""

from .parser import Matcher, parse
from .types import EMPTY_RESULT, MatcherOptions, Result

__all__ = ["EMPTY_RESULT", "Matcher", "MatcherOptions", "Result", "parse"]
