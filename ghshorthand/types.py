"""Core dataclasses for match results, matcher options and launcher items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Result:
    """Outcome of matching one input string.

    Every field unset means no match. ``repository`` is always in
    ``owner/name`` form.
    """

    repository: Optional[str] = None
    repository_shorthand: Optional[str] = None
    user: Optional[str] = None
    user_shorthand: Optional[str] = None
    issue: Optional[str] = None
    path: Optional[str] = None
    query: Optional[str] = None

    @property
    def owner(self) -> Optional[str]:
        if not self.repository:
            return None
        return self.repository.split("/", 1)[0]

    @property
    def name(self) -> Optional[str]:
        if not self.repository or "/" not in self.repository:
            return None
        return self.repository.split("/", 1)[1]

    def is_empty(self) -> bool:
        return self == EMPTY_RESULT

    def __bool__(self) -> bool:
        return not self.is_empty()


EMPTY_RESULT = Result()


@dataclass(frozen=True, slots=True)
class MatcherOptions:
    """Which token kinds a matcher attempts to recognize."""

    repo: bool = False
    user: bool = False
    require_repo: bool = False
    issue: bool = False
    path: bool = False
    query: bool = False
    ignore_numeric_user: bool = False
    expand_user_shorthand: bool = False

    def __post_init__(self) -> None:
        if self.require_repo and not self.repo:
            object.__setattr__(self, "repo", True)

    @classmethod
    def simple(cls, bare_user: bool, ignore_numeric: bool) -> "MatcherOptions":
        """Repository/user resolution with everything else left as the query."""
        return cls(
            repo=True,
            user=bare_user,
            query=True,
            ignore_numeric_user=ignore_numeric,
            expand_user_shorthand=True,
        )


@dataclass(slots=True)
class Item:
    """A single launcher entry in the Alfred script filter format."""

    uid: str
    title: str
    arg: str
    valid: bool = True
    subtitle: Optional[str] = None
    autocomplete: Optional[str] = None
