"""Shorthand matching for repository, user, issue, path and query input."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from .types import EMPTY_RESULT, MatcherOptions, Result

logger = logging.getLogger(__name__)

# (\A|\Z|\w) since \b needs a word character on the left
USER_REPO_PATTERN = re.compile(r"^([A-Za-z0-9][-A-Za-z0-9]*)/([\w.\-]*)(\A|\Z|\w)", re.ASCII)
USER_PATTERN = re.compile(r"^([A-Za-z0-9][-A-Za-z0-9]*)\b", re.ASCII)
ISSUE_PATTERN = re.compile(r"^ ?#?([1-9]\d*)$", re.ASCII)
PATH_PATTERN = re.compile(r"^ ?(/\S*)$", re.ASCII)


@dataclass(slots=True)
class _Cursor:
    text: str
    pos: int = 0

    @property
    def remaining(self) -> str:
        return self.text[self.pos:]

    def match(self, pattern: re.Pattern[str]) -> Optional[re.Match[str]]:
        found = pattern.match(self.remaining)
        if found:
            self.pos += found.end()
        return found

    def peek(self, pattern: re.Pattern[str]) -> Optional[re.Match[str]]:
        return pattern.match(self.remaining)

    def advance(self, length: int) -> None:
        self.pos += length

    def exhausted(self) -> bool:
        return self.pos >= len(self.text)


class Matcher:
    """Resolve shorthand input into a :class:`Result`.

    ``repo_map`` maps repository shorthand to ``owner/name`` and ``user_map``
    maps user shorthand to user names. Both are only read. ``default_repo`` is
    assigned when repository matching is enabled and nothing else resolved one.
    """

    def __init__(
        self,
        repo_map: Mapping[str, str],
        user_map: Mapping[str, str],
        default_repo: Optional[str] = None,
        options: MatcherOptions = MatcherOptions(),
    ) -> None:
        self.repo_map = repo_map
        self.user_map = user_map
        self.default_repo = default_repo or None
        self.options = options

    def match(self, text: str) -> Result:
        cursor = _Cursor(text)
        fields: dict[str, str] = {}
        opts = self.options

        if opts.repo:
            if not self._match_user_repo(cursor, fields):
                self._match_bare_token(cursor, fields)

            if "repository" not in fields and self.default_repo:
                if opts.user and "user" in fields:
                    if ISSUE_PATTERN.match(fields["user"]):
                        if not cursor.exhausted():
                            logger.debug(
                                "rejecting %r: numeric user %r followed by more input",
                                text,
                                fields["user"],
                            )
                            return EMPTY_RESULT
                        fields["issue"] = fields.pop("user")
                        fields.pop("user_shorthand", None)
                        fields["repository"] = self.default_repo
                else:
                    fields["repository"] = self.default_repo

        if opts.require_repo and "repository" not in fields:
            logger.debug("rejecting %r: no repository", text)
            return EMPTY_RESULT

        if opts.issue:
            found = cursor.match(ISSUE_PATTERN)
            if found:
                fields["issue"] = found.group(1)

        if opts.path:
            found = cursor.match(PATH_PATTERN)
            if found:
                fields["path"] = found.group(1)

        if opts.query:
            # only the first leading space, and all trailing spaces
            query = cursor.remaining.rstrip(" ").removeprefix(" ")
            if query:
                fields["query"] = query
        elif not cursor.exhausted():
            logger.debug("rejecting %r: leftover input %r", text, cursor.remaining)
            return EMPTY_RESULT

        return Result(**fields)

    def _match_user_repo(self, cursor: _Cursor, fields: dict[str, str]) -> bool:
        found = cursor.peek(USER_REPO_PATTERN)
        if not found:
            return False
        repository = found.group(0)
        owner, name = repository.split("/", 1)
        if not name:
            return False
        cursor.advance(found.end())
        if owner in self.user_map:
            fields["user"] = self.user_map[owner]
            fields["user_shorthand"] = owner
            repository = f"{fields['user']}/{name}"
        fields["repository"] = repository
        return True

    def _match_bare_token(self, cursor: _Cursor, fields: dict[str, str]) -> bool:
        found = cursor.peek(USER_PATTERN)
        if not found:
            return False
        token = found.group(1)
        opts = self.options

        if token in self.repo_map:
            fields["repository"] = self.repo_map[token]
            fields["repository_shorthand"] = token
        elif token in self.user_map and (opts.user or opts.expand_user_shorthand):
            fields["user"] = self.user_map[token]
            fields["user_shorthand"] = token
        elif opts.user and not (opts.ignore_numeric_user and ISSUE_PATTERN.match(token)):
            fields["user"] = token
        else:
            return False

        cursor.advance(found.end())
        return True


def parse(
    repo_map: Mapping[str, str],
    user_map: Mapping[str, str],
    text: str,
    bare_user: bool = True,
    ignore_numeric: bool = False,
) -> Result:
    """Extract a repository or user and treat everything after it as a query.

    ``bare_user`` allows an unknown token to be taken as a user name.
    ``ignore_numeric`` leaves an issue-shaped token for the query instead.
    """
    options = MatcherOptions.simple(bare_user, ignore_numeric)
    return Matcher(repo_map, user_map, None, options).match(text)
