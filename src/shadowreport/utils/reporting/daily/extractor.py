# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Metadata extraction from test file paths and titles.

Test titles carry free-form bracketed tokens such as ``[C1234]``, ``[raptors]``
or ``[smoke]``. When a token could be read by several extractors the claim is
resolved by a fixed precedence: manual test id, then team, then category.
Anything else inside brackets is decoration and is discarded.
"""

import logging
import re
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

SPEC_SUFFIX_PATTERN = re.compile(r"\.(spec|cy|test)\.(ts|js|jsx|tsx)$")
BRACKET_TOKEN_PATTERN = re.compile(r"\[([^\]]+)\]")
MANUAL_TEST_ID_PATTERN = re.compile(r"[A-Za-z#-]*\d[^\]]*")
TRAILING_COMMAS_PATTERN = re.compile(r"(,\s*)+$")

TAG_MANUAL_TEST_ID = "manual_test_id"
TAG_TEAM = "team"
TAG_CATEGORY = "category"


class TokenMatcher(NamedTuple):
    """A tagged predicate claiming bracketed title tokens."""

    tag: str
    predicate: Callable[[str], bool]


def _validate_vocabulary(vocabulary: Sequence[str], name: str) -> None:
    if isinstance(vocabulary, str) or not isinstance(vocabulary, (list, tuple)):
        raise TypeError(f'The "{name}" argument must be a list of strings.')
    if not all(isinstance(item, str) for item in vocabulary):
        raise TypeError(f'The "{name}" argument must be a list of strings.')


def _validate_text(value: str, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f'The "{name}" argument must be a string.')


def bracket_tokens(title: str) -> List[str]:
    """Return the contents of every ``[...]`` token in the title, left to right."""
    _validate_text(title, "title")
    return BRACKET_TOKEN_PATTERN.findall(title)


def build_token_matchers(
    team_names: Sequence[str] = (), test_categories: Sequence[str] = ()
) -> Tuple[TokenMatcher, ...]:
    """
    Build the ordered matchers used to classify bracketed tokens.

    Args:
        team_names: Team vocabulary, compared case-insensitively
        test_categories: Category vocabulary, compared exactly

    Returns:
        Matchers in precedence order
    """
    _validate_vocabulary(team_names, "team_names")
    _validate_vocabulary(test_categories, "test_categories")

    teams = {name.lower() for name in team_names}
    categories = set(test_categories)

    return (
        TokenMatcher(TAG_MANUAL_TEST_ID, lambda token: MANUAL_TEST_ID_PATTERN.fullmatch(token) is not None),
        TokenMatcher(TAG_TEAM, lambda token: token.lower() in teams),
        TokenMatcher(TAG_CATEGORY, lambda token: token in categories),
    )


def classify_token(token: str, matchers: Sequence[TokenMatcher]) -> Optional[str]:
    """Return the tag of the first matcher claiming the token, or None for decoration."""
    for matcher in matchers:
        if matcher.predicate(token):
            return matcher.tag
    return None


def classify_title_tokens(title: str, config) -> List[Tuple[str, str]]:
    """
    Classify every bracketed token of a title.

    Args:
        title: Test title
        config: ReportConfig providing the team and category vocabularies

    Returns:
        ``(tag, token)`` pairs in title order, decoration tokens omitted
    """
    matchers = build_token_matchers(config.team_names, config.test_categories)
    classified = []
    for token in bracket_tokens(title):
        tag = classify_token(token, matchers)
        if tag is not None:
            classified.append((tag, token))
    return classified


def extract_area(path: str, excluded_vocabulary: Sequence[str]) -> str:
    """
    Extract the functional area from a test file path.

    The area is made of the path segments between the second segment and the
    file name, with any segment naming a test type removed.

    Args:
        path: Test file path, e.g. ``src/tests/unit/cart/shopping.spec.ts``
        excluded_vocabulary: Segments to drop, usually the test types

    Returns:
        Area joined with ``/``, possibly empty

    Raises:
        TypeError: If path is not a string or the vocabulary is not a list of strings
    """
    _validate_text(path, "path")
    _validate_vocabulary(excluded_vocabulary, "excluded_vocabulary")

    segments = path.split("/")[2:-1]
    return "/".join(segment for segment in segments if segment not in excluded_vocabulary)


def extract_spec(path: str) -> str:
    """
    Extract the spec name from a test file path.

    Raises:
        TypeError: If path is not a string
        ValueError: If the file name does not end with a known test suffix
    """
    _validate_text(path, "path")

    file_name = path.split("/")[-1]
    if not SPEC_SUFFIX_PATTERN.search(file_name):
        raise ValueError(
            f"Unexpected file name format '{file_name}'. It should end with .spec.ts, .cy.js, .test.jsx, etc."
        )
    return SPEC_SUFFIX_PATTERN.sub("", file_name)


def extract_type(path: str, available_types: Sequence[str]) -> str:
    """
    Extract every test type named as a whole word in the path.

    Returns:
        Matching types in vocabulary order joined by ``", "``, or an empty string
    """
    _validate_text(path, "path")
    _validate_vocabulary(available_types, "available_types")

    matching = [
        test_type for test_type in available_types if re.search(rf"\b{re.escape(test_type)}\b", path)
    ]
    return ", ".join(matching)


def extract_category(title: str, available_categories: Sequence[str], team_names: Sequence[str] = ()) -> str:
    """
    Extract the categories named in bracketed title tokens.

    Tokens claimed by the manual test id or team matchers are never reported
    as categories.

    Args:
        title: Test full title
        available_categories: Category vocabulary
        team_names: Team vocabulary taking precedence over categories

    Returns:
        Categories in title order joined by ``,``, or an empty string
    """
    matchers = build_token_matchers(team_names, available_categories)
    categories = [token for token in bracket_tokens(title) if classify_token(token, matchers) == TAG_CATEGORY]
    return ",".join(categories)


def extract_team(title: str, available_teams: Sequence[str]) -> str:
    """
    Extract the first team named in a bracketed title token.

    Matching is case-insensitive and the team is returned with the spelling
    used in the vocabulary.
    """
    matchers = build_token_matchers(available_teams)
    spellings = {name.lower(): name for name in reversed(list(available_teams))}

    for token in bracket_tokens(title):
        if classify_token(token, matchers) == TAG_TEAM:
            return spellings[token.lower()]
    return ""


def extract_manual_test_id(title: str) -> Optional[str]:
    """
    Extract the manual test case id, e.g. ``C1234`` or ``#42``, from a test title.

    Returns:
        The first bracketed token that looks like an id, or None
    """
    for token in bracket_tokens(title):
        if MANUAL_TEST_ID_PATTERN.fullmatch(token):
            return token
    return None


def extract_test_name(title: str) -> str:
    """
    Extract the readable test name by removing bracketed tokens and trailing commas.

    Raises:
        TypeError: If title is not a string
        ValueError: If nothing remains after removing the tokens
    """
    _validate_text(title, "title")

    test_name = BRACKET_TOKEN_PATTERN.sub("", title).strip()
    test_name = TRAILING_COMMAS_PATTERN.sub("", test_name).strip()
    if not test_name:
        raise ValueError(f"The test name is empty after processing title '{title}'.")
    return test_name
