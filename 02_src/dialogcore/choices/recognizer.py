"""Matching user input against a list of choices."""

import re
from dataclasses import dataclass

from ..models import Choice, FoundChoice, ModelResult

_TOKEN_PATTERN = re.compile(r"\w+", re.UNICODE)

_ORDINALS = {
    "first": 1,
    "second": 2,
    "third": 3,
    "fourth": 4,
    "fifth": 5,
    "sixth": 6,
    "seventh": 7,
    "eighth": 8,
    "ninth": 9,
    "tenth": 10,
    "1st": 1,
    "2nd": 2,
    "3rd": 3,
}


@dataclass
class Token:
    """A word of the utterance; ``end`` is inclusive."""

    start: int
    end: int
    text: str
    normalized: str


@dataclass
class FindChoicesOptions:
    """Controls how choices are matched."""

    no_value: bool = False
    allow_partial_matches: bool = False
    max_token_distance: int = 2
    recognize_numbers: bool = True
    recognize_ordinals: bool = True
    locale: str | None = None


def tokenize(text: str | None) -> list[Token]:
    """Split text into lower-cased word tokens with character offsets."""
    if not text:
        return []
    return [
        Token(
            start=m.start(),
            end=m.end() - 1,
            text=m.group(0),
            normalized=m.group(0).lower(),
        )
        for m in _TOKEN_PATTERN.finditer(text)
    ]


@dataclass
class _Synonym:
    value: str
    index: int


def _synonyms(choices: list[Choice], opt: FindChoicesOptions) -> list[_Synonym]:
    synonyms = []
    for index, choice in enumerate(choices):
        if not opt.no_value:
            synonyms.append(_Synonym(choice.value, index))
        if choice.title:
            synonyms.append(_Synonym(choice.title, index))
        for synonym in choice.synonyms:
            synonyms.append(_Synonym(synonym, index))
    return synonyms


def _index_of_token(tokens: list[Token], token: Token, start_pos: int) -> int:
    for i in range(start_pos, len(tokens)):
        if tokens[i].normalized == token.normalized:
            return i
    return -1


def _match_value(
    source_tokens: list[Token],
    searched_tokens: list[Token],
    start_pos: int,
    opt: FindChoicesOptions,
) -> tuple[int, int, float] | None:
    """Match one synonym against the utterance tokens.

    Tokens must appear in order. The score multiplies completeness (share of
    synonym tokens found) by accuracy (penalty for tokens skipped between
    matches).
    """
    matched = 0
    total_deviation = 0
    start = -1
    end = -1
    for token in searched_tokens:
        pos = _index_of_token(source_tokens, token, start_pos)
        if pos < 0:
            continue
        distance = pos - start_pos if matched > 0 else 0
        if distance <= opt.max_token_distance:
            matched += 1
            total_deviation += distance
            start_pos = pos + 1
            if start < 0:
                start = pos
            end = pos

    if matched == 0:
        return None
    if matched != len(searched_tokens) and not opt.allow_partial_matches:
        return None

    completeness = matched / len(searched_tokens)
    accuracy = matched / (matched + total_deviation)
    return start, end, completeness * accuracy


def find_choices(
    utterance: str,
    choices: list[Choice],
    options: FindChoicesOptions | None = None,
) -> list[ModelResult]:
    """Find choices mentioned in an utterance, ordered by position."""
    opt = options or FindChoicesOptions()
    synonyms = _synonyms(choices, opt)
    trimmed = (utterance or "").strip()

    for synonym in synonyms:
        if synonym.value.strip().lower() == trimmed.lower() and trimmed:
            choice = choices[synonym.index]
            return [
                ModelResult(
                    text=trimmed,
                    start=0,
                    end=len(trimmed) - 1,
                    type_name="choice",
                    resolution=FoundChoice(
                        value=choice.value,
                        index=synonym.index,
                        score=1.0,
                        synonym=synonym.value,
                    ),
                )
            ]

    tokens = tokenize(utterance)
    candidates: list[tuple[int, int, float, _Synonym]] = []
    # Longest synonyms first so "dark blue" wins over "blue".
    for synonym in sorted(synonyms, key=lambda s: len(s.value), reverse=True):
        searched = tokenize(synonym.value.strip())
        if not searched:
            continue
        start_pos = 0
        while start_pos < len(tokens):
            match = _match_value(tokens, searched, start_pos, opt)
            if match is None:
                break
            candidates.append((*match, synonym))
            start_pos = match[1] + 1

    candidates.sort(key=lambda c: c[2], reverse=True)

    results: list[ModelResult] = []
    found_indexes: set[int] = set()
    used_tokens: set[int] = set()
    for start, end, score, synonym in candidates:
        span = set(range(start, end + 1))
        if synonym.index in found_indexes or span & used_tokens:
            continue
        found_indexes.add(synonym.index)
        used_tokens |= span

        char_start = tokens[start].start
        char_end = tokens[end].end
        results.append(
            ModelResult(
                text=utterance[char_start : char_end + 1],
                start=char_start,
                end=char_end,
                type_name="choice",
                resolution=FoundChoice(
                    value=choices[synonym.index].value,
                    index=synonym.index,
                    score=score,
                    synonym=synonym.value,
                ),
            )
        )

    results.sort(key=lambda r: r.start)
    return results


def _recognize_position(
    utterance: str, choices: list[Choice], opt: FindChoicesOptions
) -> list[ModelResult]:
    for token in tokenize(utterance):
        position = None
        if opt.recognize_numbers and token.normalized.isdigit():
            position = int(token.normalized)
        elif opt.recognize_ordinals and token.normalized in _ORDINALS:
            position = _ORDINALS[token.normalized]
        elif opt.recognize_ordinals and token.normalized == "last":
            position = len(choices)

        if position is not None and 1 <= position <= len(choices):
            index = position - 1
            return [
                ModelResult(
                    text=token.text,
                    start=token.start,
                    end=token.end,
                    type_name="choice",
                    resolution=FoundChoice(
                        value=choices[index].value,
                        index=index,
                        score=1.0,
                    ),
                )
            ]
    return []


def recognize_choices(
    utterance: str,
    choices: list[Choice | str],
    options: FindChoicesOptions | None = None,
) -> list[ModelResult]:
    """Recognize a choice by value or synonym, then by ordinal or index."""
    opt = options or FindChoicesOptions()
    choices = [Choice(value=c) if isinstance(c, str) else c for c in choices or []]

    matches = find_choices(utterance, choices, opt)
    if matches:
        return matches
    return _recognize_position(utterance, choices, opt)
