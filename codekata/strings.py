"""String puzzles: substrings, palindromes, word order, appeal and numbers."""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_DIGIT_RUN = re.compile(r"[0-9]+")


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def _expand(s: str, left: int, right: int) -> str:
    best = ""
    while left >= 0 and right < len(s) and s[left] == s[right]:
        best = s[left : right + 1]
        left -= 1
        right += 1
    return best


def longest_palindrome(s: str) -> str:
    """The first longest palindromic substring, grown around each centre."""
    result = ""
    for centre in range(len(s)):
        for candidate in (_expand(s, centre, centre), _expand(s, centre, centre + 1)):
            if len(candidate) > len(result):
                result = candidate
    return result


def remove_digit(number: str, digit: str) -> str:
    """Drop one occurrence of ``digit`` so the rest compares greatest; ``""`` if absent."""
    return max(
        (number[:i] + number[i + 1 :] for i, char in enumerate(number) if char == digit),
        default="",
    )


def reverse_words(s: str) -> str:
    """Reverse word order, keeping one space after each word that was followed by one.

    A space at the very start or end of ``s`` is ignored, so trailing runs
    of spaces can leave a single leading space in the result.
    """
    tokens: list[str] = []
    word: list[str] = []
    last = len(s) - 1
    for index, char in enumerate(s):
        if char != " ":
            word.append(char)
        elif index in (0, last):
            continue
        elif s[index - 1] != " ":
            tokens.extend(("".join(word), " "))
            word = []
    tokens.append("".join(word))
    return "".join(reversed(tokens))


def reverse_words_compact(s: str) -> str:
    """Reverse word order, joined by single spaces with no padding."""
    return " ".join(reversed(s.split(" ")[::1] and [w for w in s.split(" ") if w]))


def is_palindrome(s: str) -> bool:
    """Whether the ASCII letters and digits read the same both ways, ignoring case."""
    cleaned = _NON_ALNUM.sub("", s).lower()
    return cleaned == cleaned[::-1]


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_palindrome_two_pointer(s: str) -> bool:
    """Palindrome check that skips non-alphanumerics with two pointers."""
    left, right = 0, len(s) - 1
    while left < right:
        if not _is_ascii_alnum(s[left]):
            left += 1
        elif not _is_ascii_alnum(s[right]):
            right -= 1
        elif s[left].lower() != s[right].lower():
            return False
        else:
            left += 1
            right -= 1
    return True


def appeal_sum(s: str) -> int:
    """Sum over all substrings of the number of distinct characters (brute force)."""
    return sum(
        len(set(s[start:end]))
        for start in range(len(s))
        for end in range(start + 1, len(s) + 1)
    )


def appeal_sum_fast(s: str) -> int:
    """Sum of substring appeals, from each character's last position."""
    last: dict[str, int] = {}
    total = 0
    for position, char in enumerate(s, start=1):
        last[char] = position
        total += sum(last.values())
    return total


def extract_number(sentence: str) -> int:
    """The largest number in ``sentence`` that has no digit 9, or -1."""
    candidates = (int(run) for run in _DIGIT_RUN.findall(sentence) if "9" not in run)
    return max(candidates, default=-1)