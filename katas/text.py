"""String puzzles: names, DNA, waves, word scores and similar."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

_DNA_COMPLEMENT = str.maketrans("ATCG", "TAGC")


def abbrev_name(name: str) -> str:
    """Initials of the first and last word, upper-cased and joined by a dot."""
    words = name.upper().split()
    if not words:
        raise ValueError("name must contain at least one word")
    return f"{words[0][0]}.{words[-1][0]}"


def dna_strand(dna: str) -> str:
    """Complementary DNA strand: A<->T and C<->G."""
    return dna.translate(_DNA_COMPLEMENT)


def create_phone_number(digits: Sequence[int]) -> str:
    """Format ten digits as a phone number."""
    if len(digits) != 10:
        raise ValueError(f"expected 10 digits, got {len(digits)}")
    d = [str(digit) for digit in digits]
    return f"({''.join(d[:3])}) {''.join(d[3:6])}-{''.join(d[6:])}"


def first_non_repeating(text: str) -> str:
    """First character occurring only once, ignoring case; empty if none."""
    if len(text) <= 1:
        return text
    counts = Counter(ch.lower() for ch in text)
    return next((ch for ch in text if counts[ch.lower()] == 1), "")


def _parse_quantity(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def stock_list(articles: Sequence[str] | None, categories: Sequence[str] | None) -> str:
    """Total stock per category letter, formatted as ``(A : n) - (B : m)``."""
    if not articles or not categories:
        return ""
    inventory: Counter[str] = Counter()
    for article in articles:
        code, quantity = article.split(" ")[:2]
        inventory[code[:1]] += _parse_quantity(quantity)
    return " - ".join(f"({letter} : {inventory[letter]})" for letter in categories)


def high_and_low(numbers: str) -> str:
    """Highest and lowest of space-separated integers, as ``"high low"``."""
    values = [int(part) for part in numbers.split()]
    if not values:
        raise ValueError("no numbers given")
    return f"{max(values)} {min(values)}"


def _word_score(word: str) -> int:
    return sum(ord(ch) - ord("a") + 1 for ch in word.lower())


def high(text: str) -> str:
    """Word with the highest letter score; the earliest wins a tie."""
    best_score = 0
    best_word = ""
    for word in text.split():
        score = _word_score(word)
        if score > best_score:
            best_score, best_word = score, word
    return best_word


def wave(words: str) -> list[str]:
    """Copies of ``words`` with each non-space character upper-cased in turn."""
    return [
        words[:i] + ch.upper() + words[i + 1:]
        for i, ch in enumerate(words)
        if not ch.isspace()
    ]


def split_strings(text: str) -> list[str]:
    """Split into pairs of characters, padding an odd length with ``_``."""
    if len(text) % 2:
        text += "_"
    return [text[i:i + 2] for i in range(0, len(text), 2)]


def spin_words(text: str) -> str:
    """Reverse every word of five or more characters."""
    return " ".join(word[::-1] if len(word) >= 5 else word for word in text.split())


def _weird_case_word(word: str) -> str:
    return "".join(ch.upper() if i % 2 == 0 else ch for i, ch in enumerate(word))


def to_weird_case(text: str) -> str:
    """Upper-case the even-indexed letters of each word, lower-case the rest."""
    return " ".join(_weird_case_word(word) for word in text.lower().split())