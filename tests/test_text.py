import pytest

from katas.text import (
    abbrev_name,
    create_phone_number,
    dna_strand,
    first_non_repeating,
    high,
    high_and_low,
    spin_words,
    split_strings,
    stock_list,
    to_weird_case,
    wave,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Sam Harris", "S.H"),
        ("Patrick Feenan", "P.F"),
        ("Evan Cole", "E.C"),
        ("P Favuzzi", "P.F"),
        ("David Mendieta", "D.M"),
        ("sam harris", "S.H"),
    ],
)
def test_abbrev_name(name, expected):
    assert abbrev_name(name) == expected


def test_abbrev_name_empty():
    with pytest.raises(ValueError):
        abbrev_name("   ")


@pytest.mark.parametrize(
    "dna, expected",
    [("AAAA", "TTTT"), ("ATTGC", "TAACG"), ("GTAT", "CATA")],
)
def test_dna_strand(dna, expected):
    assert dna_strand(dna) == expected


def test_dna_strand_round_trip():
    assert dna_strand(dna_strand("GATTACA")) == "GATTACA"


def test_create_phone_number_layout():
    result = create_phone_number([1, 2, 3, 4, 5, 6, 7, 8, 9, 0])
    assert len(result) == 14
    assert result[0] == "("
    assert result[4:6] == ") "
    assert result[9] == "-"
    assert "".join(ch for ch in result if ch.isdigit()) == "1234567890"


def test_create_phone_number_wrong_length():
    with pytest.raises(ValueError):
        create_phone_number([1, 2, 3])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a", "a"),
        ("stress", "t"),
        ("moonmen", "e"),
        ("", ""),
        ("abba", ""),
        ("aa", ""),
        ("~><#~><", "#"),
        ("hello world, eh?", "w"),
        ("sTreSS", "T"),
        ("Go hang a salami, I'm a lasagna hog!", ","),
    ],
)
def test_first_non_repeating(text, expected):
    assert first_non_repeating(text) == expected


ARTICLES = ["ABAR 200", "CDXE 500", "BKWR 250", "BTSQ 890", "DRTY 600"]


@pytest.mark.parametrize(
    "articles, categories, expected",
    [
        (
            ["BBAR 150", "CDXE 515", "BKWR 250", "BTSQ 890", "DRTY 600"],
            ["A", "B", "C", "D"],
            "(A : 0) - (B : 1290) - (C : 515) - (D : 600)",
        ),
        (ARTICLES, ["A", "B"], "(A : 200) - (B : 1140)"),
        ([], ["A", "B"], ""),
        (None, ["A", "B"], ""),
        (ARTICLES, [], ""),
        (ARTICLES, None, ""),
    ],
)
def test_stock_list(articles, categories, expected):
    assert stock_list(articles, categories) == expected


@pytest.mark.parametrize(
    "numbers, expected",
    [("8 3 -5 42 -1 0 0 -9 4 7 4 -4", "42 -9"), ("42", "42 42")],
)
def test_high_and_low(numbers, expected):
    assert high_and_low(numbers) == expected


def test_high_and_low_empty():
    with pytest.raises(ValueError):
        high_and_low("")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("man i need a taxi up to ubud", "taxi"),
        ("what time are we climbing up the volcano", "volcano"),
        ("take me to semynak", "semynak"),
        ("aa b", "aa"),
    ],
)
def test_high(text, expected):
    assert high(text) == expected


@pytest.mark.parametrize(
    "words, expected",
    [
        (" x yz", [" X yz", " x Yz", " x yZ"]),
        ("abc", ["Abc", "aBc", "abC"]),
        (" ab  c", [" Ab  c", " aB  c", " ab  C"]),
        ("", []),
        ("z", ["Z"]),
        ("a a a a a", ["A a a a a", "a A a a a", "a a A a a", "a a a A a", "a a a a A"]),
        ("aaaaa", ["Aaaaa", "aAaaa", "aaAaa", "aaaAa", "aaaaA"]),
        (" " * 59, []),
    ],
)
def test_wave(words, expected):
    assert wave(words) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("abc", ["ab", "c_"]), ("abcdef", ["ab", "cd", "ef"]), ("", [])],
)
def test_split_strings(text, expected):
    assert split_strings(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Welcome", "emocleW"),
        ("to", "to"),
        ("CodeWars", "sraWedoC"),
        ("Hey fellow warriors", "Hey wollef sroirraw"),
    ],
)
def test_spin_words(text, expected):
    assert spin_words(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("abc def", "AbC DeF"),
        ("ABC", "AbC"),
        ("This is a test Looks like you passed", "ThIs Is A TeSt LoOkS LiKe YoU PaSsEd"),
    ],
)
def test_to_weird_case(text, expected):
    assert to_weird_case(text) == expected