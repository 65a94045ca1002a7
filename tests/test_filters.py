import io

from ngram_analyzer.filters import (
    ENGLISH_STOP_WORDS,
    ASCIIFoldingFilter,
    LowerCaseFilter,
    StandardFilter,
    StopFilter,
    fold_to_ascii,
)
from ngram_analyzer.tokenization import StandardTokenizer
from tests.utils import drain, word_source


def _tokenizer(text: str) -> StandardTokenizer:
    return StandardTokenizer(io.StringIO(text))


def test_standard_filter_strips_possessives_and_acronym_dots():
    stream = StandardFilter(_tokenizer("O'Reilly's FOX'S I.B.M. can't"))

    assert drain(stream) == [
        ("O'Reilly", 0, 10),
        ("FOX", 11, 16),
        ("IBM", 17, 23),
        ("can't", 24, 29),
    ]


def test_lowercase_filter_keeps_offsets():
    stream = LowerCaseFilter(_tokenizer("Mixed CASE"))

    assert drain(stream) == [("mixed", 0, 5), ("case", 6, 10)]


def test_ascii_folding_filter_folds_accents():
    stream = ASCIIFoldingFilter(_tokenizer("Café Straße plain"))

    assert drain(stream) == [("Cafe", 0, 4), ("Strasse", 5, 11), ("plain", 12, 17)]
    assert fold_to_ascii("naïve Ørsted") == "naive Orsted"


def test_stop_filter_removes_stop_words():
    stream = StopFilter(word_source("the", "cat", "is", "on", "mat"))

    assert [text for text, _, _ in drain(stream)] == ["cat", "mat"]
    assert "the" in ENGLISH_STOP_WORDS
    assert len(ENGLISH_STOP_WORDS) == 33


def test_stop_filter_case_handling():
    exact = StopFilter(word_source("The", "cat"))
    ignoring = StopFilter(word_source("The", "cat"), ignore_case=True)

    assert [text for text, _, _ in drain(exact)] == ["The", "cat"]
    assert [text for text, _, _ in drain(ignoring)] == ["cat"]


def test_filter_reset_propagates_to_upstream():
    stream = LowerCaseFilter(StopFilter(word_source("A", "Dog"), stop_words={"a"}))
    first = drain(stream)

    stream.reset()

    assert first == [("a", 0, 1), ("dog", 2, 5)]
    assert drain(stream) == first


def test_standard_filter_leaves_compound_tokens_alone():
    stream = StandardFilter(_tokenizer("AT&T bob@mail.com 3.14 www.example.com 中"))

    assert drain(stream) == [
        ("AT&T", 0, 4),
        ("bob@mail.com", 5, 17),
        ("3.14", 18, 22),
        ("www.example.com", 23, 38),
        ("中", 39, 40),
    ]
