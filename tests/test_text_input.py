"""Tests for src/text_input.py."""

from src.text_input import SAMPLE_TEXT, word_count


def test_word_count_empty():
    assert word_count("") == 0


def test_word_count_two_words():
    assert word_count("hello world") == 2


def test_word_count_whitespace_only():
    assert word_count("   \n\t  ") == 0


def test_word_count_collapses_repeated_whitespace():
    assert word_count("  one\n\ntwo   three ") == 3


def test_sample_text_is_substantial():
    assert word_count(SAMPLE_TEXT) > 150
    assert SAMPLE_TEXT.startswith("Artificial intelligence (AI)")
