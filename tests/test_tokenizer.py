"""Tests for searchwords/tokenizer.py"""

from searchwords.tokenizer import STOP_WORDS, is_keyword, tokenize


class TestTokenize:
    def test_stop_word_and_duplicate_removed(self):
        assert tokenize("the rust guide guide") == ["rust", "guide"]

    def test_order_preserved(self):
        assert tokenize("zebra apple mango") == ["zebra", "apple", "mango"]

    def test_plus_is_a_separator(self):
        assert tokenize("open+source+tools") == ["open", "source", "tools"]

    def test_punctuation_stripped(self):
        assert tokenize('"rust, go" c\\++') == ["rust", "go", "c"]

    def test_negative_directive_dropped(self):
        assert tokenize("tools -site:example") == ["tools"]

    def test_plain_dash_word_kept(self):
        assert tokenize("-foo bar") == ["-foo", "bar"]

    def test_only_stop_words(self):
        assert tokenize("the of and - !") == []

    def test_empty(self):
        assert tokenize("") == []


class TestIsKeyword:
    def test_all_stop_words_rejected(self):
        for word in STOP_WORDS:
            assert is_keyword(word) is False

    def test_directive_rejected(self):
        assert is_keyword("-inurl:foo") is False

    def test_regular_word(self):
        assert is_keyword("python") is True
