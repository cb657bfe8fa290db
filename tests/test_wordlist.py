"""Tests for word lists and word list loading."""

import pytest
from wordrush.wordlist import DEFAULT_WORDS, load_words


class TestDefaultWords:
    """Tests for the DEFAULT_WORDS constant."""

    def test_is_tuple(self):
        assert isinstance(DEFAULT_WORDS, tuple)

    def test_enough_words_for_window(self):
        assert len(DEFAULT_WORDS) >= 100

    def test_all_lowercase_ascii(self):
        for word in DEFAULT_WORDS:
            assert word.isalpha(), f"Non-alpha word: {word!r}"
            assert word.islower(), f"Non-lowercase word: {word!r}"
            assert word.isascii(), f"Non-ASCII word: {word!r}"

    def test_length_range(self):
        for word in DEFAULT_WORDS:
            assert 3 <= len(word) <= 8, f"Word out of range: {word!r} (len={len(word)})"

    def test_no_duplicates(self):
        assert len(DEFAULT_WORDS) == len(set(DEFAULT_WORDS)), "Duplicate words found"


class TestLoadXml:
    """Tests for <word> element files."""

    def test_load(self, tmp_path):
        path = tmp_path / "typingwords.xml"
        path.write_text(
            '<?xml version="1.0" encoding="utf-8"?>\n'
            '<words>\n'
            '    <word>apple</word>\n'
            '    <word> Banana </word>\n'
            '    <word></word>\n'
            '    <word>apple</word>\n'
            '</words>\n',
            encoding='utf-8'
        )
        assert load_words(path) == ["apple", "Banana", "apple"]

    def test_nested_and_other_elements(self, tmp_path):
        path = tmp_path / "words.XML"
        path.write_text('<root><group><word>a</word><note>x</note></group><word>b</word></root>')
        assert load_words(path) == ["a", "b"]

    def test_malformed(self, tmp_path):
        path = tmp_path / "bad.xml"
        path.write_text('<words><word>oops</words>')
        with pytest.raises(ValueError, match="Malformed"):
            load_words(path)

    def test_no_words(self, tmp_path):
        path = tmp_path / "empty.xml"
        path.write_text('<words/>')
        assert load_words(path) == []


class TestLoadText:
    """Tests for plain-text files."""

    def test_one_per_line(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat\ndog\n\nbird\n")
        assert load_words(str(path)) == ["cat", "dog", "bird"]

    def test_comments_and_multiple_per_line(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("# animals\ncat dog  # pets\n  bird\n")
        assert load_words(path) == ["cat", "dog", "bird"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_words(tmp_path / "missing.txt")
