"""Tests for language detection."""

import pytest

from promptcore.utils.language import detect_language


class TestDetectLanguage:
    """Tests for detect_language."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Convert this TypeScript interface", "TypeScript"),
            ("const total = items.reduce(add)", "JavaScript"),
            ("My useEffect runs twice", "React"),
            ("Where does getServerSideProps run", "Next.js"),
            ("def parse(line): ...", "Python"),
            ("public static void main(String[] args)", "Java"),
            ("using System; namespace App", "C#"),
            ("package main with a goroutine leak", "Go"),
            ("let mut counter = 0;", "Rust"),
        ],
    )
    def test_detects(self, text, expected):
        """Test representative snippets are recognized."""
        assert detect_language(text) == expected

    def test_first_match_wins(self):
        """Test earlier table entries take precedence."""
        assert detect_language("port this python script to typescript") == "TypeScript"

    def test_case_insensitive(self):
        """Test matching ignores case."""
        assert detect_language("PYTHON decorators") == "Python"

    def test_no_match(self):
        """Test unrecognized text returns None."""
        assert detect_language("it crashes sometimes") is None
        assert detect_language("") is None
