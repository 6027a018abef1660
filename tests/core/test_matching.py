import pytest

from wildconf.core.matching import has_magic, iter_key_matches, matches
from wildconf.core.models import Entry


class TestMatches:
    """Wildcard semantics shared by every lookup."""

    def test_literal_pattern_is_exact_comparison(self):
        assert matches("foo.bar", "foo.bar")
        assert not matches("foo.bar", "foo.barx")
        assert not matches("foo", "foo.bar")

    def test_star_matches_any_run_including_empty(self):
        assert matches("foo.*", "foo.bar")
        assert matches("foo.*", "foo.")
        assert matches("*", "")
        assert matches("a*z", "az")

    def test_question_mark_matches_exactly_one_character(self):
        assert matches("k?y", "key")
        assert not matches("k?y", "ky")
        assert not matches("k?y", "keey")

    def test_character_classes(self):
        assert matches("log[0-9]", "log7")
        assert not matches("log[0-9]", "logx")
        assert matches("log[!0-9]", "logx")
        assert not matches("log[!0-9]", "log7")

    def test_matching_is_case_sensitive(self):
        assert not matches("Foo.*", "foo.bar")
        assert not matches("*.TXT", "notes.txt")

    def test_matching_is_anchored(self):
        assert not matches("bar", "foo.bar")
        assert not matches("foo", "foobar")

    def test_slash_and_leading_dot_are_ordinary(self):
        assert matches("*", "/etc/passwd")
        assert matches("a*c", "a/b/c")
        assert matches("*rc", ".bashrc")
        assert matches("?bashrc", ".bashrc")

    def test_backslash_is_literal(self):
        assert matches("a\\*", "a\\bc")
        assert not matches("a\\*", "a*")

    def test_caret_is_not_negation(self):
        assert matches("[^x]", "^")
        assert not matches("[^x]", "y")

    @pytest.mark.parametrize("pattern, expected", [
        ("plain", False),
        ("a*", True),
        ("a?", True),
        ("[ab]", True),
        ("", False),
    ])
    def test_has_magic(self, pattern, expected):
        assert has_magic(pattern) is expected


def test_iter_key_matches_preserves_order():
    entries = [Entry("foo.b", "2"), Entry("bar", "x"), Entry("foo.a", "1")]
    assert [e.value for e in iter_key_matches(entries, "foo.*")] == ["2", "1"]
