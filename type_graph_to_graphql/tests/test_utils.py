import pytest

from type_graph_to_graphql.utils import lower_first, sanitize_identifier, unique, upper_first


class TestUtils:
    """Test naming helpers"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Post", "Post"),
            ("Foo.Bar", "Foo_Bar"),
            ("Map<string>", "Map_string_"),
            ("with space", "with_space"),
            ("Café", "Caf_"),
            ("_private", "_private"),
        ],
    )
    def test_sanitize_identifier(self, text, expected):
        assert sanitize_identifier(text) == expected

    def test_sanitize_identifier_is_idempotent(self):
        once = sanitize_identifier("a.b-c")
        assert sanitize_identifier(once) == once

    def test_case_helpers(self):
        assert upper_first("post") == "Post"
        assert lower_first("BlogPost") == "blogPost"
        assert upper_first("") == ""

    def test_unique(self):
        assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
