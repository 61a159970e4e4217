"""Tests for enum body synthesis."""

from pathlib import Path

import pytest

from enum_sync.errors import DuplicateMemberError
from enum_sync.formatter import alignment_column, get_enums, get_enums_with_description
from enum_sync.formatter.enum_body import quote
from enum_sync.matcher import (
    by_name_only,
    by_name_value_quoted_comment,
    by_name_with_args,
    by_name_with_quoted_comment,
    pattern_matcher,
)

FIXTURES = Path(__file__).parent / "fixtures" / "backend" / "model"


@pytest.mark.parametrize("max_len,column", [
    (0, 4),
    (1, 8),
    (15, 20),
    (16, 20),
    (17, 24),
    (28, 32),
])
def test_alignment_column(max_len, column):
    assert alignment_column(max_len) == column
    assert column - max_len >= 1


def test_quote_escapes_single_quotes_once():
    assert quote("it's") == r"'it\'s'"
    assert quote(r"it\'s") == r"'it\'s'"
    assert quote(r"a\\'b") == r"'a\\\'b'"
    assert quote(r"a\\\'b") == r"'a\\\'b'"
    assert quote('say "hi"') == "'say \"hi\"'"


class TestSimpleMode:
    def test_without_comments_no_padding(self):
        bodies = get_enums("ACTIVE,\nINACTIVE;\n", by_name_only)
        assert bodies.values == "    ACTIVE = 'ACTIVE',\n    INACTIVE = 'INACTIVE',"
        assert bodies.descriptions is None
        assert bodies.member_count == 2

    def test_comments_aligned(self):
        content = (FIXTURES / "Color.java").read_text()
        lines = get_enums(content, by_name_with_quoted_comment).values.split("\n")

        assert [line.split(" = ")[0].strip() for line in lines] == ["RED", "GREEN", "DARK_BLUE"]
        prefixes = [line[:line.index("//")] for line in lines]
        assert len({len(p) for p in prefixes}) == 1
        assert len(prefixes[0]) == alignment_column(len("    DARK_BLUE = 'DARK_BLUE',"))
        assert lines[0].endswith("// Red color")
        assert lines[2].endswith('// Dark "navy" blue')

    def test_members_without_comment_are_padded_only(self):
        bodies = get_enums('A("first")\nBB(2)\n', pattern_matcher(
            r"([A-Z]+)\((?:\"(.*)\"|\d+)\)", comment_group=2,
        ))
        first, second = bodies.values.split("\n")
        assert first == "    A = 'A',        // first"
        assert second == "    BB = 'BB',".ljust(len("    A = 'A',        "))
        assert "//" not in second

    def test_partial_comments_from_fixture(self):
        content = (FIXTURES / "nested" / "Priority.java").read_text()
        values = get_enums(content, by_name_value_quoted_comment).values
        assert [line.split()[0] for line in values.split("\n")] == ["LOW", "MEDIUM", "CRITICAL"]

    def test_no_matches_is_empty_body(self):
        bodies = get_enums("public class Foo {}\n", by_name_only)
        assert bodies.values == ""
        assert bodies.member_count == 0

    def test_idempotent(self):
        content = (FIXTURES / "Color.java").read_text()
        assert get_enums(content, by_name_with_quoted_comment) == get_enums(
            content, by_name_with_quoted_comment,
        )

    def test_duplicates_rejected(self):
        with pytest.raises(DuplicateMemberError, match="FOO"):
            get_enums("FOO,\nBAR,\nFOO;", by_name_only)

    def test_duplicates_allowed(self):
        bodies = get_enums("FOO,\nFOO;", by_name_only, allow_duplicates=True)
        assert bodies.values == "    FOO = 'FOO',\n    FOO = 'FOO',"


class TestDescriptionMode:
    def test_pairing(self):
        bodies = get_enums_with_description('A("Desc A")\nB("Desc B")\n', by_name_with_quoted_comment)
        values = bodies.values.split("\n")
        assert values[0].startswith("    A = 'A',")
        assert values[0].endswith("// Desc A")
        assert values[1].startswith("    B = 'B',")
        assert bodies.descriptions == "    A = 'Desc A',\n    B = 'Desc B',"

    def test_values_always_aligned(self):
        bodies = get_enums_with_description("SHORT(1)\nMUCH_LONGER(2)\n", by_name_with_args)
        prefixes = [line[:line.index("//")] for line in bodies.values.split("\n")]
        assert len({len(p) for p in prefixes}) == 1

    def test_missing_comment_falls_back_to_name(self):
        bodies = get_enums_with_description("FOO(1)", by_name_with_args)
        assert bodies.descriptions == "    FOO = 'FOO',"

    def test_description_func_on_extra_group(self):
        matcher = pattern_matcher(r"([A-Z]+)\((\d+)\)", extra_group=2)
        bodies = get_enums_with_description(
            "ONE(1)\nTWO(2)", matcher, description_func=lambda extra: f"Level {extra}",
        )
        assert bodies.descriptions == "    ONE = 'Level 1',\n    TWO = 'Level 2',"

    def test_description_with_apostrophe_escaped(self):
        bodies = get_enums_with_description("FOO(\"Don't\")", by_name_with_quoted_comment)
        assert bodies.descriptions == r"    FOO = 'Don\'t',"

    def test_empty(self):
        bodies = get_enums_with_description("", by_name_with_quoted_comment)
        assert bodies.values == ""
        assert bodies.descriptions == ""
