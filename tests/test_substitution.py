"""Tests for line-based dependency substitution (core/substitution.py).

Coverage:
* Matching key boundaries (prefix-extended keys, embedded names, comments).
* Padding and line-ending preservation.
* Literal insertion of the replacement.
* Table-form declarations are left alone.
* Idempotence.
* Declaration listing and pin detection.
"""

from __future__ import annotations

import pytest

from deptool.core.spec_builder import branch_spec, version_spec
from deptool.core.substitution import (
    dependency_line_pattern,
    find_declarations,
    is_pinned,
    substitute_dependency,
)

from conftest import CLI_MANIFEST, CORE_MANIFEST, TABLE_MANIFEST


# ---------------------------------------------------------------------------
# Pattern boundaries
# ---------------------------------------------------------------------------

class TestPattern:
    @pytest.mark.parametrize(
        "line",
        [
            'lib3h = "=0.0.1"',
            'lib3h-protocol = "=0.0.1"',
            'lib3h_sodium = "=0.0.1"',
            'lib3h="=0.0.1"',
            '    lib3h   =   "=0.0.1"',
            "\tlib3h = { path = '../lib3h' }",
        ],
    )
    def test_matches(self, line: str) -> None:
        assert dependency_line_pattern("lib3h").search(line) is not None

    @pytest.mark.parametrize(
        "line",
        [
            'otherlib3hthing = "=0.0.1"',
            '# lib3h = "=0.0.1"',
            "[dependencies.lib3h]",
            'serde = "lib3h"',
            "lib3h",
        ],
    )
    def test_does_not_match(self, line: str) -> None:
        assert dependency_line_pattern("lib3h").search(line) is None

    def test_key_stops_at_equals_sign(self) -> None:
        match = dependency_line_pattern("lib3h").search('lib3h="=0.0.1"')
        assert match is not None
        assert match.group("key") == "lib3h"
        assert match.group("value") == '"=0.0.1"'

    def test_name_is_matched_literally(self) -> None:
        assert dependency_line_pattern("a.b").search('axb = "1"') is None
        assert dependency_line_pattern("a.b").search('a.b = "1"') is not None


# ---------------------------------------------------------------------------
# substitute_dependency
# ---------------------------------------------------------------------------

class TestSubstituteDependency:
    def test_version_changes_only_matching_lines(self) -> None:
        result = substitute_dependency(CORE_MANIFEST, "lib3h", version_spec("0.0.9").text)

        before = CORE_MANIFEST.splitlines()
        after = result.text.splitlines()
        changed = [(old, new) for old, new in zip(before, after) if old != new]
        assert changed == [
            ('lib3h = "=0.0.1"', 'lib3h = "=0.0.9"'),
            ('lib3h_protocol = "=0.0.1"', 'lib3h_protocol = "=0.0.9"'),
        ]
        assert result.keys == ("lib3h", "lib3h_protocol")
        assert result.count == 2

    def test_branch_sets_exact_line(self) -> None:
        result = substitute_dependency('lib3h = "=0.0.1"\n', "lib3h", branch_spec("test-a").text)
        assert result.text == (
            'lib3h = { git = "https://github.com/holochain/lib3h", branch = "test-a" }\n'
        )

    def test_embedded_name_untouched(self) -> None:
        result = substitute_dependency(CORE_MANIFEST, "lib3h", '"=0.0.9"')
        assert 'otherlib3hthing = "=2.0.0"' in result.text

    def test_no_match_is_identical(self) -> None:
        result = substitute_dependency(CLI_MANIFEST, "lib3h", '"=0.0.9"')
        assert result.text == CLI_MANIFEST
        assert result.keys == ()

    def test_padding_is_preserved(self) -> None:
        result = substitute_dependency('  lib3h    =  "=0.0.1"\n', "lib3h", '"=0.0.9"')
        assert result.text == '  lib3h    =  "=0.0.9"\n'

    def test_crlf_line_endings_are_preserved(self) -> None:
        text = 'a = "1"\r\nlib3h = "=0.0.1"\r\nb = "2"\r\n'
        result = substitute_dependency(text, "lib3h", '"=0.0.9"')
        assert result.text == 'a = "1"\r\nlib3h = "=0.0.9"\r\nb = "2"\r\n'

    def test_missing_trailing_newline(self) -> None:
        result = substitute_dependency('lib3h = "=0.0.1"', "lib3h", '"=0.0.9"')
        assert result.text == 'lib3h = "=0.0.9"'

    @pytest.mark.parametrize(
        "replacement",
        [
            r'"=\1"',
            r'"\g<lead>"',
            '{ git = "https://a/b/c", branch = "x/y" }',
            '"back\\slash"',
        ],
    )
    def test_replacement_is_literal(self, replacement: str) -> None:
        result = substitute_dependency('lib3h = "=0.0.1"\n', "lib3h", replacement)
        assert result.text == f"lib3h = {replacement}\n"

    def test_trailing_comment_is_replaced(self) -> None:
        result = substitute_dependency('lib3h = "=0.0.1" # pinned\n', "lib3h", '"=0.0.9"')
        assert result.text == 'lib3h = "=0.0.9"\n'

    def test_table_declaration_is_not_matched(self) -> None:
        result = substitute_dependency(TABLE_MANIFEST, "lib3h", '"=0.0.9"')
        assert result.text == TABLE_MANIFEST
        assert result.keys == ()

    def test_idempotent(self) -> None:
        spec = version_spec("0.0.9").text
        once = substitute_dependency(CORE_MANIFEST, "lib3h", spec).text
        twice = substitute_dependency(once, "lib3h", spec).text
        assert once == twice


# ---------------------------------------------------------------------------
# find_declarations / is_pinned
# ---------------------------------------------------------------------------

class TestFindDeclarations:
    def test_lists_key_and_value(self) -> None:
        assert find_declarations(CORE_MANIFEST, "lib3h") == [
            ("lib3h", '"=0.0.1"'),
            ("lib3h_protocol", '"=0.0.1"'),
        ]

    def test_empty_when_absent(self) -> None:
        assert find_declarations(CLI_MANIFEST, "lib3h") == []


class TestIsPinned:
    @pytest.mark.parametrize("value", ['"=0.0.9"', '"=0.0.9-alpha1"', '"=1.0.0"  # ok'])
    def test_pinned(self, value: str) -> None:
        assert is_pinned(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            '"0.0.9"',
            '"^0.0.9"',
            '">=0.0.9"',
            '{ git = "https://github.com/holochain/lib3h", branch = "test-a" }',
            '{ version = "=0.0.9" }',
        ],
    )
    def test_unpinned(self, value: str) -> None:
        assert is_pinned(value) is False
