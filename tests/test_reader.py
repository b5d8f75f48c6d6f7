"""Tests for the Reader layer."""

import pytest

from up_core.document import Node
from up_core.errors import UnterminatedError
from up_core.line_utils import split_lines
from up_core.reader import (
    Source,
    dedent,
    parse_block,
    parse_inline_block,
    parse_inline_list,
    parse_line,
    parse_list,
    parse_multiline,
    parse_table,
)
from up_core.values import VBlock, VList, VScalar, VTable


def src(text: str, strict: bool = False) -> Source:
    return Source(split_lines(text), strict=strict)


# ---------------------------------------------------------------------------
# parse_line / dispatch
# ---------------------------------------------------------------------------

def test_line_scalar():
    node, nxt = parse_line(src("name John Doe"), 0)
    assert node == Node("name", None, VScalar("John Doe"))
    assert nxt == 1

def test_line_type_is_metadata_only():
    node, _ = parse_line(src("age!int 30"), 0)
    assert node.type_annotation == "int"
    assert node.value == VScalar("30")

def test_line_quoted_adds_quotes():
    node, _ = parse_line(src("msg!quoted hello"), 0)
    assert node == Node("msg", "string", VScalar('"hello"'))

def test_line_quoted_keeps_existing_quotes():
    # the splitter strips one layer, so two are needed to keep one
    node, _ = parse_line(src('msg!quoted ""hello""'), 0)
    assert node.value == VScalar('"hello"')
    assert node.type_annotation == "string"

def test_line_inline_list():
    node, nxt = parse_line(src("colors [red, green]"), 0)
    assert node.value == VList([VScalar("red"), VScalar("green")])
    assert nxt == 1

def test_line_inline_block():
    node, _ = parse_line(src("point {x 1, y 2}"), 0)
    assert node.value == VBlock({"x": VScalar("1"), "y": VScalar("2")})

def test_line_brace_without_close_is_scalar():
    node, _ = parse_line(src("weird {abc"), 0)
    assert node.value == VScalar("{abc")

def test_line_block_returns_next_index():
    node, nxt = parse_line(src("a {\nb c\n}\nd e"), 0)
    assert node.value == VBlock({"b": VScalar("c")})
    assert nxt == 3

def test_line_hash_literal_in_traditional_mode():
    node, _ = parse_line(src("color #fff"), 0)
    assert node.value == VScalar("#fff")

def test_line_empty_value():
    node, _ = parse_line(src("flag"), 0)
    assert node == Node("flag", None, VScalar(""))


# ---------------------------------------------------------------------------
# parse_block
# ---------------------------------------------------------------------------

def test_block_basic():
    block, nxt = parse_block(src("host localhost\nport!int 8080\n}"), 0)
    assert block.entries == {"host": VScalar("localhost"), "port": VScalar("8080")}
    assert nxt == 3

def test_block_skips_blank_and_comments():
    block, _ = parse_block(src("\n# comment\n  a 1\n\n}"), 0)
    assert block.entries == {"a": VScalar("1")}

def test_block_duplicate_key_keeps_first_position():
    block, _ = parse_block(src("a 1\nb 2\na 3\n}"), 0)
    assert list(block.entries) == ["a", "b"]
    assert block.entries["a"] == VScalar("3")

def test_block_nested():
    block, nxt = parse_block(src("inner {\nx y\n}\nz w\n}"), 0)
    assert block.entries["inner"] == VBlock({"x": VScalar("y")})
    assert block.entries["z"] == VScalar("w")
    assert nxt == 5

def test_block_unterminated_lenient():
    block, nxt = parse_block(src("b c"), 0)
    assert block.entries == {"b": VScalar("c")}
    assert nxt == 1

def test_block_unterminated_strict():
    with pytest.raises(UnterminatedError) as exc_info:
        parse_block(src("b c", strict=True), 0)
    assert exc_info.value.delimiter == "}"


# ---------------------------------------------------------------------------
# parse_list
# ---------------------------------------------------------------------------

def test_list_scalars():
    lst, nxt = parse_list(src("apple\n  banana\ncherry\n]"), 0)
    assert lst == VList([VScalar("apple"), VScalar("banana"), VScalar("cherry")])
    assert nxt == 4

def test_list_scalars_are_verbatim():
    lst, _ = parse_list(src('"quoted"\nkey!int 1\n]'), 0)
    assert lst.items == [VScalar('"quoted"'), VScalar("key!int 1")]

def test_list_nested_inline_lists():
    lst, _ = parse_list(src("[0, 0]\n[1, 2]\n]"), 0)
    assert lst.items[1] == VList([VScalar("1"), VScalar("2")])

def test_list_nested_block():
    lst, nxt = parse_list(src("{\nname a\n}\nplain\n]"), 0)
    assert lst.items == [VBlock({"name": VScalar("a")}), VScalar("plain")]
    assert nxt == 5

def test_list_skips_comments():
    lst, _ = parse_list(src("# c\n\nx\n]"), 0)
    assert lst.items == [VScalar("x")]

def test_list_unterminated_strict():
    with pytest.raises(UnterminatedError):
        parse_list(src("x", strict=True), 0)


# ---------------------------------------------------------------------------
# parse_multiline / dedent
# ---------------------------------------------------------------------------

def test_multiline_verbatim():
    text, nxt = parse_multiline(src("  Line 1\n\nLine 3  \n```\nafter x"), 0)
    assert text == VScalar("  Line 1\n\nLine 3  ")
    assert nxt == 4

def test_multiline_dedent():
    text, _ = parse_multiline(src("     five\nx\n```"), 0, "2")
    assert text.value == "   five\nx"

def test_multiline_non_numeric_annotation():
    text, _ = parse_multiline(src("  a\n```"), 0, "python")
    assert text.value == "  a"

def test_multiline_fence_may_be_indented():
    text, nxt = parse_multiline(src("a\n   ```   "), 0)
    assert text.value == "a"
    assert nxt == 2

def test_multiline_unterminated_lenient():
    text, nxt = parse_multiline(src("a\nb"), 0)
    assert text.value == "a\nb"
    assert nxt == 2

def test_multiline_unterminated_strict():
    with pytest.raises(UnterminatedError):
        parse_multiline(src("a", strict=True), 0)

def test_dedent_short_line_untouched():
    assert dedent("    abc\na\n  ", 2) == "  abc\na\n"


# ---------------------------------------------------------------------------
# Inline forms
# ---------------------------------------------------------------------------

def test_inline_list_trims_items():
    assert parse_inline_list("[ red , green , blue ]") == parse_inline_list("[red, green, blue]")

def test_inline_list_empty():
    assert parse_inline_list("[]") == VList()
    assert parse_inline_list("[   ]") == VList()

def test_inline_list_naive_comma_split():
    lst = parse_inline_list('["a, b", c]')
    assert lst.items == [VScalar('"a'), VScalar('b"'), VScalar("c")]

def test_inline_block_types_dropped():
    block = parse_inline_block("{port!int 80, host h}")
    assert block.entries == {"port": VScalar("80"), "host": VScalar("h")}

def test_inline_block_empty():
    assert parse_inline_block("{}") == VBlock()

def test_inline_block_last_wins():
    block = parse_inline_block("{a 1, b 2, a 3}")
    assert list(block.entries) == ["a", "b"]
    assert block.entries["a"] == VScalar("3")

def test_inline_block_values_not_dispatched():
    block = parse_inline_block("{a [1]}")
    assert block.entries["a"] == VScalar("[1]")


# ---------------------------------------------------------------------------
# parse_table
# ---------------------------------------------------------------------------

TABLE_BODY = """\
columns [name, age]
rows {
  [Alice, 30]
  # comment
  [Bob, 25, extra]
}
}
tail x"""

def test_table():
    table, nxt = parse_table(src(TABLE_BODY), 0)
    assert table.columns == [VScalar("name"), VScalar("age")]
    assert table.rows == [
        [VScalar("Alice"), VScalar("30")],
        [VScalar("Bob"), VScalar("25"), VScalar("extra")],
    ]
    assert nxt == 7

def test_table_empty():
    table, nxt = parse_table(src("}"), 0)
    assert table == VTable()
    assert nxt == 1

def test_table_ignores_unknown_lines(caplog):
    table, _ = parse_table(src("bogus line\ncolumns [a]\n}"), 0)
    assert table.columns == [VScalar("a")]
    assert "ignoring line 1" in caplog.text

def test_table_unterminated_strict():
    with pytest.raises(UnterminatedError):
        parse_table(src("columns [a]", strict=True), 0)

def test_table_keys_may_carry_types():
    table, _ = parse_table(src("columns!list [a, b]\nrows!list {\n[1, 2]\n}\n}"), 0)
    assert table.columns == [VScalar("a"), VScalar("b")]
    assert table.rows == [[VScalar("1"), VScalar("2")]]

def test_line_quoted_lone_quote_is_wrapped():
    node, _ = parse_line(src('msg!quoted "'), 0)
    assert node.value == VScalar('"""')
