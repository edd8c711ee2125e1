"""
Inserts component unit tests.

Tests for newline denormalization, insert typing and op conversion.
"""

from __future__ import annotations

from typing import Any

import pytest

from deltaguard.components.inserts import (
    ConvertOpsInput,
    DataType,
    DeltaInsertOp,
    InsertData,
    InsertNormalizer,
    convert,
    convert_insert_value,
    denormalize,
    run,
    run_convert,
    tokenize_with_newlines,
)
from deltaguard.domain.links import SanitizerOptions


def text_op(text: str, **attributes: Any) -> DeltaInsertOp:
    return DeltaInsertOp(InsertData(DataType.TEXT, text), attributes)


@pytest.fixture
def raw_ops() -> list[Any]:
    return [
        {"insert": "Hello\n", "attributes": {"bold": True, "color": "javascript:x"}},
        {"insert": ""},
        {"insert": {"unknown": 1}},
        {"insert": {"image": "https://x.com/y.png"}, "attributes": {"link": "javascript:alert(1)"}},
        "not an op",
    ]


# --- Tokenizing ---


class TestTokenize:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("abc", ["abc"]),
            ("\n", ["\n"]),
            ("a\nb", ["a", "\n", "b"]),
            ("a\n", ["a", "\n"]),
            ("\n\na", ["\n", "\n", "a"]),
            ("", [""]),
        ],
    )
    def test_tokenize(self, text: str, expected: list[str]) -> None:
        assert tokenize_with_newlines(text) == expected


# --- Denormalizing ---


class TestDenormalize:
    def test_non_mapping(self) -> None:
        assert denormalize(None) == []
        assert denormalize("text") == []

    def test_embed_unchanged(self) -> None:
        op = {"insert": {"image": "x.png"}, "attributes": {"width": "10"}}
        assert denormalize(op) == [op]

    def test_single_line_unchanged(self) -> None:
        op = {"insert": "abc"}
        assert denormalize(op) == [op]

    def test_splits_lines_and_copies_attributes(self) -> None:
        op = {"insert": "a\nb", "attributes": {"bold": True}}
        assert denormalize(op) == [
            {"insert": "a", "attributes": {"bold": True}},
            {"insert": "\n", "attributes": {"bold": True}},
            {"insert": "b", "attributes": {"bold": True}},
        ]

    def test_does_not_mutate(self) -> None:
        op = {"insert": "a\nb"}
        denormalize(op)
        assert op == {"insert": "a\nb"}


# --- Insert Values ---


class TestConvertInsertValue:
    def test_text(self) -> None:
        assert convert_insert_value("x") == InsertData(DataType.TEXT, "x")

    @pytest.mark.parametrize("data_type", [DataType.IMAGE, DataType.VIDEO, DataType.FORMULA])
    def test_embeds(self, data_type: DataType) -> None:
        assert convert_insert_value({data_type.value: "v"}) == InsertData(data_type, "v")

    def test_image_wins_over_video(self) -> None:
        assert convert_insert_value({"video": "b", "image": "a"}).type is DataType.IMAGE

    @pytest.mark.parametrize("value", [{"other": 1}, 5, None, ["image"]])
    def test_unknown(self, value: Any) -> None:
        assert convert_insert_value(value) is None


# --- Conversion ---


class TestConvert:
    def test_non_list(self) -> None:
        assert convert(None) == []
        assert convert({"ops": []}) == []

    def test_converts_and_sanitizes(self, raw_ops: list[Any]) -> None:
        ops = convert(raw_ops)
        assert [op.insert for op in ops] == [
            InsertData(DataType.TEXT, "Hello"),
            InsertData(DataType.TEXT, "\n"),
            InsertData(DataType.IMAGE, "https://x.com/y.png"),
        ]
        assert ops[0].attributes == {"bold": True}
        assert ops[1].attributes == {"bold": True}
        assert ops[2].attributes == {"link": "unsafe:javascript:alert&#40;1&#41;"}

    def test_options_reach_sanitizer(self) -> None:
        options = SanitizerOptions(url_sanitizer=lambda url: "https://safe")
        ops = convert([{"insert": "a", "attributes": {"link": "x"}}], options)
        assert ops[0].attributes == {"link": "https://safe"}

    def test_run_convert_counts_skipped(self, raw_ops: list[Any]) -> None:
        output = run_convert(ConvertOpsInput(raw_ops))
        assert output.success is True
        assert len(output.ops) == 3
        assert output.skipped == 2

    def test_run_rejects_unknown_input(self) -> None:
        with pytest.raises(ValueError):
            run([])  # type: ignore[arg-type]

    def test_normalizer_service(self) -> None:
        normalizer = InsertNormalizer(SanitizerOptions(max_header_level=2))
        ops = normalizer.convert([{"insert": "\n", "attributes": {"header": 5}}])
        assert ops[0].attributes == {"header": 2}

    def test_to_dict(self) -> None:
        op = text_op("a", bold=True)
        assert op.to_dict() == {
            "insert": {"type": "text", "value": "a"},
            "attributes": {"bold": True},
        }


# --- Op Predicates ---


class TestDeltaInsertOp:
    def test_newlines(self) -> None:
        assert DeltaInsertOp.create_new_line_op().is_just_newline() is True
        assert text_op("\n", header=1).is_newline() is True
        assert text_op("\n", header=1).is_just_newline() is False

    def test_container_blocks(self) -> None:
        assert text_op("\n", header=1).is_container_block() is True
        assert text_op("\n", blockquote=True).is_container_block() is True
        assert text_op("\n", **{"code-block": True}).is_code_block() is True
        assert text_op("\n", align="center").is_block_attribute() is True
        assert text_op("a").is_container_block() is False

    def test_inline(self) -> None:
        assert text_op("a", bold=True).is_inline() is True
        assert text_op("\n", list="bullet").is_inline() is False
        assert DeltaInsertOp(InsertData(DataType.VIDEO, "v")).is_inline() is False

    def test_render_as_block_only_affects_embeds(self) -> None:
        assert text_op("a", renderAsBlock=True).is_inline() is True
        image = DeltaInsertOp(InsertData(DataType.IMAGE, "/a.png"), {"renderAsBlock": True})
        assert image.is_inline() is False
        assert DeltaInsertOp(InsertData(DataType.IMAGE, "/a.png")).is_inline() is True

    def test_lists(self) -> None:
        assert text_op("\n", list="ordered:a").is_ordered_list() is True
        assert text_op("\n", list="bullet").is_bullet_list() is True
        assert text_op("\n", list="bullet").is_list() is True
        assert text_op("\n").is_list() is False
        assert text_op("\n", list="bullet").is_same_list_as(text_op("\n", list="bullet")) is True

    def test_types(self) -> None:
        image = DeltaInsertOp(InsertData(DataType.IMAGE, "x"), {"link": "https://x"})
        assert image.is_image() is True
        assert image.is_link() is True
        assert DeltaInsertOp(InsertData(DataType.FORMULA, "x")).is_formula() is True
        assert DeltaInsertOp(InsertData(DataType.VIDEO, "x"), {"link": "y"}).is_link() is False
        assert text_op("@a", mentions=True).is_mentions() is True

    def test_comparisons(self) -> None:
        a = text_op("\n", align="right", indent=2, header=2)
        b = text_op("\n", align="right", indent=2, header=2)
        c = text_op("\n", indent=1)
        assert a.has_same_adi_as(b) is True
        assert a.has_same_adi_as(c) is False
        assert a.is_same_header_as(b) is True
        assert a.has_same_indentation_as(b) is True
        assert a.has_higher_indent_than(c) is True
        assert c.has_higher_indent_than(a) is False
        assert a.has_same_attr(b) is True
