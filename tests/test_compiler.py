"""Tests for the format compiler: grammar, derived lengths, and errors."""

import pytest

from inputmask import (
    FormatError,
    FormatErrorKind,
    Notation,
    StateKind,
    compile_format,
)

PHONE = "+1 ([000]) [000]-[0000]"


def kinds(format_string: str, notations=None) -> list[StateKind]:
    return [state.kind for state in compile_format(format_string, notations).states()]


# =========================================================================
# State chain
# =========================================================================


class TestStateChain:
    """The compiled chain mirrors the format left to right."""

    def test_literal_only(self) -> None:
        mask = compile_format("abc")
        assert [s.char for s in mask.states()] == ["a", "b", "c"]
        assert all(s.is_literal for s in mask.states())

    def test_valuable_segment(self) -> None:
        assert kinds("[09Aa_-]") == [
            StateKind.VALUABLE_MANDATORY,
            StateKind.VALUABLE_OPTIONAL,
            StateKind.VALUABLE_MANDATORY,
            StateKind.VALUABLE_OPTIONAL,
            StateKind.VALUABLE_MANDATORY,
            StateKind.VALUABLE_OPTIONAL,
        ]

    def test_chain_ends_with_end_state(self) -> None:
        mask = compile_format("[0]")
        assert mask.head.child is not None
        assert mask.head.child.is_end

    def test_empty_format(self) -> None:
        mask = compile_format("")
        assert mask.head.is_end
        assert list(mask.states()) == []
        assert mask.total_text_length == 0

    def test_empty_segment_produces_no_states(self) -> None:
        assert kinds("a[]b") == [StateKind.LITERAL, StateKind.LITERAL]

    def test_escaped_brackets_are_literals(self) -> None:
        mask = compile_format(r"\[[0]\]\\")
        assert [s.char or s.symbol for s in mask.states()] == ["[", "0", "]", "\\"]
        assert [s.kind for s in mask.states()] == [
            StateKind.LITERAL,
            StateKind.VALUABLE_MANDATORY,
            StateKind.LITERAL,
            StateKind.LITERAL,
        ]

    def test_builtin_classes(self) -> None:
        digit, letter, anything = compile_format("[0A_]").states()
        assert digit.accepts("7") and not digit.accepts("x")
        assert letter.accepts("x") and letter.accepts("é") and not letter.accepts("7")
        assert anything.accepts("7") and anything.accepts("#") and anything.accepts(" ")

    def test_custom_notation(self) -> None:
        hex_digit = Notation("h", frozenset("0123456789abcdef"))
        (state,) = compile_format("[h]", [hex_digit]).states()
        assert state.kind is StateKind.VALUABLE_MANDATORY
        assert state.accepts("f")
        assert not state.accepts("g")

    def test_optional_custom_notation(self) -> None:
        sign = Notation("s", "+-", is_optional=True)
        assert kinds("[s0]", [sign]) == [StateKind.VALUABLE_OPTIONAL, StateKind.VALUABLE_MANDATORY]

    def test_symbols_outside_brackets_are_literal(self) -> None:
        assert kinds("0A") == [StateKind.LITERAL, StateKind.LITERAL]


# =========================================================================
# Derived lengths
# =========================================================================


class TestDerivedLengths:
    def test_phone(self) -> None:
        mask = compile_format(PHONE)
        assert mask.total_text_length == len("+1 (202) 555-1234")
        assert mask.acceptable_text_length == mask.total_text_length
        assert mask.total_value_length == 10
        assert mask.acceptable_value_length == 10

    def test_optional_tail(self) -> None:
        mask = compile_format("[000]-[99]")
        assert mask.total_text_length == 6
        assert mask.acceptable_text_length == 4
        assert mask.total_value_length == 5
        assert mask.acceptable_value_length == 3

    def test_literal_after_optional_counts_as_mandatory(self) -> None:
        mask = compile_format("[09]!")
        assert mask.acceptable_text_length == 3
        assert mask.acceptable_value_length == 1

    def test_all_optional(self) -> None:
        mask = compile_format("[999]")
        assert mask.acceptable_text_length == 0
        assert mask.acceptable_value_length == 0
        assert mask.total_value_length == 3

    @pytest.mark.parametrize("fmt", [PHONE, "[000]-[99]", "[a]x[9]", "", "(([0]))"])
    def test_acceptable_never_exceeds_total(self, fmt: str) -> None:
        mask = compile_format(fmt)
        assert mask.acceptable_text_length <= mask.total_text_length
        assert mask.acceptable_value_length <= mask.total_value_length


class TestPlaceholder:
    def test_leading_literal_run(self) -> None:
        assert compile_format(PHONE).placeholder == "+1 ("

    def test_no_leading_literals(self) -> None:
        assert compile_format("[00]/[00]").placeholder == ""

    def test_literal_only_format(self) -> None:
        assert compile_format("N/A").placeholder == "N/A"

    def test_matches_autocompleted_empty_input(self) -> None:
        mask = compile_format("ID-[000]")
        assert mask.apply("", autocomplete=True).formatted_text.text == mask.placeholder


# =========================================================================
# Errors
# =========================================================================


class TestFormatErrors:
    @pytest.mark.parametrize(
        ("fmt", "position"),
        [
            ("[00", 0),
            ("ab]", 2),
            ("[0[0]]", 2),
            ("12\\", 2),
            ("[0\\0]", 2),
        ],
    )
    def test_unbalanced_delimiters(self, fmt: str, position: int) -> None:
        with pytest.raises(FormatError) as excinfo:
            compile_format(fmt)
        assert excinfo.value.kind is FormatErrorKind.UNBALANCED_DELIMITERS
        assert excinfo.value.position == position
        assert excinfo.value.format_string == fmt

    def test_unknown_class_symbol(self) -> None:
        with pytest.raises(FormatError) as excinfo:
            compile_format("+[0x]")
        assert excinfo.value.kind is FormatErrorKind.UNKNOWN_CLASS_SYMBOL
        assert excinfo.value.position == 3

    def test_notation_resolves_only_when_supplied(self) -> None:
        with pytest.raises(FormatError):
            compile_format("[h]")
        compile_format("[h]", [Notation("h", "abc")])

    def test_duplicate_notation_symbol(self) -> None:
        with pytest.raises(FormatError) as excinfo:
            compile_format("[x]", [Notation("x", "ab"), Notation("x", "cd")])
        assert excinfo.value.kind is FormatErrorKind.DUPLICATE_NOTATION_SYMBOL
        assert excinfo.value.format_string == "[x]"
        assert excinfo.value.position == 1
        assert excinfo.value.symbol == "x"
        assert "in '[x]'" in str(excinfo.value)

    @pytest.mark.parametrize(
        ("symbol", "position"),
        [("0", 1), ("9", 3), ("A", 3), ("a", 3), ("_", 3), ("-", 3)],
    )
    def test_notation_collides_with_builtin(self, symbol: str, position: int) -> None:
        with pytest.raises(FormatError) as excinfo:
            compile_format("[0]", [Notation(symbol, "xyz")])
        assert excinfo.value.kind is FormatErrorKind.DUPLICATE_NOTATION_SYMBOL
        assert excinfo.value.format_string == "[0]"
        assert excinfo.value.position == position

    @pytest.mark.parametrize(("symbol", "position"), [("[", 0), ("]", 2), ("\\", 3)])
    def test_notation_collides_with_delimiter(self, symbol: str, position: int) -> None:
        with pytest.raises(FormatError) as excinfo:
            compile_format("[0]", [Notation(symbol, "xyz")])
        assert excinfo.value.kind is FormatErrorKind.DUPLICATE_NOTATION_SYMBOL
        assert excinfo.value.format_string == "[0]"
        assert excinfo.value.position == position

    def test_collision_keeps_original_error_as_cause(self) -> None:
        with pytest.raises(FormatError) as excinfo:
            compile_format("[x]", [Notation("x", "ab"), Notation("x", "cd")])
        assert isinstance(excinfo.value.__cause__, FormatError)
        assert excinfo.value.__cause__.format_string is None

    def test_identical_notations_are_not_duplicates(self) -> None:
        hex_digit = Notation("h", "0123456789abcdef")
        mask = compile_format("[hh]", [hex_digit, hex_digit])
        assert mask.total_value_length == 2
