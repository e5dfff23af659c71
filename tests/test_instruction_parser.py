# tests/test_instruction_parser.py
"""
Instruction Parser Tests - Unit Tests for Message Parsing

This module tests both instruction grammars (currency pair and slash code),
their priority, the relaxed pair form and grammar selection.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxbot.application.instruction_parser (InstructionParser for testing)
- fxbot.domain.models (expected instruction values)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from fxbot.application.instruction_parser import InstructionParser
from fxbot.domain.models import PairInstruction, SingleCodeInstruction


class TestPairGrammar:
    @pytest.mark.parametrize("text,source,target", [
        ("EUR/GBP", "EUR", "GBP"),
        ("eur/gbp", "EUR", "GBP"),
        ("JpY/twd", "JPY", "TWD"),
        ("how much is usd/twd today?", "USD", "TWD"),
    ])
    def test_pair_is_uppercased(self, text, source, target):
        assert InstructionParser().parse(text) == PairInstruction(source=source, target=target)

    def test_first_occurrence_wins(self):
        result = InstructionParser().parse("EUR/GBP and USD/JPY")
        assert result == PairInstruction(source="EUR", target="GBP")

    def test_strict_takes_three_letters_adjacent_to_slash(self):
        # The unanchored strict pattern matches the letters touching the slash
        result = InstructionParser().parse("ABCD/EFGH")
        assert result == PairInstruction(source="BCD", target="EFG")

    def test_strict_rejects_short_codes(self):
        assert InstructionParser(grammars=["pair"]).parse("EU/GB") is None

    def test_relaxed_accepts_any_letter_run(self):
        parser = InstructionParser(relaxed_pair=True)
        assert parser.parse("usdt/eu") == PairInstruction(source="USDT", target="EU")

    def test_pair_takes_priority_over_code(self):
        result = InstructionParser().parse("/EUR/GBP")
        assert result == PairInstruction(source="EUR", target="GBP")


class TestCodeGrammar:
    @pytest.mark.parametrize("text", ["/EUR", "/eur", "/EUR ", "/EURx", "/eur@fx_quote_bot"])
    def test_only_three_letters_are_taken(self, text):
        assert InstructionParser().parse(text) == SingleCodeInstruction(code="EUR")

    def test_must_start_with_slash(self):
        assert InstructionParser().parse(" /EUR") is None

    def test_requires_three_letters(self):
        assert InstructionParser().parse("/EU") is None
        assert InstructionParser().parse("/E1R") is None

    def test_code_only_parser_ignores_pairs(self):
        parser = InstructionParser(grammars=["code"])
        assert parser.parse("EUR/GBP") is None
        assert parser.parse("/GBP") == SingleCodeInstruction(code="GBP")

    def test_pair_only_parser_ignores_codes(self):
        assert InstructionParser(grammars=["pair"]).parse("/EUR") is None


class TestNoMatch:
    @pytest.mark.parametrize("text", ["", None, "hello", "EUR GBP", "123/456", "/"])
    def test_no_match(self, text):
        assert InstructionParser().parse(text) is None


class TestParserConfig:
    def test_unknown_grammar(self):
        with pytest.raises(ValueError, match="Unknown grammar"):
            InstructionParser(grammars=["pair", "emoji"])

    def test_no_grammar(self):
        with pytest.raises(ValueError, match="At least one grammar"):
            InstructionParser(grammars=[])
