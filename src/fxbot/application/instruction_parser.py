# src/fxbot/application/instruction_parser.py
"""
Instruction Parser - Extracting Currency Instructions from Message Text

Two grammars are understood, tried in this order:

1. pair: "EUR/GBP" anywhere in the text (first occurrence wins). The strict
   form takes exactly three letters on each side; the relaxed form takes any
   run of letters.
2. code: text starting with "/" followed by three letters ("/EUR"). Only
   those three letters are used; anything after them is ignored.

Files that USE this module:
- fxbot.application.quote_service (QuoteService parses every incoming text)
- fxbot.app (builds the parser from settings)
- tests.test_instruction_parser (unit tests)

Files that this module USES:
- fxbot.domain.models (PairInstruction, SingleCodeInstruction)
"""
from __future__ import annotations

import re
from typing import Iterable, Optional

from fxbot.domain.models import Instruction, PairInstruction, SingleCodeInstruction

PAIR_GRAMMAR = "pair"
CODE_GRAMMAR = "code"
# Every grammar, in the order parse() tries them
GRAMMARS = (PAIR_GRAMMAR, CODE_GRAMMAR)

_STRICT_PAIR_RE = re.compile(r"([A-Za-z]{3})/([A-Za-z]{3})")
_RELAXED_PAIR_RE = re.compile(r"([A-Za-z]+)/([A-Za-z]+)")
_CODE_RE = re.compile(r"/([A-Za-z]{3})")


class InstructionParser:
    """Parses free-form message text into an Instruction."""

    def __init__(self, grammars: Iterable[str] = GRAMMARS, relaxed_pair: bool = False):
        """
        Args:
            grammars: Enabled grammars; the parser always tries pair before code
            relaxed_pair: Accept letter runs of any length around the slash
        """
        enabled = set(grammars)
        unknown = enabled - set(GRAMMARS)
        if unknown:
            raise ValueError(f"Unknown grammar(s): {sorted(unknown)}")
        if not enabled:
            raise ValueError("At least one grammar must be enabled")
        self.pair_enabled = PAIR_GRAMMAR in enabled
        self.code_enabled = CODE_GRAMMAR in enabled
        self.pair_re = _RELAXED_PAIR_RE if relaxed_pair else _STRICT_PAIR_RE

    def parse(self, text: Optional[str]) -> Optional[Instruction]:
        """
        Extract an instruction from message text.
        
        Returns:
            PairInstruction or SingleCodeInstruction with uppercased codes,
            or None when the text matches no enabled grammar
        """
        if not text:
            return None

        if self.pair_enabled:
            match = self.pair_re.search(text)
            if match:
                return PairInstruction(source=match.group(1).upper(), target=match.group(2).upper())

        if self.code_enabled:
            match = _CODE_RE.match(text)
            if match:
                return SingleCodeInstruction(code=match.group(1).upper())

        return None
