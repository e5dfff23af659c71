# src/fxbot/application/quote_service.py
"""
Quote Service - Message-to-Quote Resolution Pipeline

This module contains the core business logic of the bot: resolving a parsed
instruction against a freshly fetched rate table and turning the outcome
into the reply text.

Flow for one message: parse -> fetch rate table -> resolve -> format.

Files that USE this module:
- fxbot.adapters.telegram.handlers (answers every incoming text message)
- fxbot.app (builds the service from settings)
- tests.test_quote_service (unit tests)

Files that this module USES:
- fxbot.application.instruction_parser (InstructionParser)
- fxbot.adapters.providers.base (RateTableProvider interface)
- fxbot.adapters.formatting.formatter (reply rendering)
- fxbot.domain (models and errors)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
from typing import Optional

from fxbot.adapters.formatting.formatter import format_no_match, format_reply
from fxbot.adapters.providers.base import RateTableProvider
from fxbot.application.instruction_parser import InstructionParser
from fxbot.domain.errors import QuoteError, ServiceUnreachableError, UnknownCurrencyError
from fxbot.domain.models import Instruction, PairInstruction, Quote, RateTable, SingleCodeInstruction
from fxbot.shared.language import LANG_CHINESE

log = logging.getLogger(__name__)


def resolve_quote(table: RateTable, instruction: Instruction) -> Quote:
    """
    Resolve an instruction against a rate table.
    
    A single code is quoted directly against the base currency. A pair is
    cross-rated through the base: target_rate / source_rate, i.e. how many
    units of target one unit of source buys.
    
    Args:
        table: Rate table fetched for this message
        instruction: Parsed user instruction
        
    Returns:
        Quote with the two codes and the computed rate
        
    Raises:
        ServiceUnreachableError: If the table fetch failed
        UnknownCurrencyError: If any requested code is absent or priced at zero
    """
    if not table.success:
        raise ServiceUnreachableError("Rate table unavailable")

    if isinstance(instruction, SingleCodeInstruction):
        rate = table.rate_for(instruction.code)
        if rate <= 0:
            raise UnknownCurrencyError([instruction.code])
        return Quote(source=table.base_currency, target=instruction.code, rate=rate)

    if isinstance(instruction, PairInstruction):
        source_rate = table.rate_for(instruction.source)
        target_rate = table.rate_for(instruction.target)
        unknown = [
            code for code, rate in ((instruction.source, source_rate), (instruction.target, target_rate))
            if rate <= 0
        ]
        if unknown:
            raise UnknownCurrencyError(unknown)
        return Quote(source=instruction.source, target=instruction.target, rate=target_rate / source_rate)

    raise TypeError(f"Unsupported instruction: {instruction!r}")


class QuoteService:
    """
    Answers one message at a time.
    
    Holds no per-message state: each call parses, fetches its own rate table,
    resolves and formats independently, so concurrent calls never share a
    table instance other than through the provider's immutable cache.
    """
    def __init__(
        self,
        provider: RateTableProvider,
        parser: InstructionParser,
        decimals: int = 3,
        lang: str = LANG_CHINESE,
        reply_on_no_match: bool = True,
    ):
        """
        Args:
            provider: Source of rate tables
            parser: Instruction parser with the enabled grammars
            decimals: Fractional digits in quote replies
            lang: Language of the fixed error replies
            reply_on_no_match: Reply with the invalid-format text (True) or stay silent (False)
        """
        self.provider = provider
        self.parser = parser
        self.decimals = decimals
        self.lang = lang
        self.reply_on_no_match = reply_on_no_match

    def answer(self, text: Optional[str]) -> Optional[str]:
        """
        Produce the reply for one message.
        
        Returns:
            Reply text, or None when nothing should be sent
        """
        instruction = self.parser.parse(text)
        if instruction is None:
            log.info("No currency instruction in message %r", (text or "")[:50])
            return format_no_match(self.lang) if self.reply_on_no_match else None

        table = self.provider.fetch_table()
        try:
            result = resolve_quote(table, instruction)
        except QuoteError as e:
            log.warning("Could not quote %s: %s", instruction, e)
            return format_reply(e, decimals=self.decimals, lang=self.lang)

        log.info("Quoted %s/%s = %s", result.source, result.target, result.rate)
        return format_reply(result, decimals=self.decimals, lang=self.lang)
