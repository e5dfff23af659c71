# src/fxbot/adapters/providers/currencylayer.py
"""
currencylayer API Provider for Live Exchange Rates

This module implements the currencylayer ("apilayer live") client. One call
returns every quote against a single source currency, e.g.
{"success": true, "timestamp": 1700000000, "source": "USD",
 "quotes": {"USDEUR": 0.9, "USDGBP": 0.8}}.

Files that USE this module:
- fxbot.app (builds the provider from settings)
- tests.test_providers (unit tests)

Files that this module USES:
- fxbot.adapters.providers.base (RateTableProvider interface)
- fxbot.domain.models (RateTable)
"""
import logging
import math
import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import requests

from fxbot.adapters.providers.base import RateTableProvider
from fxbot.domain.models import RateTable

log = logging.getLogger(__name__)


class CurrencyLayerProvider(RateTableProvider):
    def __init__(
        self,
        api_key: str,
        base_url: str = "http://apilayer.net/api/live",
        base_currency: str = "USD",
        timeout: int = 15,
        cache_seconds: int = 0,
    ):
        """
        Initialize currencylayer API provider.
        
        Args:
            api_key: currencylayer access key
            base_url: Live-rates endpoint
            base_currency: Source currency every quote is expressed against
            timeout: HTTP timeout in seconds
            cache_seconds: Reuse a successful table for this long (0 disables caching)
            
        Raises:
            ValueError: If the API key is missing or empty
        """
        if not api_key or not api_key.strip():
            raise ValueError("currencylayer API key not configured")
        self.api_key = api_key
        self.url = base_url
        self.base_currency = base_currency.upper()
        self.timeout = timeout
        self.ttl = timedelta(seconds=cache_seconds)
        self._cache_table: Optional[RateTable] = None
        self._cache_ts: Optional[datetime] = None
        self._lock = threading.Lock()

    @property
    def params(self) -> Dict[str, str]:
        """Query string for the live endpoint (flat, non-nested JSON)."""
        return {"access_key": self.api_key, "source": self.base_currency, "format": "1"}

    def _cache_valid(self) -> bool:
        """
        Check if the cached table is still valid based on TTL.
        
        Returns:
            True if caching is enabled and a table exists within TTL, False otherwise
        """
        if not self.ttl or self._cache_table is None or self._cache_ts is None:
            return False
        return datetime.now(timezone.utc) - self._cache_ts < self.ttl

    def get_latest_raw(self) -> Dict[str, Any]:
        """
        Fetch raw JSON data from the currencylayer live endpoint.
        
        Returns:
            Decoded JSON object
            
        Raises:
            RuntimeError: If the request fails, times out, or returns invalid JSON
        """
        try:
            resp = requests.get(self.url, params=self.params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.exceptions.Timeout as e:
            raise RuntimeError(f"currencylayer API timeout after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise RuntimeError(f"currencylayer API request failed: {e}") from e
        except ValueError as e:
            raise RuntimeError(f"currencylayer API returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise RuntimeError(f"currencylayer returned non-dict JSON: {type(data).__name__}")
        return data

    def _decode(self, data: Dict[str, Any]) -> RateTable:
        """
        Turn a decoded payload into a RateTable.
        
        Raises:
            RuntimeError: If the provider reported failure or the quotes are malformed
        """
        if not data.get("success"):
            error = data.get("error") or {}
            info = error.get("info") if isinstance(error, dict) else error
            raise RuntimeError(f"currencylayer reported failure: {info or 'no details'}")

        raw_quotes = data.get("quotes")
        if not isinstance(raw_quotes, dict):
            raise RuntimeError("currencylayer response missing 'quotes' object")

        try:
            quotes = {str(key).upper(): float(value) for key, value in raw_quotes.items()}
            timestamp = int(data.get("timestamp") or 0)
        except (TypeError, ValueError, OverflowError) as e:
            raise RuntimeError(f"currencylayer schema error: {e}") from e

        non_finite = sorted(key for key, value in quotes.items() if not math.isfinite(value))
        if non_finite:
            log.warning("currencylayer returned non-finite quotes, dropping: %s", ", ".join(non_finite))
            quotes = {key: value for key, value in quotes.items() if math.isfinite(value)}

        source = str(data.get("source") or self.base_currency).upper()
        if source != self.base_currency:
            log.warning("currencylayer answered for source %s, expected %s", source, self.base_currency)
        return RateTable(success=True, timestamp=timestamp, base_currency=source, quotes=quotes)

    def fetch_table(self) -> RateTable:
        """
        Fetch the current rate table.
        
        Never raises: network failures, undecodable bodies and provider-reported
        errors are logged and returned as a failed table.
        
        Returns:
            RateTable (success=False on any failure)
        """
        with self._lock:
            if self._cache_valid():
                log.debug("Using cached currencylayer table from %s", self._cache_ts)
                return self._cache_table  # type: ignore[return-value]

        try:
            log.info("Fetching live rates from currencylayer (source=%s)", self.base_currency)
            table = self._decode(self.get_latest_raw())
        except RuntimeError as e:
            log.error("currencylayer fetch failed: %s", e)
            return RateTable.failed(self.base_currency)

        if self.ttl:
            with self._lock:
                self._cache_table = table
                self._cache_ts = datetime.now(timezone.utc)

        log.info("currencylayer table fetched: %d quotes (timestamp=%s)", len(table.quotes), table.timestamp)
        return table
