"""
Dictionary Validator

Checks words against the external dictionary API. A 2xx answer means the
word exists, a 404 means it does not; anything else (other status codes,
timeouts, connection errors) means the validator is unavailable, which is
reported as its own outcome and never folded into valid or invalid.
"""

from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence
from urllib.parse import quote

import requests

from ..utils.game_logger import game_logger


class WordStatus(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class WordCheck:
    word: str
    status: WordStatus
    reason: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.status == WordStatus.VALID


class DictionaryValidator:
    """
    HTTP client for the dictionary API.

    Args:
        api_url: Base URL; the quoted word is appended to it
        timeout: Per-request timeout in seconds
        max_retries: Extra attempts after an unavailable outcome
        max_workers: Upper bound on concurrent lookups per batch
        batch_timeout: Overall time a batch may take before pending
            lookups are reported unavailable
        session: Optional requests.Session (injected in tests)
    """

    def __init__(self, api_url: str, timeout: float = 3.0, max_retries: int = 2,
                 max_workers: int = 8, batch_timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.api_url = api_url
        self.timeout = timeout
        self.max_retries = max_retries
        self.max_workers = max_workers
        self.batch_timeout = batch_timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config_class) -> 'DictionaryValidator':
        return cls(
            api_url=config_class.DICTIONARY_API_URL,
            timeout=config_class.DICTIONARY_TIMEOUT_SECONDS,
            max_retries=config_class.DICTIONARY_MAX_RETRIES,
            max_workers=config_class.DICTIONARY_MAX_WORKERS,
            batch_timeout=config_class.VALIDATION_TIMEOUT_SECONDS,
        )

    def _lookup(self, word: str) -> WordCheck:
        # safe='' so "/" and ".." cannot rewrite the lookup path
        url = f"{self.api_url}{quote(word, safe='')}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.Timeout:
            game_logger.logger.warning(f"Dictionary lookup timed out for '{word}'")
            return WordCheck(word, WordStatus.UNAVAILABLE, f'Timed out checking "{word}".')
        except requests.RequestException as e:
            game_logger.logger.error(f"Network error validating word '{word}': {e}")
            return WordCheck(word, WordStatus.UNAVAILABLE, f'Network error validating "{word}".')

        if response.ok:
            return WordCheck(word, WordStatus.VALID)
        if response.status_code == 404:
            return WordCheck(word, WordStatus.INVALID, f'Word "{word}" is not a real word.')

        game_logger.logger.error(f"Dictionary API error for '{word}': Status {response.status_code}")
        return WordCheck(word, WordStatus.UNAVAILABLE, f'We had trouble checking your word: "{word}"')

    def check(self, word: str) -> WordCheck:
        """Look up one word, retrying unavailable outcomes up to max_retries times."""
        if not word or not word.strip():
            return WordCheck(word, WordStatus.INVALID, 'Empty word submitted')

        result = self._lookup(word)
        attempt = 0
        while result.status == WordStatus.UNAVAILABLE and attempt < self.max_retries:
            attempt += 1
            game_logger.logger.info(f"Retrying dictionary lookup for '{word}' (attempt {attempt + 1})")
            result = self._lookup(word)
        return result

    def check_words(self, words: Sequence[str]) -> List[WordCheck]:
        """
        Check every word concurrently and return results in input order.

        Duplicate words are looked up once. Lookups still pending after
        batch_timeout are reported as unavailable.
        """
        unique_words = list(dict.fromkeys(words))
        if not unique_words:
            return []

        executor = ThreadPoolExecutor(max_workers=min(len(unique_words), self.max_workers))
        try:
            futures = {word: executor.submit(self.check, word) for word in unique_words}
            wait(futures.values(), timeout=self.batch_timeout)
        finally:
            # Don't block on lookups that outlived the batch timeout
            executor.shutdown(wait=False)

        results = {}
        for word, future in futures.items():
            if future.done():
                results[word] = future.result()
            else:
                future.cancel()
                game_logger.logger.warning(f"Dictionary lookup for '{word}' exceeded the batch timeout")
                results[word] = WordCheck(word, WordStatus.UNAVAILABLE, f'Timed out checking "{word}".')
        return [results[word] for word in words]
