"""
Dictionary oracles for Word Scramble Bot.

An oracle answers one question: is this a real word in the given language?
FreeDictionaryOracle asks the Free Dictionary API (no API key required,
https://dictionaryapi.dev/) and caches answers in the database.
WordSetOracle checks a fixed set of words and needs no network.
"""
import asyncio
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterable, Optional, Protocol, Tuple

import aiohttp
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from config import SETTINGS, LOGGER_NAME_DICTIONARY, DEFAULT_LANGUAGE
from models.db_models import WordCache

logger = logging.getLogger(LOGGER_NAME_DICTIONARY)


class DictionaryOracle(Protocol):
    """Anything that can tell whether a word is real."""

    async def is_real_word(self, word: str, locale: str = DEFAULT_LANGUAGE) -> bool:
        ...


class WordSetOracle:
    """Recognizes exactly the words it was given, regardless of locale."""

    def __init__(self, words: Iterable[str]):
        self._words = frozenset(w.strip().lower() for w in words if w.strip())

    @classmethod
    def from_file(cls, path: Path | str) -> "WordSetOracle":
        """Build an oracle from a one-word-per-line file."""
        p = Path(path)
        with p.open("r", encoding="utf-8") as f:
            oracle = cls(f)
        logger.info(f"Loaded {len(oracle)} dictionary words from {p}")
        return oracle

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word.strip().lower() in self._words

    async def is_real_word(self, word: str, locale: str = DEFAULT_LANGUAGE) -> bool:
        return word in self


class FreeDictionaryOracle:
    """
    Looks words up with the Free Dictionary API.
    Found / not found answers are cached; transport errors are not.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        api_url: str = SETTINGS.dictionary_api_url,
        cache_expiry_days: int = SETTINGS.word_cache_expiry_days,
    ):
        self._session_factory = session_factory
        self._api_url = api_url.rstrip("/")
        self._cache_expiry = timedelta(days=cache_expiry_days)
        self._http: Optional[aiohttp.ClientSession] = None
        logger.info(f"Dictionary oracle initialized using {self._api_url}")

    async def _get_http(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._http is None or self._http.closed:
            self._http = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=10)
            )
        return self._http

    async def close(self):
        """Close the aiohttp session."""
        if self._http and not self._http.closed:
            await self._http.close()

    async def is_real_word(self, word: str, locale: str = DEFAULT_LANGUAGE) -> bool:
        word_lower = word.lower().strip()

        async with self._session_factory() as session:
            cached = await self._check_cache(word_lower, locale, session)
            if cached is not None:
                logger.debug(f"Cache hit for word: {word_lower}")
                return cached.is_valid

            logger.info(f"Looking up word with Dictionary API: {word_lower}")
            answer = await self._lookup(word_lower, locale)
            if answer is None:
                # API unavailable: reject without caching
                return False

            is_valid, word_type = answer
            await self._store_in_cache(word_lower, locale, is_valid, word_type, session)
            return is_valid

    async def _check_cache(
        self,
        word: str,
        language: str,
        session: AsyncSession
    ) -> Optional[WordCache]:
        """Return the cached entry if it exists and has not expired."""
        cache_expiry = datetime.utcnow() - self._cache_expiry

        stmt = select(WordCache).where(
            WordCache.word == word,
            WordCache.language == language,
            WordCache.validated_at >= cache_expiry
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def _store_in_cache(
        self,
        word: str,
        language: str,
        is_valid: bool,
        word_type: Optional[str],
        session: AsyncSession
    ) -> None:
        """Store a lookup result in cache (upsert)."""
        stmt = select(WordCache).where(
            WordCache.word == word,
            WordCache.language == language
        )
        existing = await session.execute(stmt)
        cached = existing.scalar_one_or_none()

        if cached:
            cached.is_valid = is_valid
            cached.word_type = word_type
            cached.validated_at = datetime.utcnow()
        else:
            session.add(WordCache(
                word=word,
                language=language,
                is_valid=is_valid,
                word_type=word_type,
            ))

        try:
            await session.commit()
        except Exception as e:
            logger.warning(f"Failed to cache word '{word}': {e}")
            await session.rollback()

    async def _lookup(self, word: str, language: str) -> Optional[Tuple[bool, Optional[str]]]:
        """
        Call the Free Dictionary API.

        Returns:
            (is_valid, word_type) for a definitive answer, None when the
            service could not be reached or answered with an error.
        """
        try:
            http = await self._get_http()
            url = f"{self._api_url}/{language}/{word}"

            async with http.get(url) as response:
                if response.status == 200:
                    data = await response.json()
                    return True, self._parse_word_type(data)
                if response.status == 404:
                    return False, None

                logger.warning(f"Dictionary API returned status {response.status} for word '{word}'")
                return None

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Dictionary API connection error for '{word}': {e}")
            return None

    @staticmethod
    def _parse_word_type(data) -> Optional[str]:
        """Extract the first part of speech from an API response."""
        if not data or not isinstance(data, list):
            return None
        for meaning in data[0].get("meanings", []):
            part_of_speech = meaning.get("partOfSpeech")
            if part_of_speech:
                return part_of_speech.lower()
        return None
