"""Word/clue suppliers feeding the grid generator."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Protocol, Set

from ..core.constants import MAX_WORD_LENGTH, MIN_WORD_LENGTH
from ..core.exceptions import WordSourceError
from ..core.models import WordEntry
from ..data.normalization import clean_word, is_playable_word
from ..utils.logger import get_logger
from .gemini_client import GeminiClient


LOGGER = get_logger(__name__)


@dataclass
class CrosswordContent:
    """A titled, ranked list of words with clues."""

    title: str
    words: List[WordEntry] = field(default_factory=list)


class WordSource(Protocol):
    """Protocol implemented by all word providers."""

    def fetch(self) -> CrosswordContent:
        ...


def parse_word_line(line: str) -> WordEntry:
    """Parse a ``WORD:Clue`` entry into a normalised :class:`WordEntry`."""

    word, sep, clue = line.partition(":")
    word = clean_word(word)
    clue = clue.strip()
    if not sep or not clue:
        raise WordSourceError(f"Missing clue in entry {line!r} (expected WORD:Clue)")
    if not word:
        raise WordSourceError(f"Missing word in entry {line!r}")
    return WordEntry(word=word, clue=clue)


def parse_word_lines(lines: List[str]) -> List[WordEntry]:
    entries: List[WordEntry] = []
    for number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            entries.append(parse_word_line(line))
        except WordSourceError as exc:
            raise WordSourceError(f"line {number}: {exc}") from exc
    return entries


class StaticWordSource:
    """Serves a fixed list of entries, e.g. from the command line."""

    def __init__(self, entries: List[WordEntry], title: str) -> None:
        self.entries = entries
        self.title = title

    def fetch(self) -> CrosswordContent:
        if not self.entries:
            raise WordSourceError("No words supplied")
        return CrosswordContent(title=self.title, words=list(self.entries))


class FileWordSource:
    """Reads one ``WORD:Clue`` entry per line; blank lines and # comments are skipped."""

    def __init__(self, path: Path | str, title: str) -> None:
        self.path = Path(path)
        self.title = title

    def fetch(self) -> CrosswordContent:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise WordSourceError(f"Cannot read word file {self.path}: {exc}") from exc
        entries = parse_word_lines(text.splitlines())
        if not entries:
            raise WordSourceError(f"No entries found in {self.path}")
        LOGGER.info("Loaded %s entries from %s", len(entries), self.path)
        return CrosswordContent(title=self.title, words=entries)


class GeminiWordSource:
    """LLM-powered word source using the Gemini API."""

    PROMPT = (
        "You are designing a small newspaper crossword in {language}.\n"
        "Topic: '{topic}'.\n"
        "Return a SINGLE JSON object with:\n"
        '  "title": a short, fun crossword title in {language},\n'
        '  "words": [ {{"word": "WORD", "clue": "short, simple clue in {language}"}}, ...]\n'
        "Give between {minimum} and {limit} words, most important first. "
        "Each word must be a single {language} word of {min_length}-{max_length} letters "
        "with no spaces, digits, hyphens or punctuation. "
        "Prefer words that share letters with each other so they can interlock."
    )

    def __init__(
        self,
        topic: str,
        language: str = "English",
        limit: int = 8,
        title: Optional[str] = None,
        client: Optional[GeminiClient] = None,
    ) -> None:
        self.topic = topic
        self.language = language
        self.limit = limit
        self.title = title
        self._client = client

    def fetch(self) -> CrosswordContent:
        try:
            if self._client is None:
                self._client = GeminiClient()
            data = self._client.generate_json(self._render_prompt())
        except RuntimeError as exc:  # GeminiAPIError or a missing API key
            raise WordSourceError(f"Gemini word generation failed: {exc}") from exc
        return self._parse_response(data, self.title or self.topic)

    def _render_prompt(self) -> str:
        return self.PROMPT.format(
            language=self.language,
            topic=self.topic,
            minimum=max(1, self.limit - 2),
            limit=self.limit,
            min_length=MIN_WORD_LENGTH,
            max_length=MAX_WORD_LENGTH,
        )

    @staticmethod
    def _parse_response(data: Any, fallback_title: str) -> CrosswordContent:
        if not isinstance(data, dict):
            raise WordSourceError("Gemini payload is not a JSON object")

        entries: List[WordEntry] = []
        seen: Set[str] = set()
        for item in data.get("words") or []:
            if not isinstance(item, dict):
                continue
            raw_word = str(item.get("word") or "")
            clue = str(item.get("clue") or "").strip()
            word = clean_word(raw_word)
            single_word = unicodedata.normalize("NFC", raw_word).strip().isalpha()
            if not clue or not single_word or not is_playable_word(word):
                LOGGER.warning("Skipping unusable entry %r / %r", raw_word, clue)
                continue
            if word in seen:
                continue
            seen.add(word)
            entries.append(WordEntry(word=word, clue=clue))

        if not entries:
            raise WordSourceError("Gemini returned no usable words")
        title = str(data.get("title") or "").strip() or fallback_title
        return CrosswordContent(title=title, words=entries)
