from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, List, Optional, Tuple

import yaml

from lerndeutsch.core.config import MISSING_TEXT, lessons_dir

logger = logging.getLogger(__name__)

DATABASE_PATTERNS = ("*.json", "*.yaml", "*.yml")


@dataclass(frozen=True)
class WordEntry:
    """One vocabulary item. ``key`` is unique within a loaded repository."""

    key: int
    german: str
    czech: str
    example: str = ""
    plural: str = ""

    @property
    def plural_label(self) -> str:
        return f"(Pl. {self.plural})" if self.plural else ""


@dataclass(frozen=True)
class Page:
    number: int
    words: Tuple[WordEntry, ...]


@dataclass(frozen=True)
class Lesson:
    number: int
    pages: Tuple[Page, ...]

    @property
    def title(self) -> str:
        return f"Lesson {self.number}"

    @property
    def words(self) -> Tuple[WordEntry, ...]:
        return tuple(word for page in self.pages for word in page.words)


class LessonRepository:
    """Loads and merges every lesson database file found in ``data_dir``."""

    def __init__(self, data_dir: Optional[Path] = None) -> None:
        self._data_dir = Path(data_dir) if data_dir is not None else lessons_dir()
        self._next_key = 0
        self._lessons = self._load_lessons()

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def all(self) -> List[Lesson]:
        return list(self._lessons)

    def get(self, number: int) -> Lesson:
        for lesson in self._lessons:
            if lesson.number == number:
                return lesson
        raise KeyError(number)

    def select(self, lesson_number: Optional[int], page_index: Optional[int] = None) -> Tuple[WordEntry, ...]:
        """Words for a lesson/page selection; no lesson means no words."""
        if lesson_number is None:
            return ()
        lesson = self.get(lesson_number)
        if page_index is None:
            return lesson.words
        return lesson.pages[page_index].words

    def _database_files(self) -> List[Path]:
        files = {path for pattern in DATABASE_PATTERNS for path in self._data_dir.glob(pattern)}
        return sorted(files, key=lambda p: p.name)

    def _load_lessons(self) -> List[Lesson]:
        if not self._data_dir.exists():
            raise FileNotFoundError(f"Lessons directory not found: {self._data_dir}")

        raw_lessons: List[dict] = []
        for path in self._database_files():
            payload = self._read_database(path)
            if payload is None:
                continue
            raw_lessons.extend(payload["lessons"])
            logger.info("Loaded %d lessons from %s", len(payload["lessons"]), path.name)

        if not raw_lessons:
            raise ValueError(f"No valid database files loaded from {self._data_dir}")

        # sorted() is stable, so lessons sharing a number keep file order
        raw_lessons.sort(key=lambda raw: _as_int(raw.get("number")))
        return [self._build_lesson(raw) for raw in raw_lessons]

    def _read_database(self, path: Path) -> Optional[dict]:
        try:
            text = path.read_text(encoding="utf-8")
            if path.suffix == ".json":
                payload = json.loads(text)
            else:
                payload = yaml.safe_load(text)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            logger.warning("Could not load database %s: %s", path.name, e)
            return None

        if not isinstance(payload, dict) or not isinstance(payload.get("lessons"), list):
            logger.warning("Skipping %s: expected a mapping with a 'lessons' list", path.name)
            return None
        payload["lessons"] = [raw for raw in payload["lessons"] if isinstance(raw, dict)]
        return payload

    def _build_lesson(self, raw: dict) -> Lesson:
        pages = []
        for raw_page in raw.get("pages") or []:
            if not isinstance(raw_page, dict):
                continue
            words = tuple(self._build_entry(item) for item in _word_items(raw_page))
            pages.append(Page(number=_as_int(raw_page.get("number")), words=words))
        return Lesson(number=_as_int(raw.get("number")), pages=tuple(pages))

    def _build_entry(self, item: dict) -> WordEntry:
        entry = WordEntry(
            key=self._next_key,
            german=_text(item.get("german")) or MISSING_TEXT,
            czech=_text(item.get("czech")) or MISSING_TEXT,
            example=_text(item.get("example")),
            plural=_text(item.get("plural")),
        )
        self._next_key += 1
        return entry


def _word_items(raw_page: dict) -> Iterator[dict]:
    for item in raw_page.get("words") or []:
        if isinstance(item, dict):
            yield item


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0
