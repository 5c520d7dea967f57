"""Tests for lerndeutsch.core.words – lesson database loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from lerndeutsch.core.config import DATA_DIR_ENV
from lerndeutsch.core.words import Lesson, LessonRepository, Page, WordEntry


def _write_yaml(path: Path, data: dict) -> None:
    path.write_text(yaml.dump(data, allow_unicode=True, default_flow_style=False), encoding="utf-8")


def _write_json(path: Path, data: dict) -> None:
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


def _lesson(number, *pages):
    return {
        "number": number,
        "pages": [{"number": n, "words": words} for n, words in pages],
    }


@pytest.fixture()
def lessons_dir(tmp_path: Path) -> Path:
    d = tmp_path / "lessons"
    d.mkdir()
    return d


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

class TestWordEntry:
    def test_defaults(self):
        entry = WordEntry(key=1, german="Hund", czech="pes")
        assert entry.example == ""
        assert entry.plural == ""

    def test_plural_label(self):
        assert WordEntry(key=1, german="Hund", czech="pes", plural="Hunde").plural_label == "(Pl. Hunde)"
        assert WordEntry(key=1, german="Hund", czech="pes").plural_label == ""

    def test_frozen(self):
        entry = WordEntry(key=1, german="Hund", czech="pes")
        with pytest.raises(AttributeError):
            entry.german = "Katze"  # type: ignore[misc]


class TestLesson:
    def test_words_flatten_pages_in_order(self):
        a = WordEntry(key=0, german="a", czech="a")
        b = WordEntry(key=1, german="b", czech="b")
        lesson = Lesson(number=3, pages=(Page(1, (a,)), Page(2, (b,))))
        assert lesson.words == (a, b)
        assert lesson.title == "Lesson 3"


# ---------------------------------------------------------------------------
# LessonRepository – loading
# ---------------------------------------------------------------------------

class TestLessonRepositoryLoading:
    def test_yaml_database(self, lessons_dir: Path):
        _write_yaml(lessons_dir / "db.yaml", {"lessons": [
            _lesson(1, (1, [{"german": "Hund", "czech": "pes", "plural": "Hunde", "example": "Der Hund."}])),
        ]})
        repo = LessonRepository(lessons_dir)
        entry = repo.get(1).words[0]
        assert (entry.german, entry.czech, entry.plural, entry.example) == ("Hund", "pes", "Hunde", "Der Hund.")

    def test_json_and_yaml_merged_and_sorted(self, lessons_dir: Path):
        _write_json(lessons_dir / "a.json", {"lessons": [_lesson(5, (1, [{"german": "x", "czech": "y"}]))]})
        _write_yaml(lessons_dir / "b.yaml", {"lessons": [_lesson(2, (1, [{"german": "u", "czech": "v"}]))]})
        repo = LessonRepository(lessons_dir)
        assert [lesson.number for lesson in repo.all()] == [2, 5]

    def test_missing_number_sorts_first(self, lessons_dir: Path):
        _write_yaml(lessons_dir / "db.yaml", {"lessons": [
            _lesson(3, (1, [])),
            {"pages": []},
        ]})
        repo = LessonRepository(lessons_dir)
        assert [lesson.number for lesson in repo.all()] == [0, 3]

    def test_keys_are_unique_across_files(self, lessons_dir: Path):
        word = {"german": "Hund", "czech": "pes"}
        _write_yaml(lessons_dir / "a.yaml", {"lessons": [_lesson(1, (1, [word, word]))]})
        _write_json(lessons_dir / "b.json", {"lessons": [_lesson(2, (1, [word]))]})
        repo = LessonRepository(lessons_dir)
        keys = [e.key for lesson in repo.all() for e in lesson.words]
        assert len(set(keys)) == 3

    def test_missing_fields_get_defaults(self, lessons_dir: Path):
        _write_yaml(lessons_dir / "db.yaml", {"lessons": [_lesson(1, (1, [{"german": "Hund"}, {}]))]})
        words = LessonRepository(lessons_dir).get(1).words
        assert words[0].czech == "???"
        assert words[1].german == "???"
        assert words[0].example == "" and words[0].plural == ""

    def test_broken_file_is_skipped(self, lessons_dir: Path):
        (lessons_dir / "broken.json").write_text("{not json", encoding="utf-8")
        _write_yaml(lessons_dir / "ok.yaml", {"lessons": [_lesson(1, (1, [{"german": "a", "czech": "b"}]))]})
        repo = LessonRepository(lessons_dir)
        assert len(repo.all()) == 1

    def test_file_without_lessons_is_skipped(self, lessons_dir: Path):
        _write_yaml(lessons_dir / "other.yaml", {"title": "nope"})
        _write_yaml(lessons_dir / "ok.yaml", {"lessons": [_lesson(1, (1, []))]})
        assert len(LessonRepository(lessons_dir).all()) == 1

    def test_other_extensions_ignored(self, lessons_dir: Path):
        (lessons_dir / "notes.txt").write_text("lessons: []", encoding="utf-8")
        _write_yaml(lessons_dir / "ok.yml", {"lessons": [_lesson(1, (1, []))]})
        assert len(LessonRepository(lessons_dir).all()) == 1

    def test_env_override(self, lessons_dir: Path, monkeypatch: pytest.MonkeyPatch):
        _write_yaml(lessons_dir / "db.yaml", {"lessons": [_lesson(7, (1, []))]})
        monkeypatch.setenv(DATA_DIR_ENV, str(lessons_dir))
        repo = LessonRepository()
        assert repo.data_dir == lessons_dir
        assert repo.get(7).number == 7

    def test_packaged_data_loads(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv(DATA_DIR_ENV, raising=False)
        repo = LessonRepository()
        assert repo.all()
        assert all(len(lesson.words) > 0 for lesson in repo.all())


# ---------------------------------------------------------------------------
# LessonRepository – errors
# ---------------------------------------------------------------------------

class TestLessonRepositoryErrors:
    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            LessonRepository(tmp_path / "missing")

    def test_no_files(self, lessons_dir: Path):
        with pytest.raises(ValueError, match="No valid database files"):
            LessonRepository(lessons_dir)

    def test_only_invalid_files(self, lessons_dir: Path):
        (lessons_dir / "bad.yaml").write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ValueError, match="No valid database files"):
            LessonRepository(lessons_dir)

    def test_get_missing_lesson(self, lessons_dir: Path):
        _write_yaml(lessons_dir / "db.yaml", {"lessons": [_lesson(1, (1, []))]})
        with pytest.raises(KeyError):
            LessonRepository(lessons_dir).get(99)


# ---------------------------------------------------------------------------
# LessonRepository – selection
# ---------------------------------------------------------------------------

class TestSelection:
    @pytest.fixture()
    def repo(self, lessons_dir: Path) -> LessonRepository:
        _write_yaml(lessons_dir / "db.yaml", {"lessons": [
            _lesson(
                1,
                (10, [{"german": "a", "czech": "1"}, {"german": "b", "czech": "2"}]),
                (11, [{"german": "c", "czech": "3"}]),
            ),
        ]})
        return LessonRepository(lessons_dir)

    def test_no_lesson_selects_nothing(self, repo: LessonRepository):
        assert repo.select(None) == ()

    def test_whole_lesson(self, repo: LessonRepository):
        assert [e.german for e in repo.select(1)] == ["a", "b", "c"]

    def test_single_page(self, repo: LessonRepository):
        assert [e.german for e in repo.select(1, 1)] == ["c"]
