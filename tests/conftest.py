"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from course_assistant.core.settings import Settings
from course_assistant.llm.gemini_client import GenerationConfig
from course_assistant.schema.assistant import TelemetryRecord


class FakeGenerator:
    """Stands in for GeminiClient; remembers every prompt it was given."""

    def __init__(self, reply: str = "From the syllabus file: Midterm: Oct 26") -> None:
        self.reply = reply
        self.calls: list[tuple[str, GenerationConfig]] = []

    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        self.calls.append((prompt, config))
        return self.reply


class FakeTelemetry:
    def __init__(self, status: str = "Qualtrics status: 200") -> None:
        self.status = status
        self.records: list[TelemetryRecord] = []

    async def log(self, record: TelemetryRecord) -> str:
        self.records.append(record)
        return self.status


def make_settings(root: Path, **overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "materials_root": root,
        "gemini_api_key": "test-key",
        "syllabus_link": "https://example.edu/course",
        "qualtrics_api_token": None,
        "qualtrics_survey_id": None,
        "qualtrics_datacenter": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def materials(tmp_path: Path) -> Path:
    (tmp_path / "syllabus.md").write_text("# Course syllabus\nMidterm: Oct 26\nFinal: Dec 14\n", encoding="utf-8")
    (tmp_path / "essay.md").write_text("EBO essays are due in week 6.\n", encoding="utf-8")

    midterm = tmp_path / "midterm-materials"
    midterm.mkdir()
    (midterm / "lecture1.md").write_text("Lecture 1 covers supply and demand.", encoding="utf-8")
    (midterm / "lecture2.md").write_text("Lecture 2 covers elasticity.", encoding="utf-8")

    (tmp_path / "final-materials").mkdir()

    transcripts = tmp_path / "transcripts"
    transcripts.mkdir()
    (transcripts / "lecture3.txt").write_text(
        "Today we discuss why markets fail when externalities are present.", encoding="utf-8"
    )
    (transcripts / "lecture4.txt").write_text("", encoding="utf-8")
    (transcripts / "notes.md").write_text("not a transcript", encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(materials: Path) -> Settings:
    return make_settings(materials)


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def telemetry() -> FakeTelemetry:
    return FakeTelemetry()
