from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class TelemetryConfig:
    api_token: str
    survey_id: str
    datacenter: str


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    gemini_api_key: str | None = Field(default=None)
    gemini_model: str = Field(default="gemini-2.5-flash")
    gemini_base_url: str = Field(default="https://generativelanguage.googleapis.com")
    gemini_timeout_s: float = Field(default=60.0, gt=0)
    gemini_temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    gemini_max_output_tokens: int = Field(default=10000, gt=0)

    syllabus_link: str = Field(default="")

    qualtrics_api_token: str | None = Field(default=None)
    qualtrics_survey_id: str | None = Field(default=None)
    qualtrics_datacenter: str | None = Field(default=None)
    qualtrics_timeout_s: float = Field(default=15.0, gt=0)

    materials_root: Path = Field(default=Path("."))
    syllabus_file: str = Field(default="syllabus.md")
    essay_file: str = Field(default="essay.md")
    midterm_dir: str = Field(default="midterm-materials")
    final_dir: str = Field(default="final-materials")
    transcripts_dir: str = Field(default="transcripts")
    transcript_extension: str = Field(default=".txt")

    max_context_tokens: int = Field(default=1_000_000, gt=0)
    max_folder_files: int = Field(default=200, gt=0)

    quiz_question_count: int = Field(default=5)
    instructor_name: str = Field(default="Professor", min_length=1)

    log_level: str = Field(default="INFO")

    @field_validator("quiz_question_count")
    @classmethod
    def _known_quiz_size(cls, v: int) -> int:
        if v not in (5, 10):
            raise ValueError("quiz_question_count must be 5 or 10")
        return v

    def material_path(self, name: str) -> Path:
        return self.materials_root / name

    @property
    def transcripts_path(self) -> Path:
        return self.materials_root / self.transcripts_dir

    def telemetry_config(self) -> TelemetryConfig | None:
        """All three Qualtrics values, or None when any one is missing."""
        if self.qualtrics_api_token and self.qualtrics_survey_id and self.qualtrics_datacenter:
            return TelemetryConfig(
                api_token=self.qualtrics_api_token,
                survey_id=self.qualtrics_survey_id,
                datacenter=self.qualtrics_datacenter,
            )
        return None
