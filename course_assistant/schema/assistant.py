from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class AskRequest(BaseModel):
    mode: str = Field(..., min_length=1)
    question: str = Field(..., min_length=1)


class QuizRequest(BaseModel):
    transcript: str = Field(..., min_length=1)
    mode: str | None = None


class TelemetryRecord(BaseModel):
    response_text: str
    query_text: str

    def to_payload(self) -> dict[str, Any]:
        return {"values": {"responseText": self.response_text, "queryText": self.query_text}}
