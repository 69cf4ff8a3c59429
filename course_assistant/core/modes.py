from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from course_assistant.core.errors import InvalidTranscriptNameError, UnknownModeError
from course_assistant.core.settings import Settings


class Mode(str, Enum):
    SYLLABUS = "syllabus"
    ESSAY = "essay"
    MIDTERM = "midterm"
    FINAL = "final"
    TRANSCRIPT_QUIZ = "transcript-quiz"


class SourceKind(str, Enum):
    DOCUMENT = "document"
    FOLDER = "folder"
    TRANSCRIPT = "transcript"


@dataclass(frozen=True)
class KnowledgeSource:
    kind: SourceKind
    path: Path
    label: str


MODE_ALIASES: dict[str, Mode] = {"eboEssay": Mode.ESSAY}

# mode -> (kind, settings attribute holding the file or folder name, label)
_QA_SOURCES: dict[Mode, tuple[SourceKind, str, str]] = {
    Mode.SYLLABUS: (SourceKind.DOCUMENT, "syllabus_file", "syllabus file"),
    Mode.ESSAY: (SourceKind.DOCUMENT, "essay_file", "EBO & Essay file"),
    Mode.MIDTERM: (SourceKind.FOLDER, "midterm_dir", "midterm materials"),
    Mode.FINAL: (SourceKind.FOLDER, "final_dir", "final exam materials"),
}

_FORBIDDEN_NAME_CHARS = ("/", "\\", "\x00")


def parse_mode(raw: str) -> Mode:
    if raw in MODE_ALIASES:
        return MODE_ALIASES[raw]
    try:
        return Mode(raw)
    except ValueError as e:
        raise UnknownModeError(raw) from e


def resolve_mode(raw: str, settings: Settings) -> KnowledgeSource:
    """Map a Q&A mode name to its knowledge source and attribution label."""
    mode = parse_mode(raw)
    if mode not in _QA_SOURCES:
        # transcript-quiz needs a caller-supplied filename, see resolve_transcript
        raise UnknownModeError(raw)
    kind, attr, label = _QA_SOURCES[mode]
    return KnowledgeSource(kind=kind, path=settings.material_path(getattr(settings, attr)), label=label)


def validate_transcript_name(name: str, extension: str = ".txt") -> str:
    """
    Accept only a bare filename with the transcript extension.

    Runs before any filesystem access; the returned name is safe to join onto
    the transcripts directory.
    """
    if not name or name != name.strip():
        raise InvalidTranscriptNameError(name)
    if any(ch in name for ch in _FORBIDDEN_NAME_CHARS):
        raise InvalidTranscriptNameError(name)
    if name.startswith(".") or not name.endswith(extension) or name == extension:
        raise InvalidTranscriptNameError(name)
    return name


def transcript_display_name(name: str, extension: str = ".txt") -> str:
    stem = name[: -len(extension)] if extension and name.endswith(extension) else name
    return stem.replace("_", " ").replace("-", " ").strip()


def resolve_transcript(name: str, settings: Settings) -> KnowledgeSource:
    safe = validate_transcript_name(name, settings.transcript_extension)
    return KnowledgeSource(
        kind=SourceKind.TRANSCRIPT,
        path=settings.transcripts_path / safe,
        label=transcript_display_name(safe, settings.transcript_extension),
    )
