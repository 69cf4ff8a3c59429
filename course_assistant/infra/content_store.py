from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path

from course_assistant.core.errors import MaterialsUnavailableError, TranscriptNotFoundError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileReadResult:
    name: str
    ok: bool
    content: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class FolderContext:
    files: list[FileReadResult] = field(default_factory=list)

    @property
    def text(self) -> str:
        # A failed file keeps its header and contributes no content.
        return "".join(f"\n\n===== {f.name} =====\n\n{f.content or ''}" for f in self.files)

    @property
    def failed(self) -> list[FileReadResult]:
        return [f for f in self.files if not f.ok]


class ContentStore:
    """
    Read-only access to course materials on local disk.

    Constraints:
    - only direct file entries of a folder are visited, never subdirectories
    - a single unreadable file never aborts a folder read
    - reads run in a worker thread so concurrent requests keep interleaving
    """

    def __init__(self, *, max_folder_files: int = 200, encoding: str = "utf-8") -> None:
        self._max_folder_files = max_folder_files
        self._encoding = encoding

    async def read_document(self, path: Path) -> str:
        try:
            return await asyncio.to_thread(path.read_text, encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            log.error("Failed to read document %s: %s", path, e)
            raise MaterialsUnavailableError(f"Error loading {path.name}") from e

    async def read_folder(self, path: Path) -> FolderContext:
        log.info("Attempting to load folder: %s", path)
        try:
            entries = await asyncio.to_thread(self._list_files, path)
        except OSError as e:
            log.error("Failed to list folder %s: %s", path, e)
            raise MaterialsUnavailableError(f"Error loading {path.name}") from e

        if len(entries) > self._max_folder_files:
            log.warning("Folder %s holds %d files (limit %d)", path, len(entries), self._max_folder_files)
            raise MaterialsUnavailableError(f"Too many files in {path.name}")

        results: list[FileReadResult] = []
        for entry in entries:
            try:
                content = await asyncio.to_thread(entry.read_text, encoding=self._encoding)
            except (OSError, UnicodeDecodeError) as e:
                log.warning("Failed to read file: %s %s", entry.name, e)
                results.append(FileReadResult(name=entry.name, ok=False, error=str(e)))
                continue
            results.append(FileReadResult(name=entry.name, ok=True, content=content))
        return FolderContext(files=results)

    async def read_transcript(self, path: Path) -> str:
        try:
            return await asyncio.to_thread(path.read_text, encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Failed to read transcript %s: %s", path.name, e)
            raise TranscriptNotFoundError(path.name) from e

    async def list_transcripts(self, path: Path, extension: str = ".txt") -> list[str]:
        try:
            entries = await asyncio.to_thread(self._list_files, path)
        except OSError as e:
            log.error("Failed to list transcripts in %s: %s", path, e)
            raise MaterialsUnavailableError("Error listing transcripts") from e
        return [e.name for e in entries if e.name.endswith(extension)]

    @staticmethod
    def _list_files(path: Path) -> list[Path]:
        return sorted((p for p in path.iterdir() if p.is_file()), key=lambda p: p.name)
