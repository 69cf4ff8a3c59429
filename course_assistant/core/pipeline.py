from __future__ import annotations

import logging
import time

from course_assistant.core.composer import annotate, compose_response
from course_assistant.core.context_guard import ensure_within_budget
from course_assistant.core.errors import (
    ConfigurationError,
    EmptyMaterialsError,
    MaterialsUnavailableError,
)
from course_assistant.core.modes import KnowledgeSource, SourceKind, resolve_mode, resolve_transcript
from course_assistant.core.prompts import build_qa_prompt, build_quiz_prompt
from course_assistant.core.settings import Settings
from course_assistant.infra.content_store import ContentStore
from course_assistant.infra.qualtrics_sink import TelemetrySink
from course_assistant.llm.gemini_client import GenerationConfig, TextGenerator
from course_assistant.schema.assistant import AskRequest, QuizRequest, TelemetryRecord

log = logging.getLogger(__name__)


class AssistantPipeline:
    """
    Request pipeline: resolve source -> assemble context -> prompt -> generate -> compose -> telemetry.

    Holds no per-request state; every call builds its context and prompt from scratch.
    `generator` is None when no Gemini API key is configured.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        store: ContentStore,
        generator: TextGenerator | None,
        telemetry: TelemetrySink,
    ) -> None:
        self._settings = settings
        self._store = store
        self._generator = generator
        self._telemetry = telemetry
        self._generation_config = GenerationConfig(
            temperature=settings.gemini_temperature,
            max_output_tokens=settings.gemini_max_output_tokens,
        )

    async def answer_question(self, req: AskRequest) -> str:
        t0 = time.perf_counter()
        source = resolve_mode(req.mode, self._settings)
        generator = self._require_generator()

        context = await self._load_context(source)
        prompt = build_qa_prompt(label=source.label, context=context, question=req.question)
        result = await self._generate_and_compose(generator, prompt, query_text=req.question)

        log.info("mode=%r  label=%r  %.2fs", req.mode, source.label, time.perf_counter() - t0)
        return result

    async def generate_quiz(self, req: QuizRequest) -> str:
        t0 = time.perf_counter()
        source = resolve_transcript(req.transcript, self._settings)
        generator = self._require_generator()

        lecture_text = await self._load_context(source)
        prompt = build_quiz_prompt(
            lecture_text=lecture_text,
            question_count=self._settings.quiz_question_count,
            instructor_name=self._settings.instructor_name,
        )
        result = await self._generate_and_compose(generator, prompt, query_text=req.transcript)

        log.info("quiz transcript=%r  %.2fs", req.transcript, time.perf_counter() - t0)
        return result

    async def list_transcripts(self) -> list[str]:
        return await self._store.list_transcripts(
            self._settings.transcripts_path, self._settings.transcript_extension
        )

    def _require_generator(self) -> TextGenerator:
        if self._generator is None:
            raise ConfigurationError("Missing GEMINI API key")
        return self._generator

    async def _load_context(self, source: KnowledgeSource) -> str:
        try:
            if source.kind is SourceKind.FOLDER:
                folder = await self._store.read_folder(source.path)
                if folder.failed:
                    log.warning("%d file(s) in %s could not be read", len(folder.failed), source.label)
                text = folder.text
            elif source.kind is SourceKind.TRANSCRIPT:
                text = await self._store.read_transcript(source.path)
            else:
                text = await self._store.read_document(source.path)
            ensure_within_budget(text, self._settings.max_context_tokens)
        except MaterialsUnavailableError as e:
            raise MaterialsUnavailableError(f"Error loading {source.label}") from e

        if not text.strip():
            raise EmptyMaterialsError()
        return text

    async def _generate_and_compose(self, generator: TextGenerator, prompt: str, *, query_text: str) -> str:
        generated = await generator.generate(prompt, self._generation_config)
        composed = compose_response(generated, self._settings.syllabus_link)
        status = await self._telemetry.log(TelemetryRecord(response_text=composed, query_text=query_text))
        return annotate(composed, status)
