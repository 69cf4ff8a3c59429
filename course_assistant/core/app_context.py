from __future__ import annotations

from course_assistant.core.pipeline import AssistantPipeline
from course_assistant.core.settings import Settings
from course_assistant.infra.content_store import ContentStore
from course_assistant.infra.qualtrics_sink import NullTelemetrySink, QualtricsTelemetrySink, TelemetrySink
from course_assistant.llm.gemini_client import GeminiClient, TextGenerator


class AppContext:
    """
    Process-level application context.

    Built once at startup from immutable Settings:
    - the content store over the materials directory
    - the Gemini client, absent when no API key is configured
    - the telemetry sink, a no-op unless all Qualtrics credentials are set
    Requests only read from it.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        generator: TextGenerator | None = None,
        telemetry: TelemetrySink | None = None,
    ) -> None:
        self.settings = settings
        self.store = ContentStore(max_folder_files=settings.max_folder_files)

        self._owned_clients: list[GeminiClient | QualtricsTelemetrySink] = []

        if generator is None and settings.gemini_api_key:
            gemini = GeminiClient(
                api_key=settings.gemini_api_key,
                model=settings.gemini_model,
                base_url=settings.gemini_base_url,
                timeout_s=settings.gemini_timeout_s,
            )
            self._owned_clients.append(gemini)
            generator = gemini
        self.generator = generator

        if telemetry is None:
            telemetry_config = settings.telemetry_config()
            if telemetry_config is None:
                telemetry = NullTelemetrySink()
            else:
                sink = QualtricsTelemetrySink(telemetry_config, timeout_s=settings.qualtrics_timeout_s)
                self._owned_clients.append(sink)
                telemetry = sink
        self.telemetry = telemetry

        self.pipeline = AssistantPipeline(
            settings=settings,
            store=self.store,
            generator=self.generator,
            telemetry=self.telemetry,
        )

    async def shutdown(self) -> None:
        for client in self._owned_clients:
            await client.aclose()
