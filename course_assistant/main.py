from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from course_assistant.api.assistant import router as assistant_router
from course_assistant.core.app_context import AppContext
from course_assistant.core.errors import AssistantError
from course_assistant.core.settings import Settings
from course_assistant.infra.qualtrics_sink import TelemetrySink
from course_assistant.llm.gemini_client import TextGenerator

log = logging.getLogger("course_assistant")


def _setup_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format="%(asctime)s  %(levelname)s  %(message)s")


async def assistant_error_handler(request: Request, exc: AssistantError) -> PlainTextResponse:
    if exc.status_code >= 500:
        log.error("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    else:
        log.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def catch_unexpected_errors(request: Request, call_next) -> Response:
    # Runs inside CORSMiddleware so unexpected 500s still carry CORS headers.
    try:
        return await call_next(request)
    except Exception:
        log.exception("Unhandled error on %s %s", request.method, request.url.path)
        return PlainTextResponse("Internal Server Error", status_code=500)


def create_app(
    settings: Settings | None = None,
    *,
    generator: TextGenerator | None = None,
    telemetry: TelemetrySink | None = None,
) -> FastAPI:
    settings = settings or Settings()
    _setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.ctx = AppContext(settings, generator=generator, telemetry=telemetry)
        yield
        await app.state.ctx.shutdown()

    app = FastAPI(title="Course Assistant", version="0.1.0", lifespan=lifespan)
    app.middleware("http")(catch_unexpected_errors)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(AssistantError, assistant_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.include_router(assistant_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("course_assistant.main:app", host="0.0.0.0", port=8000, reload=False)
