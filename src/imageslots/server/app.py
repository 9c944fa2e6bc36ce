"""FastAPI HTTP server for the image slot uploader.

Routes::

    GET  /                     -> HTML form showing the current images
    POST /upload?image=<slot>  <- multipart file field named after the slot
    POST /run-script           -> combined output of the configured script
    GET  /uploads/<name>       -> stored slot files

Every error response is a plain-text body.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from jinja2 import TemplateError
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException

from imageslots import __version__
from imageslots.config.settings import ServerConfig
from imageslots.runner.base import ScriptError, ScriptRunner, resolve_script_path
from imageslots.runner.subprocess_backend import SubprocessScriptRunner
from imageslots.server.templates import templates
from imageslots.storage.slots import SlotStore, SlotStoreError
from imageslots.upload.validate import (
    UploadRejected,
    check_declared_length,
    parse_slot,
    validate_upload,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------

def create_app(
    config: ServerConfig | None = None,
    runner: ScriptRunner | None = None,
) -> FastAPI:
    """Create the upload server application.

    The upload directory is created immediately so the static mount has
    something to serve from.

    Args:
        config: Server configuration. Defaults are used if None.
        runner: Optional pre-configured ScriptRunner (for testing).
    """
    config = config or ServerConfig()
    store = SlotStore(config.upload_dir)
    store.ensure_dir()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Serving uploads from %s, script %s",
            store.upload_dir, config.script_path,
        )
        yield
        logger.info("Server stopped")

    app = FastAPI(
        title="imageslots",
        description="Three-slot PNG upload form with a script trigger",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.store = store
    app.state.runner = runner if runner is not None else SubprocessScriptRunner()

    @app.exception_handler(StarletteHTTPException)
    async def plain_text_error(request: Request, exc: StarletteHTTPException) -> Response:
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )

    app.mount("/uploads", StaticFiles(directory=store.upload_dir), name="uploads")

    @app.get("/", response_class=HTMLResponse)
    async def show_form(request: Request) -> Response:
        s: SlotStore = app.state.store
        view = s.page_view()
        try:
            return templates.TemplateResponse(request, "index.html", view.model_dump())
        except TemplateError as e:
            logger.exception("Unable to render upload page")
            raise HTTPException(status_code=500, detail="Unable to render page") from e

    @app.post("/upload")
    async def upload_image(request: Request, image: str | None = None) -> Response:
        cfg: ServerConfig = app.state.config
        s: SlotStore = app.state.store
        try:
            check_declared_length(request.headers.get("content-length"), cfg.max_upload_bytes)
            slot = parse_slot(image)
        except UploadRejected as e:
            logger.info("Upload rejected: %s", e.message)
            raise HTTPException(status_code=e.status_code, detail=e.message) from e

        async with request.form() as form:
            upload = form.get(slot.value)
            if not isinstance(upload, UploadFile):
                raise HTTPException(status_code=400, detail="No file uploaded")
            try:
                await validate_upload(upload, cfg.max_upload_bytes)
            except UploadRejected as e:
                logger.info("Upload to %s rejected: %s", slot.value, e.message)
                raise HTTPException(status_code=e.status_code, detail=e.message) from e
            try:
                await run_in_threadpool(s.save, slot, upload.file)
            except SlotStoreError as e:
                logger.error("Upload to %s failed: %s", slot.value, e)
                raise HTTPException(status_code=500, detail="Unable to save the file") from e

        return RedirectResponse("/", status_code=303)

    @app.post("/run-script")
    async def run_script() -> Response:
        cfg: ServerConfig = app.state.config
        r: ScriptRunner = app.state.runner
        try:
            script = resolve_script_path(cfg.script_path)
        except ScriptError as e:
            logger.error("Error: %s", e)
            raise HTTPException(status_code=500, detail=str(e)) from e

        result = await r.run(script)
        if not result.ok:
            body = f"Script failed: {result.error}\nOutput: ".encode() + result.output
            return Response(content=body, status_code=500, media_type="text/plain")
        return Response(content=result.output, media_type="text/plain")

    return app


# ---------------------------------------------------------------------------
# Standalone entry point
# ---------------------------------------------------------------------------

def main(config: ServerConfig | None = None) -> None:
    """Run the upload server."""
    config = config or ServerConfig()
    app = create_app(config)
    logger.info("Server starting at http://%s:%d...", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
