"""FastAPI web surface for the presentation shell.

Server-rendered: every action is a form POST that mutates the session's
ShellController and redirects back to the page. Copy buttons call the JSON
copy endpoint and write the returned text to the browser clipboard.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.routing import Match

from ..constants import (
    APP_TAGLINE,
    APP_TITLE,
    LOADING_MESSAGE,
    TOPIC_PLACEHOLDER,
    Tab,
)
from ..errors import UnknownCopyTargetError
from ..shell import Generator, NullClipboard, ShellController, post_copy_id
from .sessions import MAX_SESSIONS, SESSION_COOKIE, SessionStore

logger = logging.getLogger("digipack")

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

# Endpoints that read or mutate the per-session shell
_SESSION_ROUTES = frozenset({"index", "generate", "select_tab", "copy_item"})


def _is_session_route(app: FastAPI, request: Request) -> bool:
    for route in app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "name", None) in _SESSION_ROUTES
    return False


def create_app(
    generator: Generator | None = None,
    config_path: Path | None = None,
    max_sessions: int = MAX_SESSIONS,
) -> FastAPI:
    """Build the web app.

    Without a generator, one is created from the environment; a missing API
    key raises ConfigurationError here, before the server starts.
    """
    if generator is None:
        from ..content import PackageGenerator
        from ..providers import load_provider_config

        generator = PackageGenerator.from_settings(config=load_provider_config(config_path))

    sessions = SessionStore(
        lambda: ShellController(generator, NullClipboard()),
        max_sessions=max_sessions,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("digipack web surface starting")
        yield
        sessions.close_all()
        logger.info("digipack web surface stopped")

    app = FastAPI(title=APP_TITLE, lifespan=lifespan)
    app.state.sessions = sessions
    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

    @app.middleware("http")
    async def attach_shell(request: Request, call_next):
        if not _is_session_route(app, request):
            return await call_next(request)

        cookie = request.cookies.get(SESSION_COOKIE)
        session_id, shell = sessions.get_or_create(cookie)
        request.state.shell = shell
        response = await call_next(request)
        if cookie != session_id:
            response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
        return response

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        shell: ShellController = request.state.shell
        return templates.TemplateResponse(
            request=request,
            name="index.html",
            context={
                "state": shell.state,
                "tabs": list(Tab),
                "Tab": Tab,
                "post_copy_id": post_copy_id,
                "copy_feedback_ms": int(shell.copy_feedback_seconds * 1000),
                "title": APP_TITLE,
                "tagline": APP_TAGLINE,
                "placeholder": TOPIC_PLACEHOLDER,
                "loading_message": LOADING_MESSAGE,
            },
        )

    @app.post("/generate")
    async def generate(request: Request, topic: str = Form("")):
        shell: ShellController = request.state.shell
        await shell.submit(topic)
        return RedirectResponse(url="/", status_code=303)

    @app.post("/tabs/{tab}")
    def select_tab(request: Request, tab: Tab):
        shell: ShellController = request.state.shell
        shell.select_tab(tab)
        return RedirectResponse(url="/", status_code=303)

    @app.post("/copy/{item_id}")
    async def copy_item(request: Request, item_id: str):
        shell: ShellController = request.state.shell
        try:
            text = shell.copy(item_id)
        except UnknownCopyTargetError:
            raise HTTPException(status_code=404, detail=f"Nothing to copy for {item_id!r}")
        return {
            "id": item_id,
            "text": text,
            "copied": shell.state.is_copied(item_id),
            "reset_after": shell.copy_feedback_seconds,
        }

    @app.get("/health")
    def health():
        return {"status": "ok", "sessions": len(sessions)}

    return app
