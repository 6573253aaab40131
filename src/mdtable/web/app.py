"""FastAPI web view for the Markdown table editor.

Serves a single-page grid editor.  The page reports every gesture as an
Event to ``/api/event``; the server applies it through the state machine and
answers with the outcome and a fresh snapshot, which the page re-renders.
Copying happens in the browser (Clipboard API, then the legacy execCommand
fallback), which reports the outcome back as a ``copy_result`` event.

Usage:
    python -m mdtable.web.app
    # => Uvicorn running on http://127.0.0.1:8000
"""

import logging
import uuid
from dataclasses import asdict
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from mdtable import config
from mdtable.interaction.events import Event
from mdtable.interaction.machine import dispatch
from mdtable.interaction.state import EditorState
from mdtable.table.errors import TableParseError
from mdtable.table.parsing import parse_markdown

logger = logging.getLogger(__name__)

# Path to static frontend assets
STATIC_DIR = Path(__file__).parent / "static"

# ---------------------------------------------------------------------------
# In-memory state (ephemeral, lost on server restart)
# ---------------------------------------------------------------------------

_sessions: dict[str, EditorState] = {}  # session_id -> editor state


def _get_session(session_id: str | None) -> tuple[str, EditorState]:
    """Return (session_id, state), creating a fresh default table for unknown IDs."""
    if not session_id:
        session_id = str(uuid.uuid4())
    if session_id not in _sessions:
        _sessions[session_id] = EditorState()
        logger.info("New session created: %s", session_id)
    return session_id, _sessions[session_id]


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------


class EventRequest(BaseModel):
    session_id: str | None = None
    event: Event


class SessionRequest(BaseModel):
    session_id: str | None = None


class LoadRequest(BaseModel):
    session_id: str | None = None
    markdown: str


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title="Markdown Table Editor")


def _state_payload(session_id: str, state: EditorState) -> dict:
    return {"session_id": session_id, "snapshot": state.snapshot().model_dump()}


@app.get("/", response_class=HTMLResponse)
async def index():
    """Serve the editor UI."""
    return HTMLResponse(STATIC_DIR.joinpath("index.html").read_text(encoding="utf-8"))


@app.get("/api/state")
async def get_state(session_id: str | None = None):
    """Return the current snapshot (creates the session on first use)."""
    session_id, state = _get_session(session_id)
    return JSONResponse(_state_payload(session_id, state))


@app.post("/api/event")
async def post_event(body: EventRequest):
    """Apply one user gesture and return the outcome plus the new snapshot."""
    session_id, state = _get_session(body.session_id)
    result = dispatch(state, body.event)
    if result.warning:
        logger.info("Session %s: %s -> %s", session_id, body.event.kind.value, result.warning)
    payload = _state_payload(session_id, state)
    payload["result"] = asdict(result)
    return JSONResponse(payload)


@app.post("/api/reset")
async def reset(body: SessionRequest):
    """Replace the session's table with the startup table."""
    session_id, state = _get_session(body.session_id)
    state.reset()
    logger.info("Session reset: %s", session_id)
    return JSONResponse(_state_payload(session_id, state))


@app.post("/api/load")
async def load(body: LoadRequest):
    """Replace the session's table with one parsed from Markdown text."""
    session_id, state = _get_session(body.session_id)
    try:
        table = parse_markdown(body.markdown)
    except TableParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    state.reset(table)
    logger.info("Session %s loaded a %dx%d table", session_id, table.row_count, table.column_count)
    return JSONResponse(_state_payload(session_id, state))


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main(host: str | None = None, port: int | None = None):
    """Start the web server via uvicorn."""
    import uvicorn  # pylint: disable=import-outside-toplevel

    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=host or config.HOST, port=port or config.PORT)


if __name__ == "__main__":
    main()
