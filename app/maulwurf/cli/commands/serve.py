"""Serve command.

Runs a JSON-lines request loop on stdin/stdout so a front end process
can drive the backend. Each request line is an object
``{"id": ..., "op": "<operation>", "args": {...}}``; each response line
is ``{"id": ..., "ok": true, "result": ...}`` or
``{"id": ..., "ok": false, "error": {"kind": ..., "message": ...}}``.

Requests are handled one at a time in arrival order.
"""

import json
import sys
from typing import Annotated, Any, TextIO

import typer

from maulwurf.cli.types import get_state
from maulwurf.core.crash import install_crash_handler
from maulwurf.core.errors import MaulwurfError
from maulwurf.core.operations import dispatch
from maulwurf.core.state import AppState
from maulwurf.logs.channel import ConsoleEchoWorker
from maulwurf.utils.formatting import err_console


def handle_request(state: AppState, line: str) -> dict[str, Any]:
    """Handle one request line and build the response object.

    Args:
        state: Application state.
        line: Raw JSON request line.

    Returns:
        Response object (never raises for bad input).
    """
    try:
        request = json.loads(line)
    except json.JSONDecodeError as e:
        return {"id": None, "ok": False, "error": {"kind": "BadRequest", "message": str(e)}}

    if not isinstance(request, dict) or not isinstance(request.get("op"), str):
        return {
            "id": None,
            "ok": False,
            "error": {"kind": "BadRequest", "message": "request needs an 'op' string"},
        }

    request_id = request.get("id")
    args = request.get("args") or {}
    if not isinstance(args, dict):
        return {
            "id": request_id,
            "ok": False,
            "error": {"kind": "BadRequest", "message": "'args' must be an object"},
        }

    try:
        result = dispatch(state, request["op"], args)
    except MaulwurfError as e:
        return {"id": request_id, "ok": False, "error": e.to_dict()}
    return {"id": request_id, "ok": True, "result": result}


def serve_lines(state: AppState, stdin: TextIO, stdout: TextIO) -> int:
    """Answer requests until stdin is exhausted.

    Args:
        state: Application state.
        stdin: Request stream.
        stdout: Response stream.

    Returns:
        Number of requests handled.
    """
    handled = 0
    for line in stdin:
        if not line.strip():
            continue
        response = handle_request(state, line)
        stdout.write(json.dumps(response, ensure_ascii=False) + "\n")
        stdout.flush()
        handled += 1
    return handled


def serve(
    ctx: typer.Context,
    echo_logs: Annotated[
        bool,
        typer.Option(
            "--echo-logs",
            help="Stream accepted log messages to stderr from a background thread.",
        ),
    ] = False,
) -> None:
    """Serve backend operations as JSON lines over stdin/stdout."""
    state = get_state(ctx)
    install_crash_handler(state)

    worker: ConsoleEchoWorker | None = None
    if echo_logs:
        # The worker replaces the direct echo so lines are not printed twice
        state.config = state.config.model_copy(update={"console_echo": False})
        worker = ConsoleEchoWorker(state.channel, err_console)
        worker.start()

    state.log("info", "Backend setup complete")
    try:
        serve_lines(state, sys.stdin, sys.stdout)
    finally:
        if worker is not None:
            worker.stop()
