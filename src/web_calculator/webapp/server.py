"""
Flask server for the calculator web UI.

Serves the calculator page and a JSON API that applies button presses and
key strokes to a per-session arithmetic engine.
"""

import logging
import os

from flask import Flask, jsonify, render_template, request

from ..errors import CalculatorError
from ..keymap import CALCULATOR_KEYS
from .services import apply_action
from .sessions import create_session, delete_session, locked_engine

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Configuration
DEFAULT_HOST = os.environ.get("WEB_CALCULATOR_HOST", "127.0.0.1")
DEFAULT_PORT = int(os.environ.get("WEB_CALCULATOR_PORT", "5000"))


@app.route("/")
def index():
    """Render the calculator page."""
    return render_template("index.html", calculator_keys=sorted(CALCULATOR_KEYS))


@app.route("/api/sessions", methods=["POST"])
def new_session():
    """
    Create a calculator session.

    Returns:
        {"session_id": "...", "current_line": "0", "previous_line": "", ...}
    """
    session_id = create_session()
    with locked_engine(session_id) as engine:
        return jsonify({"session_id": session_id, **engine.snapshot()}), 201


@app.route("/api/sessions/<session_id>", methods=["GET"])
def get_session_state(session_id: str):
    """
    Get the current display and state of a session.

    Returns:
        {
            "current_operand": "...",
            "previous_operand": "...",
            "pending_operator": "ADD|SUB|MUL|DIV" | null,
            "reset_on_next_input": false,
            "current_line": "...",
            "previous_line": "...",
            "error": false
        }
    """
    with locked_engine(session_id) as engine:
        if engine is None:
            return jsonify({"error": "Session not found"}), 404
        return jsonify(engine.snapshot())


@app.route("/api/sessions/<session_id>/actions", methods=["POST"])
def post_action(session_id: str):
    """
    Apply a calculator action.

    Expected JSON payload:
        {
            "action": "digit|dot|operator|equals|clear|backspace|percentage|key",
            "value": "..."  // depends on action
        }

    Returns:
        JSON response with the session state after the action
    """
    data = request.get_json(silent=True)

    if not data:
        return jsonify({"error": "No data provided"}), 400

    if not isinstance(data, dict):
        return jsonify({"error": "Expected a JSON object"}), 400

    action = data.get("action", "")

    with locked_engine(session_id) as engine:
        if engine is None:
            return jsonify({"error": "Session not found"}), 404
        try:
            snapshot = apply_action(engine, action, data.get("value"))
        except CalculatorError as e:
            logger.warning("Rejected action for session %s: %s", session_id, e)
            return jsonify({"error": str(e)}), 400

    return jsonify(snapshot)


@app.route("/api/sessions/<session_id>", methods=["DELETE"])
def end_session(session_id: str):
    """Drop a calculator session."""
    if not delete_session(session_id):
        return jsonify({"error": "Session not found"}), 404
    return jsonify({"ok": True})


def main():
    """Run the Flask development server."""
    import argparse

    parser = argparse.ArgumentParser(description="Run the calculator web server")
    parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help=f"Host to bind to (default: {DEFAULT_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to bind to (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode and debug logging",
    )

    args = parser.parse_args()
    run_server(args.host, args.port, args.debug)


def run_server(host: str, port: int, debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting calculator web server at http://%s:%s", host, port)
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
