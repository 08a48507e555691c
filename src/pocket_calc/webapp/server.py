"""
Flask server for the pocket-calc web UI.

Serves the calculator page and exposes the session state machine over a small
JSON API.
"""

import logging
import os

from flask import Flask, jsonify, render_template, request

from ..actions import ActionError
from ..keymap import BUTTON_LAYOUT, action_from_payload, payload_for_action
from ..session import CalculatorSession
from ..view import snapshot

app = Flask(__name__)

# Configuration
DEFAULT_HOST = os.environ.get("POCKET_CALC_HOST", "127.0.0.1")
DEFAULT_PORT = int(os.environ.get("POCKET_CALC_PORT", "5001"))
LOG_LEVEL = os.environ.get("POCKET_CALC_LOG_LEVEL", "WARNING")

# Global calculator session
session = CalculatorSession()

logger = logging.getLogger(__name__)


@app.route("/")
def index():
    """Render the calculator page."""
    button_payloads = {button.button_id: payload_for_action(button.action) for button in BUTTON_LAYOUT}
    return render_template("index.html", buttons=BUTTON_LAYOUT, button_payloads=button_payloads)


@app.route("/api/state", methods=["GET"])
def get_state():
    """Return the current rendered state."""
    return jsonify(snapshot(session.state))


@app.route("/api/actions", methods=["POST"])
def post_action():
    """
    Apply one calculator action.

    Expected JSON payload:
        {
            "type": "INPUT_DIGIT|INPUT_DECIMAL|CHOOSE_OPERATOR|CALCULATE|CLEAR|...",
            "payload": ...  // depends on type
        }

    Returns:
        JSON snapshot of the new state
    """
    data = request.get_json(silent=True)

    if not data:
        return jsonify({"error": "No JSON data provided"}), 400

    try:
        action = action_from_payload(data)
    except ActionError as e:
        logger.info("Rejected action payload %r: %s", data, e)
        return jsonify({"error": str(e)}), 400

    return jsonify(snapshot(session.dispatch(action)))


@app.route("/api/keys", methods=["POST"])
def post_key():
    """
    Translate and apply a key press.

    Expected JSON payload:
        {"key": "Enter"}

    Returns:
        JSON snapshot; ``ignored`` is true when the key has no binding
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or not isinstance(data.get("key"), str):
        return jsonify({"error": "key is required"}), 400

    state = session.press(data["key"])
    if state is None:
        return jsonify({**snapshot(session.state), "ignored": True})

    return jsonify({**snapshot(state), "ignored": False})


@app.route("/api/reset", methods=["POST"])
def reset():
    """Replace the session with a fresh initial state."""
    return jsonify(snapshot(session.reset()))


def main():
    """Run the Flask development server."""
    import argparse

    parser = argparse.ArgumentParser(description="Run the pocket-calc web server")
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
        "--log-level",
        default=LOG_LEVEL,
        help=f"Logging level (default: {LOG_LEVEL})",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    print("Starting pocket-calc web server...")
    print(f"Access at: http://{args.host}:{args.port}")

    app.run(host=args.host, port=args.port, debug=False)


if __name__ == "__main__":
    main()
