"""HTTP boundary for nth-smallest.

Exposes the selection service over Flask::

    POST /api/numbers/find-min?filePath=/data/numbers.xlsx&n=3   ->  200  4
    GET  /health                                                ->  200  {"status": "ok", ...}

Client mistakes (missing parameters, bad rank, unreadable source) map to
400; anything else maps to 500 and is logged with its traceback.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from nth_smallest.config import NthSmallestConfig
from nth_smallest.exceptions import InvalidArgumentError, SourceAccessError
from nth_smallest.service import SelectionService
from nth_smallest.sources.loader import load_numbers

logger = logging.getLogger("nth_smallest")


def create_app(
    config: NthSmallestConfig | None = None,
    service: SelectionService | None = None,
) -> Flask:
    """Build the Flask application.

    Args:
        config: Configuration; loaded from the environment when omitted.
        service: Pre-built service; built from *config* when omitted.

    Returns:
        A Flask app with the ``find-min`` and ``health`` routes.
    """
    config = config or NthSmallestConfig()
    service = service or SelectionService.from_config(config)

    app = Flask(__name__)

    @app.route("/api/numbers/find-min", methods=["POST"])
    def find_nth_minimal_number():
        file_path = request.values.get("filePath")
        raw_n = request.values.get("n")
        if not file_path:
            return jsonify(error="Missing required parameter 'filePath'"), 400
        if raw_n is None:
            return jsonify(error="Missing required parameter 'n'"), 400
        try:
            n = int(raw_n)
        except ValueError:
            return jsonify(error=f"Parameter 'n' must be an integer, got {raw_n!r}"), 400

        try:
            numbers = load_numbers(file_path, config)
            result = service.find_nth_smallest(numbers, n)
        except (InvalidArgumentError, SourceAccessError) as exc:
            logger.info("Rejected find-min request: %s", exc)
            return jsonify(error=str(exc)), 400
        except Exception as exc:  # Intentional: every other failure becomes a 500
            logger.exception("find-min failed for %s", file_path)
            return jsonify(error=f"Error processing file: {exc}"), 500

        return jsonify(result)

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify(status="ok", strategy=service.strategy)

    return app


def serve(config: NthSmallestConfig | None = None) -> None:
    """Run the HTTP boundary on ``config.host:config.port`` and block."""
    config = config or NthSmallestConfig()
    app = create_app(config)
    logger.info(
        "Serving nth-smallest on %s:%d (strategy=%s)",
        config.host,
        config.port,
        config.selection_strategy,
    )
    app.run(host=config.host, port=config.port)
