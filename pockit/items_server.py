"""Small HTTP service that keeps a list of string items in memory."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field

from flask import Flask, jsonify, request

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


@dataclass
class AppState:
    """Shared, lock-protected store of items."""

    items: list[str] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def snapshot(self) -> list[str]:
        with self.lock:
            return list(self.items)

    def add(self, value: str) -> list[str]:
        """Append ``value`` and return the items as they stand afterwards."""
        with self.lock:
            self.items.append(value)
            return list(self.items)


def _error(message: str, status: int):
    response = jsonify({"error": message})
    response.status_code = status
    return response


def create_app(state: AppState) -> Flask:
    """Build the application serving ``GET`` and ``POST`` on ``/items``."""
    app = Flask(__name__)

    @app.get("/items")
    def get_items():
        return jsonify({"items": state.snapshot()})

    @app.post("/items")
    def create_item():
        if not request.is_json:
            return _error("expected a JSON body", 415)
        payload = request.get_json(silent=True)
        if payload is None:
            return _error("malformed JSON body", 400)
        value = payload.get("value") if isinstance(payload, dict) else None
        if not isinstance(value, str):
            return _error("field 'value' must be a string", 422)
        return jsonify({"items": state.add(value)})

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the items application until interrupted."""
    parser = argparse.ArgumentParser(prog="pockit-items", description="In-memory items service.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    app = create_app(AppState())
    print(f"Server running on http://{args.host}:{args.port}")
    app.run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())