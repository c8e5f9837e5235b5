"""HTTP service exposing a single in-memory segment tree."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field

from flask import Flask, jsonify, request

from pockit.segment_tree import SegmentTree

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


@dataclass
class TreeState:
    """Holds the current tree, if one has been created, behind a lock."""

    tree: SegmentTree | None = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


class _RequestError(Exception):
    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def tree_response(tree: SegmentTree) -> dict[str, list[int]]:
    """The values and the built part of the node list, as a JSON-ready dict."""
    return {"array": tree.array, "tree": tree.tree[: tree.logical_size]}


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _json_object() -> dict:
    if not request.is_json:
        raise _RequestError("expected a JSON body", 415)
    payload = request.get_json(silent=True)
    if payload is None:
        raise _RequestError("malformed JSON body", 400)
    if not isinstance(payload, dict):
        raise _RequestError("expected a JSON object", 422)
    return payload


def _query_index(name: str) -> int:
    raw = request.args.get(name)
    if raw is None:
        raise _RequestError(f"missing query parameter '{name}'", 400)
    try:
        value = int(raw)
    except ValueError:
        raise _RequestError(f"query parameter '{name}' must be an integer", 400) from None
    if value < 0:
        raise _RequestError(f"query parameter '{name}' must not be negative", 400)
    return value


def _require_tree(state: TreeState) -> SegmentTree:
    if state.tree is None:
        raise _RequestError("tree not initialized", 500)
    return state.tree


def create_routes(state: TreeState) -> Flask:
    """Build the application serving the ``/segment-tree`` endpoints."""
    app = Flask(__name__)

    @app.errorhandler(_RequestError)
    def handle_request_error(err: _RequestError):
        response = jsonify({"error": err.message})
        response.status_code = err.status
        return response

    @app.post("/segment-tree")
    def create_tree():
        payload = _json_object()
        values = payload.get("input")
        if not isinstance(values, list) or not all(_is_int(v) for v in values):
            raise _RequestError("field 'input' must be a list of integers", 422)
        tree = SegmentTree(values)
        with state.lock:
            state.tree = tree
        return jsonify(tree_response(tree))

    @app.get("/segment-tree")
    def get_tree():
        with state.lock:
            return jsonify(tree_response(_require_tree(state)))

    @app.put("/segment-tree")
    def update_tree():
        payload = _json_object()
        idx = payload.get("idx")
        value = payload.get("value")
        if not _is_int(idx) or idx < 0:
            raise _RequestError("field 'idx' must be a non-negative integer", 422)
        if not _is_int(value):
            raise _RequestError("field 'value' must be an integer", 422)
        with state.lock:
            tree = _require_tree(state)
            try:
                tree.update(idx, value)
            except IndexError as err:
                raise _RequestError(str(err), 400) from None
            return jsonify(tree_response(tree))

    @app.get("/segment-tree/query")
    def query_tree():
        left = _query_index("left")
        right = _query_index("right")
        with state.lock:
            result = _require_tree(state).query(left, right)
        return jsonify({"result": result})

    return app


def _allow_any_origin(app: Flask) -> Flask:
    @app.after_request
    def add_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "*"
        return response

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the segment tree application until interrupted."""
    parser = argparse.ArgumentParser(
        prog="pockit-segment-tree", description="In-memory segment tree service."
    )
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    app = _allow_any_origin(create_routes(TreeState()))
    print(f"Server running on http://{args.host}:{args.port}")
    app.run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())