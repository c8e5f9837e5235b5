# pockit

A small toolkit of self-contained pieces:

- `pockit.segment_tree.SegmentTree`: a sum segment tree over a list of
  integers, with point updates and inclusive range queries.
- `pockit.stack.Stack`: a last-in, first-out stack.
- `pockit.agent`: builds and runs a `codex exec` command line for a prompt.
- `pockit.items_server`: a JSON HTTP service that keeps a list of strings.
- `pockit.segment_tree_server`: a JSON HTTP service around a segment tree.
- `pockit.basics`: small helpers (`add`, `reverse`, `fizzbuzz`, integer
  wrapping and saturation, and more) and a command that prints a tour of them.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Segment tree

```python
from pockit.segment_tree import SegmentTree

st = SegmentTree([5, 8, 7, 2, 10, 2, 2])
st.query(0, 6)      # 36
st.query(0, 3)      # 22
st.update(3, 6)
st.query(0, 6)      # 40
st.array            # [5, 8, 7, 6, 10, 2, 2]
st.logical_size     # 13
st.tree[:13]        # [40, 26, 14, 13, 13, 12, 2, 5, 8, 7, 6, 10, 2]
```

Queries are inclusive at both ends; a negative bound raises `ValueError`.
`update` with an index outside the values raises `IndexError`. A tree built
from an empty list answers every query with 0 and ignores updates.

`tree` is the whole backing list of `4 * len(st)` node slots; the first
`logical_size` of them are the nodes the tree actually uses.

## Stack

```python
from pockit.stack import Stack

stack = Stack()
stack.push(10)
stack.push(20)
stack.pop()      # 20
len(stack)       # 1
stack.pop()      # 10
stack.pop()      # None
stack.is_empty() # True
```

`pockit-stack` runs a short demonstration that pushes and pops a few values.

## Agent launcher

```python
from pockit.agent import build_command

build_command("gpt-5.1-codex-mini", "Hello Codex")
# ("codex", ["exec", "--full-auto", "-m", "gpt-5.1-codex-mini", "Hello Codex"])
```

From the shell, the words of the prompt are joined with spaces:

```
pockit-agent --model gpt-5.1-codex-mini write a haiku about stacks
```

The model defaults to `gpt-5.1-codex-mini`. The command prints the line it
is about to run, then runs `codex`. If `codex` exits with a failure, the
launcher exits with the same code (or 1 if it was ended by a signal); if it
cannot be started, the launcher reports the error and exits with 1.

## Items service

```
pockit-items-server [--host HOST] [--port PORT]
```

Listens on `http://127.0.0.1:3000` by default. To use it inside your own
code, build the Flask application with
`create_app(AppState())`.

- `GET /items` returns `{"items": [...]}`.
- `POST /items` with `{"value": "some text"}` appends the value and returns
  the updated list in the same shape.

A body that is not JSON gets 415, malformed JSON gets 400, and a missing or
non-string `value` gets 422, each with `{"error": "..."}`.

## Segment tree service

```
pockit-segment-tree-server [--host HOST] [--port PORT]
```

Listens on `http://127.0.0.1:8000` by default. When started this way it
allows cross-origin requests from any origin. The application itself is
built with `create_routes(TreeState())`; `tree_response(tree)` gives the
JSON shape used by the endpoints.

- `POST /segment-tree` with `{"input": [5, 8, 7, 2, 10, 2, 2]}` builds a new
  tree and returns `{"array": [...], "tree": [...]}`.
- `GET /segment-tree` returns the current array and tree.
- `PUT /segment-tree` with `{"idx": 3, "value": 6}` updates one element and
  returns the new array and tree.
- `GET /segment-tree/query?left=0&right=6` returns `{"result": 36}`.

The `tree` list holds only the nodes the tree actually uses. Errors come back
as `{"error": "..."}`: 415 for a non-JSON body, 400 for malformed JSON, bad
query parameters or an index out of range, 422 for fields of the wrong type,
and 500 when no tree has been created yet.

## Basics

```
pockit-basics
```

Prints a walk through the helpers in `pockit.basics`, for example:

```python
from pockit.basics import add, fizzbuzz, wrap_unsigned, wrap_signed, saturating_u8

add(1, 2)                  # 3
fizzbuzz(6)                # ["1", "2", "fizz", "4", "buzz"]
wrap_unsigned(1000, 8)     # 232
wrap_signed(1000, 8)       # -24
saturating_u8(300.0)       # 255
saturating_u8(float("nan"))  # 0
```

## What it does not do

Both HTTP services keep their data in memory only: everything is lost when
the process stops, and there is no authentication. The segment tree service
holds a single tree at a time; each `POST` replaces it.