"""Thin command-line wrapper that runs a prompt through the Codex CLI."""

from __future__ import annotations

import argparse
import subprocess
import sys
from collections.abc import Sequence

DEFAULT_MODEL = "gpt-5.1-codex-mini"
PROG = "pockit-agent"


def build_command(model: str, prompt: str) -> tuple[str, list[str]]:
    """Return the executable and its arguments for a Codex invocation."""
    return "codex", ["exec", "--full-auto", "-m", model, prompt]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Wraps the Codex CLI into a simple agent entry point.",
    )
    parser.add_argument(
        "--model",
        default=DEFAULT_MODEL,
        help="Codex model to target.",
    )
    parser.add_argument(
        "prompt",
        metavar="PROMPT",
        nargs="+",
        help="Prompt text that should be executed by Codex.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run Codex with the given prompt; return its exit status."""
    args = _parser().parse_args(argv)
    prompt = " ".join(args.prompt)
    executable, cmd_args = build_command(args.model, prompt)
    print(f"Running agent command: {executable} {' '.join(cmd_args)}")

    try:
        completed = subprocess.run([executable, *cmd_args], check=False)
    except OSError as err:
        print(f"{PROG}: {err}", file=sys.stderr)
        return 1

    if completed.returncode == 0:
        return 0
    return completed.returncode if completed.returncode > 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())