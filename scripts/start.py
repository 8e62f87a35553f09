#!/usr/bin/env python3
"""
Production startup script.

Validates PORT and replaces this process with gunicorn serving app.wsgi:app.

Usage:
    python scripts/start.py

The profile store lives in process memory, so gunicorn runs exactly one
worker process and serves concurrent requests with threads.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DEFAULT_PORT = "8080"
DEFAULT_THREADS = "8"


def _validated_int(name: str, raw: str, lo: int, hi: int) -> int:
    try:
        value = int(raw)
        if value < lo or value > hi:
            raise ValueError(f"{name} out of range")
    except ValueError:
        print(f"ERROR: Invalid {name} value '{raw}'. Must be integer {lo}-{hi}.", flush=True)
        sys.exit(1)
    return value


def gunicorn_argv(port: int, threads: int) -> list[str]:
    return [
        "gunicorn",
        "app.wsgi:app",
        "--bind", f"0.0.0.0:{port}",
        "--workers", "1",
        "--threads", str(threads),
        "--timeout", "60",
        "--access-logfile", "-",
        "--error-logfile", "-",
    ]


def main() -> None:
    port = os.environ.get("PORT", "").strip()
    if not port:
        print(f"WARNING: PORT not set, using default {DEFAULT_PORT}", flush=True)
        port = DEFAULT_PORT
    port_int = _validated_int("PORT", port, 1, 65535)

    threads = os.environ.get("GUNICORN_THREADS", "").strip() or DEFAULT_THREADS
    threads_int = _validated_int("GUNICORN_THREADS", threads, 1, 256)

    print(f"Server starting on :{port_int}", flush=True)
    print("Health check endpoint ready at /healthz", flush=True)

    # exec so gunicorn becomes PID 1 and receives signals directly
    os.execvp("gunicorn", gunicorn_argv(port_int, threads_int))


if __name__ == "__main__":
    main()
