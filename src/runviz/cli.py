#!/usr/bin/env python3
"""
Runviz CLI tool

Command line interface for starting the dashboard, the terminal UI, and
printing metric summaries
"""

from __future__ import annotations

import argparse
import os
import socket
import sys
from pathlib import Path

import polars as pl
import uvicorn

from runviz.exceptions import RunvizError
from runviz.state import AppState

DEFAULT_PORT = 3141


def find_available_port(start_port: int = DEFAULT_PORT, max_attempts: int = 100) -> int | None:
    """
    Find an available port number

    Args:
        start_port: Starting port number
        max_attempts: Maximum number of attempts

    Returns:
        Available port number, None if not found
    """
    for port in range(start_port, start_port + max_attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            # If connection fails, that port is available
            result = sock.connect_ex(("127.0.0.1", port))
            if result != 0:
                return port
    return None


def parse_experiment_list(experiments: str | None) -> list[str] | None:
    """
    Split a comma-separated experiment list

    Args:
        experiments: Comma-separated ids, or None

    Returns:
        List of ids without blanks, None if no list was given
    """
    if experiments is None:
        return None
    return [e.strip() for e in experiments.split(",") if e.strip()]


def run_dashboard(
    host: str = "127.0.0.1",
    port: int = DEFAULT_PORT,
    file: str | None = None,
    dev: bool = False,
) -> None:
    """
    Start dashboard server

    Args:
        host: Host name
        port: Port number
        file: Metrics table to load at startup
        dev: Enable development mode with auto-reload
    """
    if dev:
        os.environ["RUNVIZ_DEV_MODE"] = "1"

    if file is not None:
        os.environ["RUNVIZ_PRELOAD_FILE"] = os.path.abspath(file)

    print("Starting Runviz Dashboard server...")
    print(f"Access http://{host}:{port} in your browser!")
    if file is not None:
        print(f"Preloading: {os.path.abspath(file)}")
    if dev:
        print("Development mode: auto-reload enabled")

    uvicorn.run("runviz.dashboard.main:app", host=host, port=port, reload=dev)


def run_tui(file: str) -> None:
    """
    Start terminal UI

    Args:
        file: Metrics table to load
    """
    from runviz.tui import run_tui as _run_tui

    try:
        _run_tui(file)
    except (OSError, RunvizError) as e:
        print(f"Error: {e}")
        sys.exit(1)


def run_summary(file: str, experiments: str | None = None) -> None:
    """
    Print summary statistics of a metrics table

    Args:
        file: Metrics table to load
        experiments: Comma-separated experiment ids (default: all)
    """
    state = AppState()
    try:
        state.load_file(Path(file))
    except (OSError, RunvizError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    selected = parse_experiment_list(experiments)
    state.select(selected if selected is not None else state.index.experiment_ids)

    if state.skipped_rows:
        print(f"Skipped {state.skipped_rows} malformed row(s)")

    with pl.Config(tbl_rows=-1, tbl_hide_dataframe_shape=True):
        print(state.summary())


def main() -> None:
    """
    CLI main entry point
    """
    parser = argparse.ArgumentParser(description="Runviz experiment metrics viewer")
    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    serve_parser = subparsers.add_parser("serve", help="Start dashboard server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host name (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=DEFAULT_PORT, help=f"Port number (default: {DEFAULT_PORT})")
    serve_parser.add_argument("--file", default=None, help="Metrics table to load at startup")
    serve_parser.add_argument("--dev", action="store_true", help="Enable development mode with auto-reload")

    tui_parser = subparsers.add_parser("tui", help="Start terminal UI")
    tui_parser.add_argument("file", help="Metrics table (experiment_id, metric_name, step, value)")

    summary_parser = subparsers.add_parser("summary", help="Print per-metric summary statistics")
    summary_parser.add_argument("file", help="Metrics table (experiment_id, metric_name, step, value)")
    summary_parser.add_argument("--experiments", default=None, help="Comma-separated experiment ids (default: all)")

    args = parser.parse_args()

    if args.command == "serve":
        run_dashboard(host=args.host, port=args.port, file=args.file, dev=args.dev)
    elif args.command == "tui":
        run_tui(args.file)
    elif args.command == "summary":
        run_summary(args.file, experiments=args.experiments)
    else:
        port = find_available_port(start_port=DEFAULT_PORT)
        if port is None:
            print("Error: No available port found!")
            return

        run_dashboard(port=port)


if __name__ == "__main__":
    main()
