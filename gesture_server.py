"""
Entry point for the gesture snapshot recognizer.

Usage examples:
    python gesture_server.py                      # python/config.json, port 5555
    python gesture_server.py --port 6000 --camera 1
    python gesture_server.py --no-network         # debug window only
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
PY_DIR = ROOT / "python"
if str(PY_DIR) not in sys.path:
    sys.path.insert(0, str(PY_DIR))


def build_overrides(args: argparse.Namespace) -> dict:
    """Config sections set explicitly on the command line."""
    overrides: dict = {}
    if args.camera is not None:
        overrides.setdefault("camera", {})["index"] = args.camera
    if args.host is not None:
        overrides.setdefault("network", {})["host"] = args.host
    if args.port is not None:
        overrides.setdefault("network", {})["port"] = args.port
    if args.no_network:
        overrides.setdefault("network", {})["enabled"] = False
    if args.threshold is not None:
        overrides.setdefault("matcher", {})["similarity_threshold"] = args.threshold
    return overrides


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Hand gesture snapshot recognizer")
    parser.add_argument(
        "--config",
        default=str(PY_DIR / "config.json"),
        help="Path to the JSON config file (reloaded on change).",
    )
    parser.add_argument("--camera", type=int, default=None, help="Camera index.")
    parser.add_argument("--host", default=None, help="Event bridge bind address.")
    parser.add_argument("--port", type=int, default=None, help="Event bridge TCP port.")
    parser.add_argument(
        "--no-network", action="store_true", help="Do not publish events over TCP."
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Similarity a match must exceed (default 0.65).",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    from main_loop import main as run_main_loop

    run_main_loop(args.config, build_overrides(args))


if __name__ == "__main__":
    main()
