#!/usr/bin/env python3
"""
main.py - command line entry point for the stars animation engine
-------------------------------------------------------------------

Validates a props file and prints per-frame visual state as JSON, for
renderers that consume the engine out of process (or for eyeballing a
config before a render). Stdout carries only the JSON document; log lines
and errors go to stderr.

Usage:
    python src/main.py --metadata
    python src/main.py --props props.yaml --frame 0 --frame 90 --frame 180
    python src/main.py --props props.yaml --all --workers 4 --output frames.json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from engine.frame_sampler import FrameSampler
from managers.config_manager import ConfigManager
from models.enums import LogCategory, LogLevel
from models.errors import ConfigValidationError
from utils.logger import configure_logger, get_category_logger

log = get_category_logger(LogCategory.SYSTEM)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resolve GitHub stars animation frames")
    parser.add_argument("--props", default=None, help="YAML/JSON props file (default: built-in props)")
    parser.add_argument("--frame", type=float, action="append", default=[], help="Frame to resolve (repeatable)")
    parser.add_argument("--all", action="store_true", help="Resolve every frame of the video")
    parser.add_argument("--workers", type=int, default=None, help="Resolve frames on N worker threads")
    parser.add_argument("--metadata", action="store_true", help="Include video metadata in the output")
    parser.add_argument("--timeline", action="store_true", help="Output raw timeline entries instead of visual state")
    parser.add_argument("--output", default=None, help="Write JSON here instead of stdout")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors in logs")
    return parser


def run(args) -> Dict[str, Any]:
    """Resolve what the arguments ask for and return the JSON document"""
    config = ConfigManager(args.props).load()
    sampler = FrameSampler(config)

    frames: List[float] = list(sampler.frames()) if args.all else list(args.frame)
    document: Dict[str, Any] = {}

    if args.metadata or not frames:
        document["metadata"] = sampler.metadata.to_dict()

    if frames and args.timeline:
        document["timeline"] = [
            {"frame": frame, "entries": sampler.timeline.evaluate(frame)} for frame in frames
        ]
    elif frames:
        if args.workers:
            states = sampler.sample_parallel(frames, max_workers=args.workers)
        else:
            states = sampler.sample(frames)
        document["frames"] = [state.to_dict() for state in states]

    return document


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logger(
        LogLevel.DEBUG if args.debug else LogLevel.WARN,
        use_colors=not args.no_color,
        stream=sys.stderr,
    )

    try:
        document = run(args)
    except ConfigValidationError as ex:
        for error in ex.errors:
            log.error(f"{error['field']}: {error['message']}")
        json.dump({"error": ex.to_dict()}, sys.stderr, indent=2)
        sys.stderr.write("\n")
        return 2

    text = json.dumps(document, indent=2)
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        log.info(f"Wrote {args.output}")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
