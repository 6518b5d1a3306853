"""
=========================================================
EFT 005 command line - v1.0
---------------------------------------------------------
  parse  005 file (or stdin) -> interchange JSON
  scan   tolerant decode, reports skipped segments
  build  interchange JSON -> 005 file
=========================================================
"""

import os
import sys
import json
import logging
import argparse

import eft_service
from eft005 import EftError, read_file
from utils.log_utils import configure_logging

logger = logging.getLogger("eft005")


def build_parser():
    parser = argparse.ArgumentParser(prog="eft005", description="Parse and build EFT Standard 005 files")
    parser.add_argument("--mode", choices=["parse", "scan", "build"], required=True)
    parser.add_argument("--file", help="005 file for parse/scan, interchange JSON for build (parse reads stdin when omitted)")
    parser.add_argument("--validate", action="store_true", help="run file level validation")
    parser.add_argument("--output", help="build: write the file here instead of stdout")
    parser.add_argument("--log-level", default=None)
    return parser


def _parse(args):
    try:
        if args.file:
            with open(args.file, encoding="utf-8") as f:
                eft_file = read_file(f)
        else:
            raw = sys.stdin.read()
            if not raw:
                return 0
            eft_file = read_file(raw.splitlines())
        if args.validate:
            eft_file.validate()
    except (EftError, OSError) as e:
        logger.error("❌ failed to parse file: %s", e)
        return 1
    print(eft_file.to_json())
    return 0


def _scan(args):
    if not args.file:
        logger.error("❌ --file is required for scan")
        return 1
    result = eft_service.scan_file(args.file)
    if result["status"] == eft_service.STATUS_ERROR:
        return 1
    for entry in result["skipped"]:
        logger.warning("⚠️ skipped %s: %s", entry["kind"], entry["error"])
    print(json.dumps(result["eft_file"], indent=2))
    return 0


def _build(args):
    if not args.file:
        logger.error("❌ --file is required for build")
        return 1
    try:
        with open(args.file, encoding="utf-8") as f:
            json_text = f.read()
    except OSError as e:
        logger.error("❌ failed to read %s: %s", args.file, e)
        return 1

    if args.output:
        output = os.path.abspath(args.output)
        result = eft_service.build_file(json_text, validate=args.validate, output_dir=os.path.dirname(output),
                                        filename=os.path.basename(output), source_name=os.path.basename(args.file))
    else:
        result = eft_service.build_file(json_text, validate=args.validate, output_dir=False,
                                        source_name=os.path.basename(args.file))
    if result["status"] == eft_service.STATUS_ERROR:
        return 1
    if not args.output:
        sys.stdout.write(result["content"])
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    handlers = {"parse": _parse, "scan": _scan, "build": _build}
    return handlers[args.mode](args)


if __name__ == "__main__":
    sys.exit(main())
