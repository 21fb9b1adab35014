from __future__ import annotations

import argparse
import json
import logging
import sys

from flatconf.errors import ConfigSourceError
from flatconf.logging_utils import configure_logging
from flatconf.sources.file import FileOptions, FileSource

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="flatconf", description="Flatten YAML, JSON and TOML config files")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    show = sub.add_parser("show", help="Print the flattened keys of a config file as JSON")
    show.add_argument("path", help="Path to a .yaml, .yml, .json or .toml file")
    show.add_argument("--format", default="", choices=["", "yaml", "yml", "json", "toml"],
                      help="Override format inference from the file extension")
    show.add_argument("--required", action="store_true", help="Fail if the file does not exist")
    show.add_argument("--keys", action="store_true", help="Include the original key for every flattened key")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level.upper())

    if args.cmd == "show":
        source = FileSource(args.path, FileOptions(format=args.format, required=args.required))
        try:
            values, keys = source.load_with_keys()
        except ConfigSourceError as e:
            logger.error("%s", e)
            return 1

        out = {"source": source.name, "values": values}
        if args.keys:
            out["keys"] = keys
        json.dump(out, sys.stdout, indent=2, sort_keys=True, default=str)
        sys.stdout.write("\n")
        return 0

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
