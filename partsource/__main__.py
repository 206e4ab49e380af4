"""
Part source command line: inspect a part directory or serve it over HTTP
"""

import argparse
import logging
import sys
from pathlib import Path

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from partsource.config import get_settings
from partsource.errors import PartSourceIOError
from partsource.source import DirLibSource


def _source(args) -> DirLibSource:
    return DirLibSource(args.root, args.options)


def show(args):
    print(_source(args).show())


def list_categories(args):
    for category in _source(args).get_categories():
        print(category)


def list_parts(args):
    for name in _source(args).get_categorical_part_names(args.category):
        print(name)


def read_parts(args):
    source = _source(args)
    if args.rev:
        payloads = [source.read_part(name, args.rev) for name in args.names]
    else:
        payloads = source.read_parts(args.names)
    for payload in payloads:
        sys.stdout.buffer.write(payload)
    sys.stdout.flush()


def run(args):
    settings = get_settings()
    port = args.port or settings.port
    logging.info(f"Starting server at port {port}, debug={not args.nodebug}")
    if not settings.root_path:
        logging.warning("No part directory configured, set PARTSOURCE_ROOT_PATH in the environment or .env file")
    else:
        logging.info(f"Serving parts from {settings.root_path} (options: {settings.options!r})")
    log_config = "logging.yml" if Path("logging.yml").exists() else LOGGING_CONFIG
    uvicorn.run(
        "partsource.api:app", host=settings.host, reload=not args.nodebug, port=int(port), log_config=log_config
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__, prog="python -m partsource")

    subparsers = parser.add_subparsers(dest="action", title="action", help="Action to perform:", required=True)

    def add_source_parser(name, func, help):
        p = subparsers.add_parser(name, help=help)
        p.add_argument("root", help="The part directory")
        p.add_argument("-o", "--options", default="", help="Source options, e.g. useVersioning")
        p.set_defaults(func=func)
        return p

    add_source_parser("show", show, "Show all categories and part names")
    add_source_parser("categories", list_categories, "List the categories")
    p = add_source_parser("parts", list_parts, "List the part names")
    p.add_argument("-c", "--category", default="", help="Only list parts in this category")
    p = add_source_parser("read", read_parts, "Print the contents of one or more parts")
    p.add_argument("names", nargs="+", help="Part names to read")
    p.add_argument("-r", "--rev", default="", help="Revision to read, e.g. rev3")

    p = subparsers.add_parser("run", help="Run the read-only API")
    p.add_argument(
        "--no-debug",
        action="store_true",
        dest="nodebug",
        help="Disable debug mode (no auto reload)",
    )
    p.add_argument("-p", "--port", help="Port (default: PARTSOURCE_PORT or 5000)")
    p.set_defaults(func=run)

    args = parser.parse_args(argv)

    logging.basicConfig(format="[%(levelname)-7s:%(name)-15s] %(message)s", level=logging.INFO)

    try:
        args.func(args)
    except PartSourceIOError as e:
        logging.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
