#!/usr/bin/env python3
"""
Dynamic Object Properties - Command Line Entry Point

Loads JSON documents into a Python class and inspects them through the
bean properties of that class.

Usage:
    python -m dop.main diff --type pkg.module:Class a.json b.json
    python -m dop.main show --type pkg.module:Class a.json
    python -m dop.main -v diff ...        # Enable debug logging

Exit codes:
    0 - success (diff: no differences)
    1 - diff found differences
    2 - error

Environment Variables:
    DOP_DUPLICATE_KEYS      - error | first | last (default: error)
    DOP_INCLUDE_PROPERTIES  - expose Python properties (default: true)
    DOP_INCLUDE_PRIVATE     - expose underscore names (default: false)
    LOG_LEVEL               - default log level (default: INFO)
"""

import argparse
import importlib
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from config.settings import ConfigurationError, Settings, load_settings
from dop.property.factory import BeanPropertyFactory, UnknownTypeError
from dop.property.models import BeanProperty, ObjectProperty
from dop.util.diff import diff_by_type
from dop.util.views import DuplicateKeyError, create_map_from_bean_properties

EXIT_OK = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


class DocumentError(Exception):
    """Raised when a JSON document cannot be loaded into the target type."""
    pass


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, enable DEBUG level logging
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
        force=True,
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="dop",
        description="Inspect and compare objects through their bean properties",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    dop diff --type shop.models:Order old.json new.json
    dop show --type shop.models:Order order.json
    dop -v --env .env.local diff --type shop.models:Order a.json b.json
        """,
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose/debug logging",
    )

    parser.add_argument(
        "--env",
        type=Path,
        help="Path to .env file (default: .env in current directory)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    diff_parser = subparsers.add_parser("diff", help="List properties that differ between two documents")
    diff_parser.add_argument("--type", dest="type_path", required=True, help="Target class as module:Class")
    diff_parser.add_argument("first", type=Path, help="First JSON document")
    diff_parser.add_argument("second", type=Path, help="Second JSON document")
    diff_parser.add_argument(
        "--ids",
        action="store_true",
        help="Print unique identifiers instead of property names",
    )

    show_parser = subparsers.add_parser("show", help="Print the property values of a document")
    show_parser.add_argument("--type", dest="type_path", required=True, help="Target class as module:Class")
    show_parser.add_argument("document", type=Path, help="JSON document")

    return parser.parse_args(argv)


def resolve_type(type_path: str) -> type:
    """
    Import a class from a "module:Class" path.

    Raises:
        UnknownTypeError: If the path is malformed or does not name a class
    """
    module_name, _, qualname = type_path.partition(":")
    if not module_name or not qualname:
        raise UnknownTypeError(f"Type must be given as module:Class, got '{type_path}'")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise UnknownTypeError(f"Cannot import module '{module_name}': {e}") from e

    for part in qualname.split("."):
        target = getattr(target, part, None)
        if target is None:
            raise UnknownTypeError(f"Module '{module_name}' has no attribute '{qualname}'")

    if not isinstance(target, type):
        raise UnknownTypeError(f"'{type_path}' is not a class")
    return target


def load_document(path: Path, object_type: type) -> Any:
    """
    Load a JSON document into an instance of object_type.

    A JSON null document loads as None.

    Raises:
        DocumentError: If the file cannot be read or does not fit the type
    """
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DocumentError(f"Cannot read {path}: {e}") from e

    if data is None:
        return None
    if not isinstance(data, dict):
        raise DocumentError(f"{path} must contain a JSON object or null")

    try:
        return object_type(**data)
    except (TypeError, ValueError) as e:
        raise DocumentError(f"{path} does not match {object_type.__qualname__}: {e}") from e


def run_diff(args: argparse.Namespace, factory: BeanPropertyFactory) -> int:
    logger = logging.getLogger(__name__)

    object_type = resolve_type(args.type_path)
    first = load_document(args.first, object_type)
    second = load_document(args.second, object_type)

    changed = diff_by_type(first, second, object_type, factory=factory)
    logger.info(f"{len(changed)} properties differ")

    for label in sorted(_label(p, args.ids) for p in changed):
        print(label)

    return EXIT_DIFFERENT if changed else EXIT_OK


def run_show(args: argparse.Namespace, factory: BeanPropertyFactory, settings: Settings) -> int:
    object_type = resolve_type(args.type_path)
    target = load_document(args.document, object_type)
    if target is None:
        raise DocumentError(f"{args.document} is null")

    view = create_map_from_bean_properties(
        target,
        factory.get_all_bean_properties(object_type),
        on_duplicate=settings.view.duplicate_key_policy,
    )
    for key, value in view.items():
        print(f"{key}: {value!r}")

    return EXIT_OK


def _label(prop: ObjectProperty, use_identifier: bool) -> str:
    if isinstance(prop, BeanProperty) and not use_identifier:
        return prop.property_name
    return prop.unique_identifier


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code
    """
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(env_file=args.env)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_ERROR

    if not args.verbose:
        logging.getLogger().setLevel(settings.log_level)

    factory = BeanPropertyFactory(
        include_properties=settings.factory.include_properties,
        include_private=settings.factory.include_private,
    )

    try:
        if args.command == "diff":
            return run_diff(args, factory)
        return run_show(args, factory, settings)

    except UnknownTypeError as e:
        logger.error(f"Unknown type: {e}")
        return EXIT_ERROR
    except DocumentError as e:
        logger.error(f"Document error: {e}")
        return EXIT_ERROR
    except DuplicateKeyError as e:
        logger.error(f"Duplicate key: {e}")
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
