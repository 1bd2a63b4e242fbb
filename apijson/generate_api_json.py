"""Generate the API JSON document for a documented package.

Reads an item model file (YAML or JSON) describing the analyzed API surface of
a package, writes "<package>.api.json" with its released exports, and checks
the result against the bundled schema. With --check, an existing document is
validated instead.
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from apijson.errors import ApiJsonError, ApiJsonSchemaError
from apijson.load_api_json import load_api_json
from apijson.load_config import (
    load_config,
    resolve_log_level,
    resolve_member_order,
)
from apijson.load_item_model import load_item_model
from apijson.member_order import MemberOrder
from apijson.write_api_json import write_api_json

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def run_generation(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Execute the generation for parsed arguments and loaded configuration."""
    if args.member_order:
        config["member_order"] = args.member_order
    member_order = resolve_member_order(config)

    package = load_item_model(args.model)
    output_path = args.output or args.model.with_name(api_json_filename(package.name))

    output = config.get("output") or {}
    document = write_api_json(
        output_path,
        package,
        member_order=member_order,
        indent=int(output.get("indent", 2)),
        ensure_ascii=bool(output.get("ensure_ascii", False)),
    )
    print(f"Wrote {len(document['exports'])} exports of {package.name} to: {output_path}")
    return 0


def run_check(path: Path) -> int:
    """Validate an existing API JSON document and report the result."""
    document = load_api_json(path)
    print(f"{path} conforms to the API JSON schema ({len(document['exports'])} exports)")
    return 0


def api_json_filename(package_name: str) -> str:
    """Return the conventional file name for a package, e.g. ``foo.api.json``."""
    # Scoped names such as "@scope/pkg" become "pkg".
    return package_name.rsplit("/", 1)[-1].lstrip("@") + ".api.json"


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    ap = argparse.ArgumentParser(
        description="Write the API JSON document for a documented package model.",
    )
    ap.add_argument(
        "model",
        type=Path,
        nargs="?",
        help="Item model file (YAML or JSON) describing the analyzed package",
    )
    ap.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file (default: <package>.api.json next to the model)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--member-order",
        choices=[m.value for m in MemberOrder],
        default=None,
        help="Order of members within containers (overrides the config file)",
    )
    ap.add_argument(
        "--log-level",
        default=None,
        help="Logging level, e.g. DEBUG or INFO (overrides the config file)",
    )
    ap.add_argument(
        "--check",
        type=Path,
        metavar="API_JSON",
        help="Validate an existing API JSON file instead of generating one",
    )
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator and return a process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.model is None and args.check is None:
        parser.error("a model file is required unless --check is given")
    try:
        config = load_config(args.config)
        level_name = args.log_level or (config.get("logging") or {}).get("level", "WARNING")
        logging.basicConfig(level=resolve_log_level(level_name), format=LOG_FORMAT)
        if args.check is not None:
            return run_check(args.check)
        return run_generation(args, config)
    except ApiJsonSchemaError:
        # Already logged with full detail when the document was validated.
        return 1
    except ApiJsonError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
