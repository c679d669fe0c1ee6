"""CLI entry point for netbindgen.

Subcommands:
    generate   Validate the manifest and write the provider bindings module.
    validate   Run constraint checks on the manifest.
    info       Show networks and the identifiers generated for them.
"""

from __future__ import annotations

import argparse
import sys
import tomllib
from pathlib import Path


def _load_config(args: argparse.Namespace):
    """Load config, handling errors."""
    from netbindgen.config import DEFAULT_CONFIG, load_config

    config_path = getattr(args, "config", None)
    path = config_path or DEFAULT_CONFIG
    try:
        return load_config(config_path)
    except FileNotFoundError:
        print(f"Error: config file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except tomllib.TOMLDecodeError as e:
        print(f"Error: cannot parse {path}: {e}", file=sys.stderr)
        sys.exit(1)


# ---------------------------------------------------------------------------
# Subcommand: generate
# ---------------------------------------------------------------------------

def cmd_generate(args: argparse.Namespace) -> int:
    """Validate the manifest and produce the bindings module."""
    config = _load_config(args)

    from netbindgen.constraints.validators import UNRENDERABLE_CODES, validate_all
    from netbindgen.generators.networks import generate_networks_code

    validation = validate_all(config.networks)

    if validation.has_errors:
        print("Validation errors found:", file=sys.stderr)
        print(validation.report(), file=sys.stderr)
        if any(v.code in UNRENDERABLE_CODES for v in validation.errors):
            print("Names and urls must be strings, even with --force.", file=sys.stderr)
            return 1
        if not args.force:
            print("Use --force to generate despite errors.", file=sys.stderr)
            return 1

    if validation.warnings:
        print(f"Validation: {len(validation.warnings)} warning(s)", file=sys.stderr)
        for v in validation.warnings:
            print(f"  {v}", file=sys.stderr)

    output = generate_networks_code(config.networks)

    output_path = args.output or config.output.path
    if output_path and not args.stdout:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(output, encoding="utf-8")
        print(
            f"  networks: wrote {output_path} "
            f"({len(config.networks)} networks, {len(output)} bytes)"
        )
    else:
        sys.stdout.write(output)

    return 0


# ---------------------------------------------------------------------------
# Subcommand: validate
# ---------------------------------------------------------------------------

def cmd_validate(args: argparse.Namespace) -> int:
    """Run constraint validation on the manifest."""
    config = _load_config(args)

    from netbindgen.constraints.validators import validate_all

    result = validate_all(config.networks)

    print(f"Networks: {len(config.networks)}")
    print()
    print(result.report())

    return 1 if result.has_errors else 0


# ---------------------------------------------------------------------------
# Subcommand: info
# ---------------------------------------------------------------------------

def cmd_info(args: argparse.Namespace) -> int:
    """Show networks and their generated identifiers."""
    config = _load_config(args)

    from netbindgen.derivations.naming import accessor_identifier, storage_identifier

    print(f"Output: {config.output.path or '(stdout)'}")
    print()

    print("Networks:")
    for network in config.networks:
        print(f"  {network}")
        if network.has_compute_units:
            print(f"    compute units: {network.compute_units_per_second}/s")
        else:
            print("    compute units: client default")
        if not isinstance(network.name, str):
            print("    provider:      (name is not a string)")
            continue
        print(f"    provider:      {storage_identifier(network.name)}")
        print(f"    accessor:      {accessor_identifier(network.name)}()")

    return 0


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="netbindgen",
        description="Generate shared network provider bindings from a manifest.",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to netbindgen.toml (default: ./netbindgen.toml)",
    )

    subparsers = parser.add_subparsers(dest="command")

    # generate
    gen_parser = subparsers.add_parser("generate", help="Generate the bindings module")
    gen_parser.add_argument(
        "-o", "--output",
        help="Output file (default: [output] path from the config)",
    )
    gen_parser.add_argument(
        "--stdout", action="store_true",
        help="Print output to stdout instead of writing a file",
    )
    gen_parser.add_argument(
        "--force", action="store_true",
        help="Generate even if validation errors exist",
    )

    # validate
    subparsers.add_parser("validate", help="Run constraint validation")

    # info
    subparsers.add_parser("info", help="Show networks and generated identifiers")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "generate": cmd_generate,
        "validate": cmd_validate,
        "info": cmd_info,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
