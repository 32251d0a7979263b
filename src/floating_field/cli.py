"""Interactive CLI: fill in a configured form field by field."""

from __future__ import annotations

import argparse
import logging
import sys

from floating_field.config.loader import load_config
from floating_field.orchestration.display import render_field
from floating_field.orchestration.runtime import FormRuntime


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Floating field validation demo")
    p.add_argument("--config", "-c", required=True, help="Path to form YAML config")
    p.add_argument("--verbose", "-v", action="store_true", help="Log validation passes")
    return p.parse_args(argv)


def run_interactive(runtime: FormRuntime) -> bool:
    """Ask for each field until it commits valid. Returns False if input ends early."""
    print(runtime.config.name)
    print()
    for cfg in runtime.config.fields:
        field = runtime.field(cfg.name)
        if not field.is_enabled:
            print(render_field(field))
            continue
        while True:
            print(render_field(field))
            try:
                line = input(f"{field.label}: ")
            except EOFError:
                return False
            runtime.enter(cfg.name, line)
            print(render_field(field))
            print()
            if field.is_valid and field.has_been_validated:
                break
            # Empty input never commits a validation pass; skip optional fields.
            if not line and not cfg.required:
                break
    return True


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    runtime = FormRuntime(config)
    finished = run_interactive(runtime)

    print("Form is valid." if runtime.all_valid else "Form is not valid.")
    for name, ok in sorted(runtime.results.items()):
        print(f"  {'ok' if ok else 'x '} {name}")
    return 0 if finished and runtime.all_valid else 2


if __name__ == "__main__":
    sys.exit(main())
