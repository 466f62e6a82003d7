"""Command line interface for the Orderly plugin generator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .errors import ScaffoldError
from .schema import Archetype, PluginRequest
from .scaffold import FilePlan, PluginScaffolder, WriteReport


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orderly-plugin-gen",
        description="Generate an Orderly SDK plugin package skeleton",
    )
    parser.add_argument("--name", required=True, help="Plugin name, e.g. pnl-card")
    parser.add_argument(
        "--type",
        dest="archetype",
        default=Archetype.WIDGET.value,
        help=f"Plugin type: one of {', '.join(Archetype.choices())} (default: widget)",
    )
    parser.add_argument(
        "--path",
        type=Path,
        required=True,
        help="Parent directory the plugin-<name> directory is created in",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be created without writing anything",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_summary(plan: FilePlan) -> None:
    bundle = plan.bundle
    print(f"\n  Plugin Name : {bundle.hyphen_name}")
    print(f"  Plugin Type : {plan.archetype.value}")
    print(f"  Plugin ID   : {bundle.plugin_id}")
    print(f"  Package     : {bundle.package_name}")
    print(f"  Directory   : {plan.target_dir}\n")


def _print_dry_run(report: WriteReport) -> None:
    print("  [dry-run] Files that would be created:\n")
    for relative_path in report.paths:
        print(f"    {report.bundle.directory_name}/{relative_path}")
    print("\n  [dry-run] No files were written.\n")


def _print_created(report: WriteReport) -> None:
    bundle = report.bundle
    for relative_path in report.paths:
        print(f"  created: {bundle.directory_name}/{relative_path}")
    print(
        f"""
  Done! Next steps:

  1. cd {report.target_dir}
  2. Run `pnpm install` from the monorepo root
  3. Edit src/index.tsx: add your interceptors / page logic
  4. Build with `pnpm build`
  5. Register in host app:

     import {bundle.register_function} from "{bundle.package_name}";

     <OrderlyProvider plugins={{[{bundle.register_function}()]}}>
       ...
     </OrderlyProvider>
"""
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    scaffolder = PluginScaffolder()
    try:
        request = PluginRequest.build(
            args.name, args.archetype, args.path, dry_run=args.dry_run
        )
        plan = scaffolder.plan(request)
        scaffolder.ensure_target_available(plan)
        _print_summary(plan)
        report = scaffolder.execute(plan, dry_run=request.dry_run)
    except ScaffoldError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if report.dry_run:
        _print_dry_run(report)
    else:
        _print_created(report)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
