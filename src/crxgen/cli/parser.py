"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from crxgen.contracts.feature import Feature


def _package_version() -> str:
    try:
        return version("crxgen")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="crxgen", description="Generate an Angular browser extension project")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("name", nargs="?", default=None, help="Project name (prompted for when omitted)")
    parser.add_argument(
        "--feature",
        "-f",
        dest="features",
        action="append",
        choices=[feature.value for feature in Feature],
        default=None,
        help="Feature to include; repeat for several (prompted for when omitted)",
    )
    parser.add_argument("--template-url", default=None, help="Clone this repository instead of the default template")
    parser.add_argument("--skip-install", action="store_true", help="Do not install dependencies after generating")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["build_parser"]
