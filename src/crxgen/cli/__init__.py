"""Command-line interface for crxgen."""

from __future__ import annotations

from crxgen.cli.app import main as main
from crxgen.cli.app import run_generate as run_generate
from crxgen.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "main", "run_generate"]
