"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from crxgen.cli.parser import build_parser
from crxgen.cli.progress import RichGenerationProgress
from crxgen.cli.prompts import prompt_features, prompt_project_name
from crxgen.contracts.config import GeneratorConfig
from crxgen.contracts.exceptions import ProjectValidationError
from crxgen.contracts.feature import Feature
from crxgen.contracts.metadata import PackageMetadata, RepositoryInfo
from crxgen.core.generator import ProjectGenerator
from crxgen.core.metadata import load_package_metadata
from crxgen.core.validation import validate_features, validate_name

_EXIT_VALIDATION = 1
_EXIT_ABORTED = 130


def _resolve_metadata(args: argparse.Namespace) -> PackageMetadata:
    metadata = load_package_metadata()
    if args.template_url:
        return metadata.model_copy(update={"repository": RepositoryInfo(url=args.template_url)})
    return metadata


async def run_generate(
    args: argparse.Namespace,
    *,
    project_name: str,
    features: frozenset[Feature],
    config: GeneratorConfig,
) -> int:
    """Generate the project and, unless skipped, install its dependencies.

    Failures are contained by :class:`ProjectGenerator`; they never change the
    exit status.
    """
    metadata = _resolve_metadata(args)
    with RichGenerationProgress() as progress:
        generator = ProjectGenerator(metadata, config=config, progress=progress)
        project_dir = await generator.generate(project_name, features)
        if project_dir is not None and not args.skip_install:
            await generator.install(project_name)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    config = GeneratorConfig()
    try:
        project_name = args.name if args.name is not None else prompt_project_name()
        validate_name(project_name, base_dir=config.base_dir)
        features = validate_features(args.features if args.features is not None else prompt_features())
    except KeyboardInterrupt:
        print("\nAborted.")
        return _EXIT_ABORTED
    except ProjectValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return _EXIT_VALIDATION

    return asyncio.run(run_generate(args, project_name=project_name, features=features, config=config))


__all__ = ["main", "run_generate"]
