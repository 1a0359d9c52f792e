"""Project generation workflow: clone, clean, patch manifests, install."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from crxgen.contracts.config import GeneratorConfig
from crxgen.contracts.exceptions import CommandError, InstallError
from crxgen.contracts.feature import Feature
from crxgen.contracts.metadata import PackageMetadata
from crxgen.contracts.progress import GenerationProgress, NullGenerationProgress
from crxgen.core.fs import remove_paths
from crxgen.core.git import GitClient
from crxgen.core.manifest import merge_extension_manifest, merge_package_json, read_json_object, write_json
from crxgen.core.runner import CommandRunner

logger = logging.getLogger(__name__)

GENERATE_PHASE = "generate"
INSTALL_PHASE = "install"


class ProjectGenerator:
    """Creates browser-extension projects from the template repository.

    Failures inside :meth:`generate` and :meth:`install` are logged and
    reported to *progress*; nothing is rolled back and nothing is re-raised.
    """

    def __init__(
        self,
        metadata: PackageMetadata,
        *,
        config: GeneratorConfig | None = None,
        git: GitClient | None = None,
        runner: CommandRunner | None = None,
        progress: GenerationProgress | None = None,
    ) -> None:
        self._metadata = metadata
        self._config = config or GeneratorConfig()
        self._git = git or GitClient()
        self._runner = runner or CommandRunner()
        self._progress: GenerationProgress = progress or NullGenerationProgress()

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    async def generate(self, project_name: str, features: Iterable[Feature]) -> Path | None:
        """Create ``<base_dir>/<project_name>`` with the selected *features*.

        Returns the project directory, or ``None`` when a step failed.
        """
        target_dir = self._config.project_dir(project_name)
        selected = frozenset(features)

        self._progress.phase_start(GENERATE_PHASE, "creating extension...")
        try:
            logger.debug("Cloning %s into %s", self._metadata.repository.url, target_dir)
            await self._git.clone(self._metadata.repository.url, target_dir)
            await self._clean(target_dir)
            await self._write_package_json(target_dir, project_name)
            await self._write_manifest_json(target_dir, project_name, selected)
        except Exception as exc:
            logger.error("%s", exc)
            self._progress.phase_error(GENERATE_PHASE, exc)
            return None

        self._progress.phase_done(GENERATE_PHASE, f"done! created extension in: {target_dir}")
        return target_dir

    async def install(self, project_name: str) -> bool:
        """Run the clean-install command inside the generated project."""
        target_dir = self._config.project_dir(project_name)

        self._progress.phase_start(INSTALL_PHASE, "installing dependencies...")
        try:
            try:
                os.chdir(target_dir)
            except OSError as exc:
                raise InstallError(f"cannot enter project directory {target_dir}: {exc}") from exc
            try:
                await self._runner.run(self._config.install_command, cwd=target_dir)
            except CommandError as exc:
                raise InstallError(str(exc)) from exc
        except Exception as exc:
            logger.error("%s", exc)
            self._progress.phase_error(INSTALL_PHASE, exc)
            return False

        self._progress.phase_done(INSTALL_PHASE, "done! installed dependencies")
        return True

    async def _clean(self, target_dir: Path) -> None:
        paths = [target_dir / name for name in (*self._config.remove_dirs, *self._config.remove_files)]
        await remove_paths(paths)

    async def _write_package_json(self, target_dir: Path, project_name: str) -> None:
        path = target_dir / self._config.package_json_path
        logger.debug("Rewriting %s", path)
        current = await asyncio.to_thread(read_json_object, path)
        merged = merge_package_json(
            current,
            project_name=project_name,
            description=self._metadata.generated_with,
        )
        await asyncio.to_thread(write_json, path, merged, indent=self._config.json_indent)

    async def _write_manifest_json(self, target_dir: Path, project_name: str, features: frozenset[Feature]) -> None:
        path = target_dir / self._config.manifest_path
        logger.debug("Rewriting %s with features: %s", path, ", ".join(sorted(features)))
        current = await asyncio.to_thread(read_json_object, path)
        merged = merge_extension_manifest(
            current,
            project_name=project_name,
            description=self._metadata.generated_with,
            features=features,
        )
        await asyncio.to_thread(write_json, path, merged, indent=self._config.json_indent)
