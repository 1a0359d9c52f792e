"""Shared test fixtures for crxgen tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from crxgen.contracts.config import GeneratorConfig
from crxgen.contracts.metadata import PackageMetadata, RepositoryInfo
from crxgen.core.generator import ProjectGenerator
from tests.fakes.git import TEMPLATE_URL, FakeGitClient
from tests.fakes.progress import RecordingProgress
from tests.fakes.runner import FakeCommandRunner


@pytest.fixture(autouse=True)
def _restore_cwd(monkeypatch: pytest.MonkeyPatch) -> None:
    """``install`` changes the working directory; undo it after every test."""
    monkeypatch.chdir(Path.cwd())


@pytest.fixture
def metadata() -> PackageMetadata:
    return PackageMetadata(name="crxgen", repository=RepositoryInfo(url=TEMPLATE_URL))


@pytest.fixture
def config(tmp_path: Path) -> GeneratorConfig:
    return GeneratorConfig(base_dir=tmp_path)


@pytest.fixture
def git() -> FakeGitClient:
    return FakeGitClient()


@pytest.fixture
def runner() -> FakeCommandRunner:
    return FakeCommandRunner()


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()


@pytest.fixture
def generator(
    metadata: PackageMetadata,
    config: GeneratorConfig,
    git: FakeGitClient,
    runner: FakeCommandRunner,
    progress: RecordingProgress,
) -> ProjectGenerator:
    return ProjectGenerator(metadata, config=config, git=git, runner=runner, progress=progress)
