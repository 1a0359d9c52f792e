"""Public contracts for crxgen."""

from crxgen.contracts.config import GeneratorConfig
from crxgen.contracts.exceptions import (
    AlreadyExistsError,
    CleanupError,
    CloneError,
    CommandError,
    CrxGenError,
    InstallError,
    InvalidFeatureError,
    InvalidNameError,
    ManifestError,
    ManifestParseError,
    ManifestReadError,
    ManifestWriteError,
    NoFeaturesSelectedError,
    ProjectValidationError,
)
from crxgen.contracts.feature import Feature
from crxgen.contracts.metadata import PackageMetadata, RepositoryInfo
from crxgen.contracts.progress import GenerationProgress, NullGenerationProgress

__all__ = [
    "AlreadyExistsError",
    "CleanupError",
    "CloneError",
    "CommandError",
    "CrxGenError",
    "Feature",
    "GenerationProgress",
    "GeneratorConfig",
    "InstallError",
    "InvalidFeatureError",
    "InvalidNameError",
    "ManifestError",
    "ManifestParseError",
    "ManifestReadError",
    "ManifestWriteError",
    "NoFeaturesSelectedError",
    "NullGenerationProgress",
    "PackageMetadata",
    "ProjectValidationError",
    "RepositoryInfo",
]
