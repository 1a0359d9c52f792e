"""Public API surface for crxgen."""

__version__ = "1.0.0"

from crxgen.contracts import (
    AlreadyExistsError,
    CleanupError,
    CloneError,
    CommandError,
    CrxGenError,
    Feature,
    GenerationProgress,
    GeneratorConfig,
    InstallError,
    InvalidFeatureError,
    InvalidNameError,
    ManifestError,
    ManifestParseError,
    ManifestReadError,
    ManifestWriteError,
    NoFeaturesSelectedError,
    NullGenerationProgress,
    PackageMetadata,
    ProjectValidationError,
    RepositoryInfo,
)
from crxgen.core import (
    CommandRunner,
    GitClient,
    ProjectGenerator,
    load_package_metadata,
    merge_extension_manifest,
    merge_package_json,
    validate_features,
    validate_name,
)

__all__ = [
    "AlreadyExistsError",
    "CleanupError",
    "CloneError",
    "CommandError",
    "CommandRunner",
    "CrxGenError",
    "Feature",
    "GenerationProgress",
    "GeneratorConfig",
    "GitClient",
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
    "ProjectGenerator",
    "ProjectValidationError",
    "RepositoryInfo",
    "__version__",
    "load_package_metadata",
    "merge_extension_manifest",
    "merge_package_json",
    "validate_features",
    "validate_name",
]
