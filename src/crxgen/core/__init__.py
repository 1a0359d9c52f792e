"""Core generation workflow and its collaborators."""

from crxgen.core.fs import remove_path, remove_paths
from crxgen.core.generator import ProjectGenerator
from crxgen.core.git import GitClient
from crxgen.core.manifest import (
    merge_extension_manifest,
    merge_package_json,
    parse_json_object,
    read_json_object,
    write_json,
)
from crxgen.core.metadata import load_package_metadata
from crxgen.core.runner import CommandRunner, CompletedProcess
from crxgen.core.validation import PROJECT_NAME_PATTERN, is_valid_project_name, validate_features, validate_name

__all__ = [
    "PROJECT_NAME_PATTERN",
    "CommandRunner",
    "CompletedProcess",
    "GitClient",
    "ProjectGenerator",
    "is_valid_project_name",
    "load_package_metadata",
    "merge_extension_manifest",
    "merge_package_json",
    "parse_json_object",
    "read_json_object",
    "remove_path",
    "remove_paths",
    "validate_features",
    "validate_name",
    "write_json",
]
