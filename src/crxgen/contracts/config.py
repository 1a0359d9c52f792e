"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class GeneratorConfig(BaseModel):
    """Layout of the template and the commands run against a generated project.

    Attributes:
        base_dir: Directory new projects are created in (defaults to the cwd).
        remove_dirs: Template-only directories removed after cloning.
        remove_files: Template-only files removed after cloning.
        package_json_path: Package manifest, relative to the project root.
        manifest_path: Extension manifest, relative to the project root.
        install_command: Clean-install command run inside the project.
        json_indent: Indentation used when rewriting JSON files.
    """

    base_dir: Path = Field(default_factory=Path.cwd)
    remove_dirs: tuple[str, ...] = (".git", "cli")
    remove_files: tuple[str, ...] = ("README.md",)
    package_json_path: str = "package.json"
    manifest_path: str = "angular/src/manifest.json"
    install_command: str = "npm ci"
    json_indent: int = Field(default=2, ge=0)

    model_config = {"frozen": True}

    def project_dir(self, project_name: str) -> Path:
        return self.base_dir / project_name
