"""Tool metadata contracts."""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_TOOL_NAME = "crxgen"
DEFAULT_TEMPLATE_URL = "https://github.com/larscom/angular-chrome-extension.git"


class RepositoryInfo(BaseModel):
    url: str

    model_config = {"frozen": True}


class PackageMetadata(BaseModel):
    """The tool's own package descriptor.

    ``name`` is stamped into generated manifests as ``Generated with <name>``
    and ``repository.url`` is the template cloned for every new project.
    """

    name: str = DEFAULT_TOOL_NAME
    repository: RepositoryInfo = RepositoryInfo(url=DEFAULT_TEMPLATE_URL)

    model_config = {"frozen": True}

    @property
    def generated_with(self) -> str:
        return f"Generated with {self.name}"
