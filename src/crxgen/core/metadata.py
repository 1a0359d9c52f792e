"""Resolve the tool's package metadata from the installed distribution."""

from __future__ import annotations

import logging
import os
from importlib.metadata import PackageNotFoundError, metadata

from crxgen.contracts.metadata import DEFAULT_TEMPLATE_URL, DEFAULT_TOOL_NAME, PackageMetadata, RepositoryInfo

logger = logging.getLogger(__name__)

TEMPLATE_URL_ENV = "CRXGEN_TEMPLATE_URL"


def _repository_url(project_urls: list[str]) -> str | None:
    for entry in project_urls:
        label, _, url = entry.partition(",")
        if label.strip().lower() == "repository" and url.strip():
            return url.strip()
    return None


def load_package_metadata(distribution: str = DEFAULT_TOOL_NAME) -> PackageMetadata:
    """Build :class:`PackageMetadata` for *distribution*.

    Falls back to the built-in name and template URL when the distribution is
    not installed or declares no ``Repository`` project URL. The
    ``CRXGEN_TEMPLATE_URL`` environment variable overrides the template URL.
    """
    name = DEFAULT_TOOL_NAME
    url: str | None = None
    try:
        dist_metadata = metadata(distribution)
    except PackageNotFoundError:
        logger.debug("Distribution %s not installed, using built-in metadata", distribution)
    else:
        name = dist_metadata.get("Name") or name
        url = _repository_url(dist_metadata.get_all("Project-URL") or [])

    override = (os.getenv(TEMPLATE_URL_ENV) or "").strip()
    if override:
        url = override
    return PackageMetadata(name=name, repository=RepositoryInfo(url=url or DEFAULT_TEMPLATE_URL))
