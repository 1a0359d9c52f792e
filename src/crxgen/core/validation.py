"""Pre-flight validation of the project name and feature selection."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from crxgen.contracts.exceptions import (
    AlreadyExistsError,
    InvalidFeatureError,
    InvalidNameError,
    NoFeaturesSelectedError,
)
from crxgen.contracts.feature import Feature

PROJECT_NAME_PATTERN = "^[a-z0-9_-]+$"
_PROJECT_NAME_RE = re.compile(r"[a-z0-9_-]+")


def is_valid_project_name(name: str) -> bool:
    return _PROJECT_NAME_RE.fullmatch(str(name)) is not None


def validate_name(name: str, *, base_dir: Path | None = None) -> None:
    """Check that *name* is usable for a new project under *base_dir*.

    Raises:
        InvalidNameError: The name contains anything besides lowercase
            letters, digits, hyphens and underscores.
        AlreadyExistsError: ``<base_dir>/<name>`` already exists.
    """
    if not is_valid_project_name(name):
        raise InvalidNameError(name, PROJECT_NAME_PATTERN)
    base = base_dir if base_dir is not None else Path.cwd()
    if (base / name).exists():
        raise AlreadyExistsError(name)


def validate_features(features: Iterable[Feature | str]) -> frozenset[Feature]:
    """Normalise *features* into a non-empty set of :class:`Feature` members."""
    selected: set[Feature] = set()
    for feature in features:
        try:
            selected.add(Feature(feature))
        except ValueError as exc:
            choices = ", ".join(member.value for member in Feature)
            raise InvalidFeatureError(f"Unknown feature '{feature}', expected one of: {choices}") from exc
    if not selected:
        raise NoFeaturesSelectedError()
    return frozenset(selected)
