"""JSON manifest loading, merging and persistence."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from crxgen.contracts.exceptions import ManifestParseError, ManifestReadError, ManifestWriteError
from crxgen.contracts.feature import Feature

JsonObject = dict[str, Any]

# Sentinel for overlay keys that must be dropped from the merged output.
_UNSET: Any = object()


def parse_json_object(raw: str | bytes, *, source: str = "<string>") -> JsonObject:
    """Parse *raw* JSON text, requiring an object at the root."""
    try:
        payload: Any = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise ManifestParseError(f"invalid JSON in {source}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ManifestParseError(f"expected a JSON object in {source}, got {type(payload).__name__}")
    return payload


def read_json_object(path: Path) -> JsonObject:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ManifestReadError(f"failed reading {path}: {exc}") from exc
    return parse_json_object(raw, source=str(path))


def write_json(path: Path, data: Mapping[str, Any], *, indent: int = 2) -> None:
    try:
        path.write_text(json.dumps(data, indent=indent, ensure_ascii=False) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        raise ManifestWriteError(f"failed writing {path}: {exc}") from exc


def overlay(source: Mapping[str, Any], updates: Mapping[str, Any]) -> JsonObject:
    """Return *source* with *updates* laid on top.

    Keys mapped to the unset sentinel are removed from the result; every other
    key of *source* is carried over unchanged and in its original position.
    """
    merged: JsonObject = {**source, **updates}
    return {key: value for key, value in merged.items() if value is not _UNSET}


def merge_package_json(package: Mapping[str, Any], *, project_name: str, description: str) -> JsonObject:
    return overlay(
        package,
        {
            "name": project_name,
            "description": description,
            "author": _UNSET,
        },
    )


def merge_extension_manifest(
    manifest: Mapping[str, Any],
    *,
    project_name: str,
    description: str,
    features: Iterable[Feature],
) -> JsonObject:
    """Rename the extension and keep only the UI surfaces in *features*.

    A feature-gated key survives only when its feature is selected and the
    template declares it; otherwise it is omitted from the output.
    """
    selected = set(features)
    updates: JsonObject = {
        "name": project_name,
        "short_name": project_name,
        "description": description,
    }
    for feature in Feature:
        key = feature.manifest_key
        updates[key] = manifest.get(key, _UNSET) if feature in selected else _UNSET
    return overlay(manifest, updates)
