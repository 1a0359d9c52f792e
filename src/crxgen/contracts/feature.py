"""Browser-extension features a generated project may expose."""

from __future__ import annotations

from enum import StrEnum


class Feature(StrEnum):
    """Optional extension UI surfaces, each gating one manifest key."""

    POPUP = "popup"
    OPTIONS = "options"
    TAB = "tab"

    @property
    def manifest_key(self) -> str:
        return _MANIFEST_KEYS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_MANIFEST_KEYS: dict[Feature, str] = {
    Feature.POPUP: "browser_action",
    Feature.OPTIONS: "options_page",
    Feature.TAB: "chrome_url_overrides",
}

_LABELS: dict[Feature, str] = {
    Feature.POPUP: "Popup (browser action)",
    Feature.OPTIONS: "Options page",
    Feature.TAB: "New tab override",
}
