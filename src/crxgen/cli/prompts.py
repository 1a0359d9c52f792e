"""Interactive prompts backed by questionary."""

from __future__ import annotations

from crxgen.contracts.feature import Feature
from crxgen.core.validation import PROJECT_NAME_PATTERN, is_valid_project_name


def _validate_name(value: str) -> bool | str:
    if is_valid_project_name(value.strip()):
        return True
    return f"Project name must match: {PROJECT_NAME_PATTERN}"


def prompt_project_name() -> str:
    """Ask for the project name; raises ``KeyboardInterrupt`` when cancelled."""
    import questionary

    name = questionary.text("Project name:", validate=_validate_name).ask()
    if name is None:
        raise KeyboardInterrupt
    return name.strip()


def prompt_features() -> list[str]:
    """Ask which features to include; all of them are pre-selected."""
    import questionary

    selected = questionary.checkbox(
        "Select features:",
        choices=[questionary.Choice(feature.label, value=feature.value, checked=True) for feature in Feature],
    ).ask()
    if selected is None:
        raise KeyboardInterrupt
    return list(selected)
