"""Analysis pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisConfig:
    """Groups analysis pipeline configuration."""

    reset_scopes_between_passes: bool = True
    include_mermaid: bool = False
    verbose: bool = False
