"""Composable API functions over the analysis passes.

Each function runs one or more passes over an already-built tree and is
meant to be called programmatically by tools sitting on top of the library.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from . import constants
from .ast import Node, Statement
from .cfg import build_cfg, cfg_to_mermaid
from .evaluate import try_evaluate
from .names import resolve_names
from .run_types import AnalysisConfig
from .scope import ScopeTable
from .stats import count_nodes, reset_scopes
from .unparse import summarize, unparse

logger = logging.getLogger(__name__)


class AnalysisReport(BaseModel):
    """Outcome of running every pass over one tree."""

    source: str
    names_resolved: bool
    value: int | float | None = None
    error: str | None = None
    error_kind: str | None = None
    vertex_count: int = 0
    edge_count: int = 0
    reachable: list[str] = []
    unreachable: list[str] = []
    node_counts: dict[str, int] = {}
    mermaid: str | None = None

    @property
    def has_dead_code(self) -> bool:
        return bool(self.unreachable)


def analyze(
    root: Node,
    scope: ScopeTable | None = None,
    config: AnalysisConfig = AnalysisConfig(),
) -> AnalysisReport:
    """Run name resolution, evaluation and CFG reachability over *root*.

    Args:
        root: The tree to analyse, normally a ``Block``.
        scope: Enclosing table visible to *root* during resolution and
            evaluation.
        config: Pipeline options.

    Returns:
        An ``AnalysisReport``; evaluation failures are recorded in it rather
        than raised.
    """
    source = unparse(root)
    if config.verbose:
        logger.info("Analysing:\n%s", source)

    names_resolved = resolve_names(root, scope)
    logger.info("Name resolution: %s", "ok" if names_resolved else "unresolved names")

    if config.reset_scopes_between_passes:
        cleared = reset_scopes(root)
        logger.debug("Cleared %d block scopes before evaluation", cleared)

    outcome = try_evaluate(root, scope)
    value = None if outcome.value is constants.NO_VALUE else outcome.value

    cfg = build_cfg(root)
    reachable, unreachable = cfg.reachability()
    logger.info(
        "CFG: %d statements, %d unreachable", cfg.vertex_count(), len(unreachable)
    )

    return AnalysisReport(
        source=source,
        names_resolved=names_resolved,
        value=value,
        error=str(outcome.error) if outcome.error else None,
        error_kind=type(outcome.error).__name__ if outcome.error else None,
        vertex_count=cfg.vertex_count(),
        edge_count=cfg.edge_count(),
        reachable=[summarize(stmt) for stmt in reachable],
        unreachable=[summarize(stmt) for stmt in unreachable],
        node_counts=count_nodes(root),
        mermaid=cfg_to_mermaid(cfg) if config.include_mermaid else None,
    )


def find_dead_code(root: Node) -> list[Statement]:
    """Return the statements no execution of *root* can reach."""
    _, unreachable = build_cfg(root).reachability()
    return unreachable


def dump_cfg(root: Node) -> str:
    """Build the CFG of *root* and return a human-readable text dump."""
    return str(build_cfg(root))


def dump_mermaid(root: Node) -> str:
    """Build the CFG of *root* and return it as a Mermaid flowchart."""
    return cfg_to_mermaid(build_cfg(root))
