"""Visitor-based analysis passes for a small expression language."""

from .names import resolve_names  # noqa: F401
from .evaluate import evaluate, try_evaluate  # noqa: F401
from .unparse import unparse  # noqa: F401
from .cfg import build_cfg  # noqa: F401
from .api import (  # noqa: F401
    analyze,
    dump_cfg,
    dump_mermaid,
    find_dead_code,
)
