"""
Run configuration for the report CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

from .models import DEFAULT_TARGET
from .time_utils import DEFAULT_WINDOW_DAYS


DEFAULT_SOURCE = "https://rust-lang.github.io/rustup-components-history"
DEFAULT_OUTPUT_DIR = Path("./output")
DEFAULT_VERBOSITY = "WARNING"


@dataclass(frozen=True)
class ReportConfig:
    """Everything needed to build and render one report."""

    source: str = DEFAULT_SOURCE
    target: str = DEFAULT_TARGET
    days: int = DEFAULT_WINDOW_DAYS
    output_dir: Path = DEFAULT_OUTPUT_DIR
    formats: Tuple[str, ...] = field(default=("json",))
    show_progress: bool = False
    verbosity: str = DEFAULT_VERBOSITY


def resolve_target(value: str | None) -> str:
    """Fall back to the default target when none (or an empty one) is given."""
    return value or DEFAULT_TARGET
