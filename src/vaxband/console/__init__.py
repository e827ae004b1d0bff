"""Console module - Rich output and logging setup."""

from __future__ import annotations

from vaxband.console.logger import EvaluationConsole


__all__ = ["EvaluationConsole"]
