"""Orchestrator module - Runs evaluations end to end."""

from __future__ import annotations

from vaxband.orchestrator.evaluator import Evaluator


__all__ = ["Evaluator"]
