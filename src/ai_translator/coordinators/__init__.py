"""Coordinators - Orchestration layer connecting UI with business logic."""

from .translation_coordinator import COPY_FEEDBACK_MS, TranslationCoordinator

__all__ = [
    "TranslationCoordinator",
    "COPY_FEEDBACK_MS",
]
