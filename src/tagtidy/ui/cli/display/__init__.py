"""Display helpers for CLI output."""

from .plan import PlanDisplay, extension_label

__all__ = ["PlanDisplay", "extension_label"]
