"""Domain models for imageslots."""

from imageslots.domain.models import ImageSlot, PageView, ScriptResult

__all__ = ["ImageSlot", "PageView", "ScriptResult"]
