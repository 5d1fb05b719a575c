"""Shared type definitions for sitetags."""

from __future__ import annotations

from enum import Enum


class AlertType(Enum):
    IMPORTANT = "important"
    NOTE = "note"
    TIP = "tip"
    WARNING = "warning"
    CAUTION = "caution"
