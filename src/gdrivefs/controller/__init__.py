"""Internal controller exports for gdrivefs."""

from __future__ import annotations

from .drive_controller import DriveController

__all__ = ["DriveController"]
