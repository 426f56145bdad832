"""Utility modules for scoutpath."""

from .numeric import string_to_s32, string_to_f32
from .console import ConsoleManager, StatusType

__all__ = ["string_to_s32", "string_to_f32", "ConsoleManager", "StatusType"]
