from __future__ import annotations

from .registry import RegistryStore

__all__ = ["RegistryStore"]
