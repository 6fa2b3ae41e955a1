from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from goveectl.errors import RegistryUnavailable
from goveectl.models import DeviceRegistry

logger = logging.getLogger(__name__)


class RegistryStore:
    """Read-only access to the JSON device registry."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> DeviceRegistry:
        if not self._path.exists():
            logger.error("Device registry not found: %s", self._path)
            raise RegistryUnavailable(f"Device registry not found: {self._path}")

        try:
            with self._path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Cannot read device registry %s: %s", self._path, exc)
            raise RegistryUnavailable(
                f"Cannot read device registry: {self._path}\n{exc}"
            ) from exc
        except json.JSONDecodeError as exc:
            logger.error("Invalid JSON in device registry %s: %s", self._path, exc)
            raise RegistryUnavailable(
                f"Invalid JSON in device registry: {self._path}\n{exc}"
            ) from exc

        try:
            registry = DeviceRegistry.model_validate(data)
        except ValidationError as exc:
            logger.error("Invalid device registry %s", self._path)
            raise RegistryUnavailable(
                f"Invalid device registry: {self._path}\n{exc}"
            ) from exc

        logger.debug("Loaded %d device(s) from %s", len(registry.devices), self._path)
        return registry
