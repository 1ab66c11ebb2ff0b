"""The identity service: who the plugin is and what it offers."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from .constants import DRIVER_NAME, DRIVER_VERSION

log = logging.getLogger(__name__)


class PluginCapability(enum.Enum):
    """Plugin-level service capabilities."""

    CONTROLLER_SERVICE = "CONTROLLER_SERVICE"
    VOLUME_ACCESSIBILITY_CONSTRAINTS = "VOLUME_ACCESSIBILITY_CONSTRAINTS"


@dataclass(frozen=True)
class PluginInfo:
    name: str
    vendor_version: str


class IdentityService:
    """Answers identity queries for the driver."""

    def __init__(self, version: str = DRIVER_VERSION) -> None:
        self.version = version

    def get_plugin_info(self) -> PluginInfo:
        log.debug("GetPluginInfo: called")
        return PluginInfo(name=DRIVER_NAME, vendor_version=self.version)

    def get_plugin_capabilities(self) -> list[PluginCapability]:
        log.debug("GetPluginCapabilities: called")
        return [
            PluginCapability.CONTROLLER_SERVICE,
            PluginCapability.VOLUME_ACCESSIBILITY_CONSTRAINTS,
        ]

    def probe(self) -> bool:
        """Report that the plugin is up."""
        log.debug("Probe: called")
        return True