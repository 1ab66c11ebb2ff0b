"""Driver options and the functions that set them."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass

from .constants import DEFAULT_CSI_ENDPOINT

log = logging.getLogger(__name__)


class Mode(str, enum.Enum):
    """Which services the driver runs."""

    CONTROLLER = "controller"
    NODE = "node"
    ALL = "all"


@dataclass
class DriverOptions:
    """Settings that govern how the driver behaves."""

    endpoint: str = DEFAULT_CSI_ENDPOINT
    extra_tags: dict[str, str] | None = None
    mode: Mode = Mode.ALL
    volume_attach_limit: int = 0
    kubernetes_cluster_id: str = ""
    aws_sdk_debug_log: bool = False


Option = Callable[[DriverOptions], None]


def with_endpoint(endpoint: str) -> Option:
    def apply(options: DriverOptions) -> None:
        options.endpoint = endpoint

    return apply


def with_extra_tags(extra_tags: dict[str, str] | None) -> Option:
    def apply(options: DriverOptions) -> None:
        options.extra_tags = extra_tags

    return apply


def with_extra_volume_tags(extra_volume_tags: dict[str, str] | None) -> Option:
    """Deprecated form of :func:`with_extra_tags`; never overrides extra tags."""

    def apply(options: DriverOptions) -> None:
        if options.extra_tags is None and extra_volume_tags is not None:
            log.warning(
                "DEPRECATION WARNING: --extra-volume-tags is deprecated, "
                "please use --extra-tags instead"
            )
            options.extra_tags = extra_volume_tags

    return apply


def with_mode(mode: Mode | str) -> Option:
    """Set the mode; raises ValueError for an unknown mode."""
    resolved = Mode(mode)

    def apply(options: DriverOptions) -> None:
        options.mode = resolved

    return apply


def with_volume_attach_limit(volume_attach_limit: int) -> Option:
    def apply(options: DriverOptions) -> None:
        options.volume_attach_limit = volume_attach_limit

    return apply


def with_kubernetes_cluster_id(cluster_id: str) -> Option:
    def apply(options: DriverOptions) -> None:
        options.kubernetes_cluster_id = cluster_id

    return apply


def with_aws_sdk_debug_log(enable: bool) -> Option:
    def apply(options: DriverOptions) -> None:
        options.aws_sdk_debug_log = enable

    return apply


def build_driver_options(*args: Option) -> DriverOptions:
    """Start from the defaults and apply each option in turn."""
    options = DriverOptions()
    for option in args:
        option(options)
    if not isinstance(options.mode, Mode):
        raise ValueError(f"unknown mode: {options.mode}")
    return options