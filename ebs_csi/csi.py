"""Request, response and status types of the container storage interface."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime


class StatusCode(enum.IntEnum):
    """Status codes an RPC may fail with."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


class CSIError(Exception):
    """An RPC failure carrying a status code and a message."""

    def __init__(self, code: StatusCode, message: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.name}: {self.message}"


class AccessMode(enum.IntEnum):
    """How a volume may be accessed by nodes."""

    UNKNOWN = 0
    SINGLE_NODE_WRITER = 1
    SINGLE_NODE_READER_ONLY = 2
    MULTI_NODE_READER_ONLY = 3
    MULTI_NODE_SINGLE_WRITER = 4
    MULTI_NODE_MULTI_WRITER = 5


@dataclass
class VolumeCapability:
    """Access mode and access type (raw block or mounted filesystem)."""

    access_mode: AccessMode = AccessMode.UNKNOWN
    block: bool = False
    fs_type: str = ""
    mount_flags: list[str] = field(default_factory=list)


@dataclass
class CapacityRange:
    required_bytes: int = 0
    limit_bytes: int = 0


@dataclass
class Topology:
    segments: dict[str, str] = field(default_factory=dict)


@dataclass
class TopologyRequirement:
    requisite: list[Topology] = field(default_factory=list)
    preferred: list[Topology] = field(default_factory=list)


@dataclass
class Volume:
    volume_id: str
    capacity_bytes: int = 0
    volume_context: dict[str, str] = field(default_factory=dict)
    accessible_topology: list[Topology] = field(default_factory=list)
    content_snapshot_id: str | None = None


@dataclass
class SnapshotInfo:
    snapshot_id: str
    source_volume_id: str
    size_bytes: int
    creation_time: datetime
    ready_to_use: bool = False


@dataclass
class CreateVolumeRequest:
    """A request to provision a volume.

    A volume may be restored from a snapshot (``source_snapshot_id``); cloning
    from another volume (``source_volume_id``) is expressible but unsupported.
    """

    name: str = ""
    capacity_range: CapacityRange | None = None
    volume_capabilities: list[VolumeCapability] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)
    source_snapshot_id: str | None = None
    source_volume_id: str | None = None
    accessibility_requirements: TopologyRequirement | None = None


@dataclass
class ControllerPublishVolumeRequest:
    volume_id: str = ""
    node_id: str = ""
    volume_capability: VolumeCapability | None = None
    readonly: bool = False


@dataclass
class ControllerUnpublishVolumeRequest:
    volume_id: str = ""
    node_id: str = ""


@dataclass
class ControllerExpandVolumeRequest:
    volume_id: str = ""
    capacity_range: CapacityRange | None = None
    volume_capability: VolumeCapability | None = None


@dataclass
class ValidateVolumeCapabilitiesRequest:
    volume_id: str = ""
    volume_capabilities: list[VolumeCapability] = field(default_factory=list)
    volume_context: dict[str, str] = field(default_factory=dict)
    parameters: dict[str, str] = field(default_factory=dict)


@dataclass
class CreateSnapshotRequest:
    name: str = ""
    source_volume_id: str = ""
    parameters: dict[str, str] = field(default_factory=dict)


@dataclass
class ListSnapshotsRequest:
    snapshot_id: str = ""
    source_volume_id: str = ""
    max_entries: int = 0
    starting_token: str = ""


@dataclass
class ListSnapshotsResponse:
    entries: list[SnapshotInfo] = field(default_factory=list)
    next_token: str = ""


@dataclass
class ControllerExpandVolumeResponse:
    capacity_bytes: int
    node_expansion_required: bool