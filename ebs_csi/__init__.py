"""Options, identity, request types, cloud interface, topology, in-flight tracking and mount helpers of a CSI block storage driver."""

__version__ = "1.2.1"

__all__ = [
    "cloud",
    "constants",
    "csi",
    "identity",
    "inflight",
    "mount",
    "options",
    "topology",
]