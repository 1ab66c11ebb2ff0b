"""Choosing zones and outposts from topology requirements."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .constants import (
    AWS_ACCOUNT_ID_KEY,
    AWS_OUTPOST_ID_KEY,
    AWS_PARTITION_KEY,
    AWS_REGION_KEY,
    TOPOLOGY_KEY,
    WELL_KNOWN_TOPOLOGY_KEY,
)
from .csi import Topology, TopologyRequirement


def _candidates(requirement: TopologyRequirement | None) -> Iterator[Topology]:
    if requirement is None:
        return
    yield from requirement.preferred
    yield from requirement.requisite


def pick_availability_zone(requirement: TopologyRequirement | None) -> str:
    """Pick one zone, preferred topologies first; empty string if none."""
    for topology in _candidates(requirement):
        for key in (WELL_KNOWN_TOPOLOGY_KEY, TOPOLOGY_KEY):
            if key in topology.segments:
                return topology.segments[key]
    return ""


def get_outpost_arn(requirement: TopologyRequirement | None) -> str:
    """The outpost ARN of the first topology naming an outpost, or empty string."""
    for topology in _candidates(requirement):
        if AWS_OUTPOST_ID_KEY in topology.segments:
            return build_outpost_arn(topology.segments)
    return ""


def build_outpost_arn(segments: Mapping[str, str]) -> str:
    """Build an outpost ARN from topology segments; empty if any part is missing."""
    partition = segments.get(AWS_PARTITION_KEY, "")
    region = segments.get(AWS_REGION_KEY, "")
    outpost_id = segments.get(AWS_OUTPOST_ID_KEY, "")
    account_id = segments.get(AWS_ACCOUNT_ID_KEY, "")
    if not (partition and region and outpost_id and account_id):
        return ""
    return f"arn:{partition}:outposts:{region}:{account_id}:outpost/{outpost_id}"


def parse_outpost_arn(arn: str) -> dict[str, str]:
    """Split an ARN into topology segments; raises ValueError if it is not an ARN."""
    if not arn.startswith("arn:"):
        raise ValueError(f"arn: invalid prefix: {arn!r}")
    sections = arn.split(":", 5)
    if len(sections) != 6:
        raise ValueError(f"arn: not enough sections: {arn!r}")
    _, partition, _service, region, account_id, resource = sections
    return {
        AWS_REGION_KEY: region,
        AWS_PARTITION_KEY: partition,
        AWS_ACCOUNT_ID_KEY: account_id,
        AWS_OUTPOST_ID_KEY: resource.replace("outpost/", ""),
    }