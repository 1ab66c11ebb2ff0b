import pytest

from ebs_csi.constants import (
    AWS_ACCOUNT_ID_KEY,
    AWS_OUTPOST_ID_KEY,
    AWS_PARTITION_KEY,
    AWS_REGION_KEY,
    TOPOLOGY_KEY,
    WELL_KNOWN_TOPOLOGY_KEY,
)
from ebs_csi.csi import Topology, TopologyRequirement
from ebs_csi.topology import (
    build_outpost_arn,
    get_outpost_arn,
    parse_outpost_arn,
    pick_availability_zone,
)

EXP_ZONE = "us-west-2b"
RAW_OUTPOST_ARN = "arn:aws:outposts:us-west-2:111111111111:outpost/op-0aaa000a0aaaa00a0"

OUTPOST_SEGMENTS = {
    TOPOLOGY_KEY: EXP_ZONE,
    AWS_ACCOUNT_ID_KEY: "111111111111",
    AWS_OUTPOST_ID_KEY: "op-0aaa000a0aaaa00a0",
    AWS_REGION_KEY: "us-west-2",
    AWS_PARTITION_KEY: "aws",
}


@pytest.mark.parametrize(
    "requirement, expected",
    [
        pytest.param(
            TopologyRequirement(
                requisite=[Topology({TOPOLOGY_KEY: ""})],
                preferred=[Topology({TOPOLOGY_KEY: EXP_ZONE, WELL_KNOWN_TOPOLOGY_KEY: "foobar"})],
            ),
            "foobar",
            id="well-known key from preferred",
        ),
        pytest.param(
            TopologyRequirement(
                requisite=[Topology({TOPOLOGY_KEY: EXP_ZONE, WELL_KNOWN_TOPOLOGY_KEY: "foobar"})]
            ),
            "foobar",
            id="well-known key from requisite",
        ),
        pytest.param(
            TopologyRequirement(
                requisite=[Topology({TOPOLOGY_KEY: ""})],
                preferred=[Topology({TOPOLOGY_KEY: EXP_ZONE})],
            ),
            EXP_ZONE,
            id="pick from preferred",
        ),
        pytest.param(
            TopologyRequirement(requisite=[Topology({TOPOLOGY_KEY: EXP_ZONE})]),
            EXP_ZONE,
            id="pick from requisite",
        ),
        pytest.param(
            TopologyRequirement(preferred=[Topology()], requisite=[Topology()]),
            "",
            id="empty topology",
        ),
        pytest.param(None, "", id="requirement is None"),
    ],
)
def test_pick_availability_zone(requirement, expected):
    assert pick_availability_zone(requirement) == expected


@pytest.mark.parametrize(
    "requirement, expected",
    [
        pytest.param(
            TopologyRequirement(
                requisite=[Topology({TOPOLOGY_KEY: EXP_ZONE})],
                preferred=[Topology(dict(OUTPOST_SEGMENTS))],
            ),
            RAW_OUTPOST_ARN,
            id="from preferred",
        ),
        pytest.param(
            TopologyRequirement(requisite=[Topology(dict(OUTPOST_SEGMENTS))]),
            RAW_OUTPOST_ARN,
            id="from requisite",
        ),
        pytest.param(
            TopologyRequirement(preferred=[Topology()], requisite=[Topology()]),
            "",
            id="empty topology",
        ),
        pytest.param(None, "", id="requirement is None"),
    ],
)
def test_get_outpost_arn(requirement, expected):
    assert get_outpost_arn(requirement) == expected


@pytest.mark.parametrize(
    "partition, region, account_id, outpost_id, expected",
    [
        ("aws", "us-west-2", "111111111111", "op-0aaa000a0aaaa00a0", RAW_OUTPOST_ARN),
        ("", "us-west-2", "111111111111", "op-0aaa000a0aaaa00a0", ""),
        ("aws", "", "111111111111", "op-0aaa000a0aaaa00a0", ""),
        ("aws", "us-west-2", "", "op-0aaa000a0aaaa00a0", ""),
        ("aws", "us-west-2", "111111111111", "", ""),
    ],
    ids=["all present", "no partition", "no region", "no account id", "no outpost id"],
)
def test_build_outpost_arn(partition, region, account_id, outpost_id, expected):
    segments = {
        AWS_REGION_KEY: region,
        AWS_PARTITION_KEY: partition,
        AWS_ACCOUNT_ID_KEY: account_id,
        AWS_OUTPOST_ID_KEY: outpost_id,
    }
    assert build_outpost_arn(segments) == expected


def test_parse_outpost_arn_strips_resource_prefix():
    segments = parse_outpost_arn(RAW_OUTPOST_ARN)
    assert segments[AWS_OUTPOST_ID_KEY] == "op-0aaa000a0aaaa00a0"
    assert segments[AWS_ACCOUNT_ID_KEY] == "111111111111"
    assert segments[AWS_REGION_KEY] == "us-west-2"
    assert segments[AWS_PARTITION_KEY] == "aws"


def test_parse_then_build_round_trips():
    assert build_outpost_arn(parse_outpost_arn(RAW_OUTPOST_ARN)) == RAW_OUTPOST_ARN


@pytest.mark.parametrize("bad", ["", "not-an-arn", "arn:aws:outposts:us-west-2"])
def test_parse_outpost_arn_rejects_invalid(bad):
    with pytest.raises(ValueError):
        parse_outpost_arn(bad)