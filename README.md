# ebs-csi

Building blocks for a Container Storage Interface (CSI) driver that manages
block storage volumes and snapshots: driver options, the identity service,
request and status types, the cloud interface, topology handling, tracking of
in-flight operations and filesystem helpers for the node side.

## Modules

- `ebs_csi.constants` – the driver name (`DRIVER_NAME`), its version,
  topology segment keys, volume parameter keys and the tag names applied to
  volumes and snapshots.
- `ebs_csi.options` – `DriverOptions` (endpoint, extra tags, `Mode`, volume
  attach limit, cluster id, SDK debug logging) and the option functions
  `with_endpoint`, `with_extra_tags`, `with_extra_volume_tags`, `with_mode`,
  `with_volume_attach_limit`, `with_kubernetes_cluster_id` and
  `with_aws_sdk_debug_log`. `build_driver_options` starts from the defaults
  (endpoint `unix://tmp/csi.sock`, mode `Mode.ALL`) and applies each option in
  turn. `with_extra_volume_tags` is the deprecated form of `with_extra_tags`
  and never overrides tags that are already set; `with_mode` raises
  `ValueError` for an unknown mode.
- `ebs_csi.identity` – `IdentityService` with `get_plugin_info()` (a
  `PluginInfo` of name and vendor version), `get_plugin_capabilities()` (the
  controller service and volume accessibility constraints, as
  `PluginCapability` members) and `probe()`.
- `ebs_csi.csi` – the request and response dataclasses (`CreateVolumeRequest`,
  `ControllerPublishVolumeRequest`, `CreateSnapshotRequest`,
  `ListSnapshotsRequest`, `Volume`, `SnapshotInfo`, `TopologyRequirement`, …),
  `AccessMode`, `VolumeCapability`, `StatusCode` and `CSIError`, an exception
  that carries a `StatusCode` and a message.
- `ebs_csi.cloud` – the `Cloud` protocol describing what a block-storage
  provider must offer (disks, attachments, resizing, snapshots), its data
  types (`Disk`, `Snapshot`, `DiskOptions`, `SnapshotOptions`,
  `SnapshotPage`), the errors it raises (`NotFoundError`,
  `IdempotentParameterMismatchError`, `VolumeInUseError`,
  `InvalidMaxResultsError`, `MultiSnapshotsError`, all `CloudError`), volume
  type names and the default volume size of 100 GiB.
- `ebs_csi.topology` – `pick_availability_zone` (preferred topologies before
  requisite ones, the well-known zone key before the driver's own),
  `get_outpost_arn`, `build_outpost_arn` and `parse_outpost_arn`.
- `ebs_csi.inflight` – `InFlight`, a thread-safe set of keys for operations in
  progress. `insert` returns `False` for a key already held, `delete` forgets
  a key, `key in inflight` tests membership, and `hold(key)` is a context
  manager that raises `AlreadyInFlightError` if the key is taken and releases
  it on exit.
- `ebs_csi.mount` – `NodeMounter` creates mount targets (`make_file`,
  `make_dir`), checks paths (`path_exists`, which counts a corrupted mount
  point as existing), reads device and filesystem sizes and decides with
  `need_resize` whether an ext3, ext4 or xfs filesystem is smaller than its
  device by more than one block. `parse_fs_info_output` pulls block size and
  block count out of `key<separator>value` text. Failures raise `MountError`.

## Example

```python
from ebs_csi.inflight import InFlight
from ebs_csi.options import Mode, build_driver_options, with_extra_tags, with_mode
from ebs_csi.topology import build_outpost_arn, pick_availability_zone
from ebs_csi.csi import Topology, TopologyRequirement
from ebs_csi.constants import TOPOLOGY_KEY

options = build_driver_options(with_mode("controller"), with_extra_tags({"team": "storage"}))
assert options.mode is Mode.CONTROLLER

requirement = TopologyRequirement(requisite=[Topology({TOPOLOGY_KEY: "us-west-2b"})])
assert pick_availability_zone(requirement) == "us-west-2b"

inflight = InFlight()
with inflight.hold("vol-test"):
    assert "vol-test" in inflight
assert "vol-test" not in inflight
```

`NodeMounter` does not run programs itself. Size inspection goes through a
runner callable given to it, which takes an argument list and returns the
combined output, raising `CommandError` on failure:

```python
from ebs_csi.mount import NodeMounter

outputs = {"blockdev": "2147483648\n", "dumpe2fs": "Block size: 4096\nBlock count: 262144\n"}
mounter = NodeMounter(runner=lambda args: outputs[args[0]])
assert mounter.need_resize("/dev/test1", "/mnt/test1", "ext4") is True
```

## What this package does not do

- It has no controller service: nothing here creates, deletes, attaches,
  detaches or expands volumes, or creates and lists snapshots. The `Cloud`
  protocol and the request types describe those operations, but no code
  carries them out.
- It ships no `Cloud` implementation; a backend must be supplied.
- It runs no RPC server and listens on no endpoint; `DriverOptions.endpoint`
  is only recorded.
- It has no command-line entry point.
- It does not mount, unmount or format filesystems, and it runs no external
  tools unless a runner is given to `NodeMounter`.

## Installation

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```