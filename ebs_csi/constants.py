"""Names, keys and defaults shared across the driver."""

DRIVER_NAME = "ebs.csi.aws.com"
DRIVER_VERSION = "v1.2.1"

# Topology segment keys.
AWS_PARTITION_KEY = f"topology.{DRIVER_NAME}/partition"
AWS_ACCOUNT_ID_KEY = f"topology.{DRIVER_NAME}/account-id"
AWS_REGION_KEY = f"topology.{DRIVER_NAME}/region"
AWS_OUTPOST_ID_KEY = f"topology.{DRIVER_NAME}/outpost-id"
WELL_KNOWN_TOPOLOGY_KEY = "topology.kubernetes.io/zone"
# Deprecated: prefer WELL_KNOWN_TOPOLOGY_KEY.
TOPOLOGY_KEY = f"topology.{DRIVER_NAME}/zone"

# Key in the publish context holding the device path of an attached volume.
DEVICE_PATH_KEY = "devicePath"

# Key in the volume context holding the partition number to mount.
VOLUME_ATTRIBUTE_PARTITION = "partition"

# Suffixes placed between a disk name and its partition number.
DISK_PARTITION_SUFFIX = ""
NVME_DISK_PARTITION_SUFFIX = "p"

# Keys accepted in volume creation parameters.
VOLUME_TYPE_KEY = "type"
IOPS_PER_GB_KEY = "iopspergb"
ALLOW_AUTO_IOPS_PER_GB_INCREASE_KEY = "allowautoiopspergbincrease"
IOPS_KEY = "iops"
THROUGHPUT_KEY = "throughput"
ENCRYPTED_KEY = "encrypted"
KMS_KEY_ID_KEY = "kmskeyid"
PVC_NAME_KEY = "csi.storage.k8s.io/pvc/name"
PVC_NAMESPACE_KEY = "csi.storage.k8s.io/pvc/namespace"
PV_NAME_KEY = "csi.storage.k8s.io/pv/name"

# Tags applied to provisioned volumes and snapshots.
RESOURCE_LIFECYCLE_TAG_PREFIX = "kubernetes.io/cluster/"
RESOURCE_LIFECYCLE_OWNED = "owned"
NAME_TAG = "Name"
KUBERNETES_CLUSTER_TAG = "KubernetesCluster"
PVC_NAME_TAG = "kubernetes.io/created-for/pvc/name"
PVC_NAMESPACE_TAG = "kubernetes.io/created-for/pvc/namespace"
PV_NAME_TAG = "kubernetes.io/created-for/pv/name"

DEFAULT_CSI_ENDPOINT = "unix://tmp/csi.sock"