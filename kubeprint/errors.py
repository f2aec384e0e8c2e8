"""Error taxonomy for kubeprint."""


class KubeprintError(Exception):
    """Base error for all failures surfaced to the CLI."""


class ClusterConnectionError(KubeprintError):
    """The cluster client could not be built from the kubeconfig."""


class ClusterConfigFetchError(KubeprintError):
    """The kubeadm ClusterConfiguration could not be read from the cluster."""


class ComponentConfigFetchError(KubeprintError):
    """A component config could not be read from the cluster."""


class AmbiguousIdentityError(KubeprintError):
    """Two distinct identities render to the same canonical string."""
