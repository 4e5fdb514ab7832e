from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from kubernetes.client import V1Deployment, V1Namespace


class ResourceClient(Protocol):
    """
    The subset of cluster operations the waits rely on.
    Lookups return ``(resource, exists)`` and raise on any error other than not-found.
    """

    def get_deployment(self, namespace: str, name: str) -> "tuple[V1Deployment | None, bool]": ...

    def update_deployment(self, deployment: "V1Deployment") -> "V1Deployment":
        """
        Raises:
            ResourceConflict: When the deployment was modified concurrently.
        """
        ...

    def get_namespace(self, name: str) -> "tuple[V1Namespace | None, bool]": ...

    def server_version(self) -> str: ...
