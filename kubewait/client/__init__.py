from kubewait.client.base import ResourceClient
from kubewait.client.kube import ClientWrapper

__all__ = ("ClientWrapper", "ResourceClient")
