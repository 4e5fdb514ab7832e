from kubernetes import client, config
from kubernetes.client import V1Deployment, V1Namespace
from kubernetes.client.rest import ApiException

from kubewait.exceptions import ResourceConflict
from kubewait.logger import get_logger

logger = get_logger(__name__)


class ClientWrapper:
    """
    Thin wrapper around the official Kubernetes API clients.

    Args:
        url (str): API server URL. Overrides the server of the kubeconfig when given.
        kubeconfig_path (str): Path to a kubeconfig file. When empty and no ``url`` is
          given, in-cluster configuration is tried first, then the default kubeconfig.
    """

    def __init__(self, url: str = "", kubeconfig_path: str = ""):
        self.url = url
        self.kubeconfig_path = kubeconfig_path
        self.configuration = self._load_configuration(url, kubeconfig_path)
        self.api_client = client.ApiClient(self.configuration)
        self.apps = client.AppsV1Api(self.api_client)
        self.core = client.CoreV1Api(self.api_client)
        self.version = client.VersionApi(self.api_client)

    @staticmethod
    def _load_configuration(url: str, kubeconfig_path: str) -> client.Configuration:
        configuration = client.Configuration()
        if kubeconfig_path:
            config.load_kube_config(
                config_file=kubeconfig_path, client_configuration=configuration
            )
        elif not url:
            try:
                config.load_incluster_config(client_configuration=configuration)
                logger.debug("Using in-cluster Kubernetes configuration")
            except config.ConfigException:
                config.load_kube_config(client_configuration=configuration)
                logger.debug("Using local Kubernetes configuration")

        if url:
            configuration.host = url.rstrip("/")

        return configuration

    def get_deployment(self, namespace: str, name: str) -> tuple[V1Deployment | None, bool]:
        try:
            return self.apps.read_namespaced_deployment(name=name, namespace=namespace), True
        except ApiException as err:
            if err.status == 404:
                return None, False

            raise

    def update_deployment(self, deployment: V1Deployment) -> V1Deployment:
        try:
            return self.apps.replace_namespaced_deployment(
                name=deployment.metadata.name,
                namespace=deployment.metadata.namespace,
                body=deployment,
            )
        except ApiException as err:
            if err.status == 409:
                raise ResourceConflict(err.reason or "conflict") from err

            raise

    def get_namespace(self, name: str) -> tuple[V1Namespace | None, bool]:
        try:
            return self.core.read_namespace(name=name), True
        except ApiException as err:
            if err.status == 404:
                return None, False

            raise

    def server_version(self) -> str:
        return self.version.get_code().git_version

    def close(self) -> None:
        self.api_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
