import pytest
from kubernetes.client import (
    V1Container,
    V1Deployment,
    V1DeploymentSpec,
    V1DeploymentStatus,
    V1LabelSelector,
    V1Namespace,
    V1ObjectMeta,
    V1PodSpec,
    V1PodTemplateSpec,
)

from kubewait.model.config import CIConfig
from kubewait.utils.timeout import Poller


def make_deployment(
    replicas: int | None = 3,
    ready_replicas: int | None = 3,
    name: str = "whoami",
    namespace: str = "default",
) -> V1Deployment:
    labels = {"app": name}
    return V1Deployment(
        metadata=V1ObjectMeta(name=name, namespace=namespace),
        spec=V1DeploymentSpec(
            replicas=replicas,
            selector=V1LabelSelector(match_labels=labels),
            template=V1PodTemplateSpec(
                metadata=V1ObjectMeta(labels=labels),
                spec=V1PodSpec(containers=[V1Container(name=name, image="traefik/whoami")]),
            ),
        ),
        status=V1DeploymentStatus(replicas=replicas, ready_replicas=ready_replicas),
    )


class FakeClient:
    """
    In-memory stand-in for the cluster client. Each lookup pops the next queued
    state; the last state sticks. Queued exceptions are raised instead of returned.
    """

    def __init__(self):
        self.deployments: list = []
        self.namespaces: list = []
        self.update_results: list = []
        self.version_results: list = ["v1.30.0"]
        self.get_deployment_calls: list[tuple[str, str]] = []
        self.get_namespace_calls: list[str] = []
        self.updated: list[V1Deployment] = []
        self.closed = 0

    @staticmethod
    def _next(queue: list):
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, Exception):
            raise item

        return item

    def get_deployment(self, namespace: str, name: str):
        self.get_deployment_calls.append((namespace, name))
        deployment = self._next(self.deployments)
        return deployment, deployment is not None

    def update_deployment(self, deployment: V1Deployment) -> V1Deployment:
        self.updated.append(deployment)
        if self.update_results:
            self._next(self.update_results)

        return deployment

    def get_namespace(self, name: str):
        self.get_namespace_calls.append(name)
        namespace = self._next(self.namespaces)
        return namespace, namespace is not None

    def server_version(self) -> str:
        return self._next(self.version_results)

    def close(self) -> None:
        self.closed += 1


class SleepRecorder:
    def __init__(self):
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def namespace():
    return V1Namespace(metadata=V1ObjectMeta(name="whoami"))


@pytest.fixture
def fast_poller():
    """
    A poller with millisecond intervals and no CI scaling.
    """
    return Poller(ci_config=CIConfig(), initial_interval=0.001, max_interval=0.01)


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


@pytest.fixture
def clean_ci_env(monkeypatch):
    monkeypatch.delenv("CI", raising=False)
    monkeypatch.delenv("CI_TIMEOUT_MULTIPLIER", raising=False)


@pytest.fixture(name="make_deployment")
def make_deployment_fixture():
    return make_deployment
