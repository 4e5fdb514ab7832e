import time
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, TypeVar

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_fixed, wait_random

from kubewait import conditions
from kubewait.client.kube import ClientWrapper
from kubewait.exceptions import ResourceConflict, UpdateFailed
from kubewait.logger import get_logger
from kubewait.model.config import CIConfig
from kubewait.utils.process import run_command
from kubewait.utils.timeout import Poller

if TYPE_CHECKING:
    from kubernetes.client import V1Deployment

    from kubewait.client.base import ResourceClient
    from kubewait.conditions import ClientFactory, CommandRunner

T = TypeVar("T")

# Same as the default retry of the Kubernetes Go client for write conflicts.
CONFLICT_RETRY_ATTEMPTS = 5
CONFLICT_RETRY_INTERVAL = 0.01
CONFLICT_RETRY_JITTER = 0.1


class Try:
    """
    Waits for eventually-consistent cluster state in integration tests.

    Args:
        client (ResourceClient | None): Client used to look up and update resources.
          Only the command, function and client-creation waits work without one.
        ci_config (CIConfig | None): Fixed CI configuration. Read from the environment
          on every call when ``None``.
        poller (Poller | None): Custom poller, e.g. with shorter intervals.
        sleep: Function used to wait between attempts.
        runner: Runs external commands.
        client_factory: Builds clients in :meth:`wait_client_created`.
    """

    def __init__(
        self,
        client: "ResourceClient | None" = None,
        ci_config: CIConfig | None = None,
        poller: Poller | None = None,
        sleep: Callable[[float], None] = time.sleep,
        runner: "CommandRunner" = run_command,
        client_factory: "ClientFactory" = ClientWrapper,
    ):
        self.client = client
        self.sleep = sleep
        self.poller = poller or Poller(ci_config=ci_config, sleep=sleep)
        self.runner = runner
        self.client_factory = client_factory
        self.logger = get_logger(__name__)

    def wait_ready_deployment(self, name: str, namespace: str, timeout: float) -> None:
        """
        Wait until the deployment exists and all of its replicas are ready.
        """
        self.poller.run(
            conditions.deployment_ready(self.client, name, namespace),
            timeout,
            f"unable get the deployment {name!r} in namespace {namespace!r}",
        )

    def wait_update_deployment(self, deployment: "V1Deployment", timeout: float) -> None:
        """
        Update the deployment, retrying briefly on write conflicts, then wait
        until it is ready again.

        Raises:
            UpdateFailed: When the update itself could not be applied.
            WaitTimeout: When the deployment did not become ready in time.
        """
        name = deployment.metadata.name
        retrying = Retrying(
            stop=stop_after_attempt(CONFLICT_RETRY_ATTEMPTS),
            wait=wait_fixed(CONFLICT_RETRY_INTERVAL)
            + wait_random(0, CONFLICT_RETRY_INTERVAL * CONFLICT_RETRY_JITTER),
            retry=retry_if_exception_type(ResourceConflict),
            sleep=self.sleep,
            reraise=True,
        )
        try:
            retrying(self.client.update_deployment, deployment)
        except Exception as err:
            raise UpdateFailed(name, err) from err

        self.wait_ready_deployment(name, deployment.metadata.namespace, timeout)

    def wait_delete_deployment(self, name: str, namespace: str, timeout: float) -> None:
        """
        Wait until the deployment is deleted.
        """
        self.poller.run(
            conditions.deployment_deleted(self.client, name, namespace),
            timeout,
            f"unable get the deployment {name!r} in namespace {namespace!r}",
        )

    def wait_delete_namespace(self, name: str, timeout: float) -> None:
        """
        Wait until the namespace is deleted.
        """
        self.poller.run(
            conditions.namespace_deleted(self.client, name),
            timeout,
            f"unable get the namespace {name!r}",
        )

    def wait_command_execute(
        self, command: str, args: Sequence[str], expected: str, timeout: float
    ) -> None:
        """
        Wait until the command succeeds and its output contains ``expected``.
        """
        self.poller.run(
            conditions.command_output_contains(command, args, expected, runner=self.runner),
            timeout,
            f"unable execute command {_command_line(command, args)}",
        )

    def wait_command_execute_return(
        self, command: str, args: Sequence[str], timeout: float
    ) -> str:
        """
        Wait until the command succeeds and return its combined output.
        """
        return self.poller.run(
            conditions.command_succeeds(command, args, runner=self.runner),
            timeout,
            f"unable execute command {_command_line(command, args)}",
        )

    def wait_function(self, fn: Callable[[], T], timeout: float) -> T:
        """
        Wait until ``fn`` returns without raising.
        """
        return self.poller.run(fn, timeout, "unable execute function")

    def wait_client_created(
        self, url: str, kubeconfig_path: str, timeout: float
    ) -> ClientWrapper:
        """
        Wait until a client can be created and the API server responds.
        """
        client = self.poller.run(
            conditions.cluster_reachable(url, kubeconfig_path, factory=self.client_factory),
            timeout,
            "unable to create clients",
        )
        self.logger.debug("Connected to %s", url or "cluster")
        return client


def _command_line(command: str, args: Sequence[str]) -> str:
    return " ".join((command, *args))
