"""
Builders for the checks used by :class:`~kubewait.wait.Try`.

Every builder returns a zero-argument callable that returns on success and raises
:class:`~kubewait.exceptions.CheckFailed` with a descriptive reason otherwise.
"""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from kubewait.exceptions import CheckFailed
from kubewait.utils.process import CommandResult, run_command

if TYPE_CHECKING:
    from kubewait.client.base import ResourceClient
    from kubewait.client.kube import ClientWrapper

CommandRunner = Callable[[str, Sequence[str]], CommandResult]
ClientFactory = Callable[[str, str], "ClientWrapper"]


def deployment_ready(client: "ResourceClient", name: str, namespace: str) -> Callable[[], None]:
    def check() -> None:
        try:
            deployment, exists = client.get_deployment(namespace, name)
        except Exception as err:
            raise CheckFailed(
                f"unable get the deployment {name!r} in namespace {namespace!r}: {err}"
            ) from err

        if not exists or deployment is None:
            raise CheckFailed(f"deployment {name!r} has not been yet created")

        status = deployment.status
        replicas = (status.replicas if status else None) or 0
        ready = (status.ready_replicas if status else None) or 0
        if replicas == 0:
            raise CheckFailed(f"deployment {name!r} has no replicas")

        if ready != replicas:
            raise CheckFailed(f"deployment {name!r} not ready ({ready}/{replicas} replicas)")

    return check


def deployment_deleted(client: "ResourceClient", name: str, namespace: str) -> Callable[[], None]:
    def check() -> None:
        try:
            _, exists = client.get_deployment(namespace, name)
        except Exception as err:
            raise CheckFailed(
                f"unable get the deployment {name!r} in namespace {namespace!r}: {err}"
            ) from err

        if exists:
            raise CheckFailed(f"deployment {name!r} still exists")

    return check


def namespace_deleted(client: "ResourceClient", name: str) -> Callable[[], None]:
    def check() -> None:
        try:
            _, exists = client.get_namespace(name)
        except Exception as err:
            raise CheckFailed(f"unable get the namespace {name!r}: {err}") from err

        if exists:
            raise CheckFailed(f"namespace {name!r} still exists")

    return check


def command_succeeds(
    command: str, args: Sequence[str], runner: CommandRunner = run_command
) -> Callable[[], str]:
    """
    The command exits with status zero. The check returns the combined output.
    """

    def check() -> str:
        try:
            result = runner(command, args)
        except OSError as err:
            raise CheckFailed(f"unable execute command {command} {' '.join(args)}: {err}") from err

        if not result.ok:
            raise CheckFailed(
                f"unable execute command {result.command_line} - output {result.output}: \n"
                f"exit status {result.returncode}"
            )

        return result.output

    return check


def command_output_contains(
    command: str, args: Sequence[str], expected: str, runner: CommandRunner = run_command
) -> Callable[[], str]:
    succeeds = command_succeeds(command, args, runner=runner)

    def check() -> str:
        output = succeeds()
        if expected not in output:
            raise CheckFailed(f"output {output} does not contain {expected}")

        return output

    return check


def cluster_reachable(
    url: str, kubeconfig_path: str, factory: ClientFactory
) -> Callable[[], "ClientWrapper"]:
    """
    A client can be built and the API server answers a version request.
    """

    def check() -> "ClientWrapper":
        try:
            client = factory(url, kubeconfig_path)
        except Exception as err:
            raise CheckFailed(f"unable to create clients: {err}") from err

        try:
            client.server_version()
        except Exception as err:
            client.close()
            raise CheckFailed(f"unable to get server version: {err}") from err

        return client

    return check
