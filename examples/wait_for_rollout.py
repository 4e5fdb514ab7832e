import logging
import sys

from kubewait import Try, WaitTimeout
from kubewait.client import ClientWrapper

# Configure basic logging for the example
logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")

# --- IMPORTANT: Replace with the kubeconfig of your test cluster ---
KUBECONFIG = "kubeconfig.yaml"
NAMESPACE = "default"
DEPLOYMENT = "whoami"

# The cluster may still be booting, so wait for the API server before anything else.
bootstrap = Try()
client = bootstrap.wait_client_created("", KUBECONFIG, timeout=60)
try_ = Try(client)

try:
    try_.wait_ready_deployment(DEPLOYMENT, NAMESPACE, timeout=120)
    logging.info("Deployment %s is ready.", DEPLOYMENT)

    # Scale to 3 replicas and wait for the rollout.
    deployment, _ = client.get_deployment(NAMESPACE, DEPLOYMENT)
    deployment.spec.replicas = 3
    try_.wait_update_deployment(deployment, timeout=120)

    pods = try_.wait_command_execute_return(
        "kubectl", ["--kubeconfig", KUBECONFIG, "get", "pods", "-n", NAMESPACE], timeout=10
    )
    logging.info("Pods:\n%s", pods)

except WaitTimeout as err:
    logging.error("Gave up waiting: %s", err)
    sys.exit(1)

finally:
    client.close()
