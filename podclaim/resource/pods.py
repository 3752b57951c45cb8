"""
Resolve the resource claims of every container in a pod to devices.
"""
import logging
from typing import Dict, List

from .errors import MalformedClaimError
from .manager import DynamicResourcesManager
from .models import Pod

logger = logging.getLogger(__name__)


def resolve_pod_devices(manager: DynamicResourcesManager, pod: Pod) -> Dict[str, List[str]]:
    """
    Map each container name to the devices of its ``resources.claims``.

    Container claims refer to entries of the pod's ``spec.resourceClaims`` by
    name. Devices are listed in the order the container declares its claims.
    """
    claims = {claim.name: claim for claim in pod.spec.resource_claims}
    devices: Dict[str, List[str]] = {}
    for container in pod.spec.containers:
        container_devices = []
        for container_claim in container.resources.claims:
            claim = claims.get(container_claim.name)
            if claim is None:
                raise MalformedClaimError(
                    f"container {container.name!r} references unknown claim {container_claim.name!r}",
                    container_claim.name,
                )
            container_devices.append(manager.resolve_claim_to_device(claim))
        devices[container.name] = container_devices
    logger.debug("Resolved devices for pod %r: %s", pod.name, devices)
    return devices
