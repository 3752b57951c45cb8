"""
Handles loading, validation, and registration of resource manifests.

Manifests are multi-document YAML files in the shape ``kube play`` accepts.
ClaimParameters and ResourceClaimTemplate documents are registered with a
DynamicResourcesManager, Pod documents are returned to the caller, and any
other kind is skipped.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from podclaim.resource.errors import DuplicateEntryError, ManifestError
from podclaim.resource.manager import DynamicResourcesManager, create_manager
from podclaim.resource.models import (
    CLAIM_PARAMETERS_KIND,
    POD_KIND,
    RESOURCE_CLAIM_TEMPLATE_KIND,
    ClaimParameters,
    Pod,
    ResourceClaimTemplate,
)

logger = logging.getLogger(__name__)


class ManifestLoader:
    """Loads resource documents from a single YAML manifest file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load_documents(self) -> Iterator[Tuple[int, Dict[str, Any]]]:
        """Yields ``(index, document)`` for every non-empty document."""
        try:
            with open(self.path, "r") as f:
                documents = list(yaml.safe_load_all(f))
        except OSError as e:
            raise ManifestError(str(self.path), 0, f"cannot read manifest: {e}") from e
        except yaml.YAMLError as e:
            raise ManifestError(str(self.path), 0, f"invalid YAML: {e}") from e

        for index, document in enumerate(documents):
            if document is None:
                continue
            if not isinstance(document, dict):
                raise ManifestError(str(self.path), index, "document is not a mapping")
            yield index, document

    def load_into(self, manager: DynamicResourcesManager) -> List[Pod]:
        """Registers claim resources with ``manager`` and returns the pods found."""
        pods: List[Pod] = []
        for index, document in self.load_documents():
            kind = document.get("kind")
            try:
                if kind == CLAIM_PARAMETERS_KIND:
                    manager.add_claim_parameters(ClaimParameters.model_validate(document))
                elif kind == RESOURCE_CLAIM_TEMPLATE_KIND:
                    manager.add_resource_claim_template(ResourceClaimTemplate.model_validate(document))
                elif kind == POD_KIND:
                    pods.append(Pod.model_validate(document))
                else:
                    logger.debug("Skipping %s document %d of kind %r", self.path, index, kind)
            except ValidationError as e:
                problems = "; ".join(
                    f"/{'/'.join(str(part) for part in error['loc'])}: {error['msg']}"
                    for error in e.errors()
                )
                raise ManifestError(str(self.path), index, f"invalid {kind}: {problems}") from e
        logger.info("Loaded manifest %s (%d pods)", self.path, len(pods))
        return pods


def load_manifests(
    paths: Iterable[Union[str, Path]],
    manager: Optional[DynamicResourcesManager] = None,
    seal: Optional[bool] = None,
) -> Tuple[DynamicResourcesManager, List[Pod]]:
    """
    Load several manifests into one manager.

    Args:
        paths: Manifest files, loaded in order.
        manager: Manager to populate; a new one is created when omitted.
        seal: Seal the manager after loading; defaults to ``SEAL_AFTER_LOAD``.

    Returns:
        The populated manager and every pod found across the files.

    Raises:
        DuplicateEntryError: two documents define a pod with the same name.
    """
    if manager is None:
        manager = create_manager()
    if seal is None:
        from podclaim.config import settings
        seal = settings.SEAL_AFTER_LOAD

    pods: List[Pod] = []
    pod_names = set()
    for path in paths:
        for pod in ManifestLoader(path).load_into(manager):
            if pod.name in pod_names:
                raise DuplicateEntryError("pod", pod.name)
            pod_names.add(pod.name)
            pods.append(pod)

    if seal:
        manager.seal()
    return manager, pods
