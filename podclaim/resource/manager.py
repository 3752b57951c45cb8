"""
Dynamic resources manager.

Resolves the claims named in a container's ``resources.claims`` to a device
that can be added to the container spec during creation: either a simple
Linux device path (``/dev/something``) or a CDI device name
(``vendor.com/device=name``).

Resolution follows two levels of indirection. A pod claim names a template,
and the template names the claim parameters that describe the device:

    PodResourceClaim -> ResourceClaimTemplate -> ClaimParameters -> device
"""
import logging
from typing import List, Optional, Tuple

from .errors import (
    RESOLVE_ERROR_PREFIX,
    MalformedClaimError,
    MissingFieldError,
    NotFoundError,
    ParametersNotFoundError,
    TemplateNotFoundError,
    UnsupportedClaimShapeError,
    UnsupportedSchemaError,
)
from .models import ClaimParameters, PodResourceClaim, ResourceClaimTemplate
from .registry import ParameterRegistry, TemplateRegistry
from .schemas import decode_parameters

logger = logging.getLogger(__name__)


class DynamicResourcesManager:
    """
    Owns the claim parameter and claim template registries and resolves pod
    resource claims through them.

    Args:
        strict: Decode claim parameters when they are added, rejecting
            unsupported schemas and missing fields early.
    """

    def __init__(self, strict: bool = False):
        self.parameters = ParameterRegistry(strict=strict)
        self.templates = TemplateRegistry()

    def add_claim_parameters(self, parameters: ClaimParameters) -> None:
        self.parameters.add(parameters)

    def add_resource_claim_template(self, template: ResourceClaimTemplate) -> None:
        self.templates.add(template)

    @property
    def sealed(self) -> bool:
        return self.parameters.sealed and self.templates.sealed

    def seal(self) -> None:
        """Make both registries read-only; safe for concurrent resolution."""
        self.parameters.seal()
        self.templates.seal()

    def state(self) -> List[Tuple[str, str, str]]:
        """Registered resources as ``(kind, apiVersion, name)`` rows, templates first."""
        rows = [(t.kind, t.api_version, t.name) for t in self.templates]
        rows.extend((p.kind, p.api_version, p.name) for p in self.parameters)
        return rows

    def log_state(self, level: int = logging.DEBUG) -> None:
        logger.log(level, "Templates")
        for template in self.templates:
            logger.log(level, "  %s - %s", template.api_version, template.name)
        logger.log(level, "Claim parameters")
        for parameters in self.parameters:
            logger.log(level, "  %s - %s", parameters.api_version, parameters.name)

    def resolve_claim_to_device(self, claim: PodResourceClaim) -> str:
        """
        Resolve a pod level resource claim to a device string.

        Only claims sourced from a template are supported; a claim naming a
        resource claim directly is rejected.

        Raises:
            UnsupportedClaimShapeError: the claim has a ``resourceClaimName``.
            MalformedClaimError: the claim has no template name.
            TemplateNotFoundError: the template is not registered.
            ParametersNotFoundError: the template's parameters are not registered.
            MissingFieldError: the parameters lack a field their schema requires.
            UnsupportedSchemaError: the parameters' apiVersion is not supported.
        """
        if claim.source.resource_claim_name is not None:
            raise UnsupportedClaimShapeError(claim.name, claim.source.resource_claim_name)

        template = self._resolve_claim_to_template(claim)
        device = self._resolve_template_to_device(template)
        logger.debug("Resolved resource claim %r to device %r", claim.name, device)
        return device

    def _resolve_claim_to_template(self, claim: PodResourceClaim) -> ResourceClaimTemplate:
        template_name = claim.source.resource_claim_template_name
        if template_name is None:
            raise MalformedClaimError("claim source missing template name", claim.name)
        try:
            return self.templates.get(template_name)
        except NotFoundError:
            raise TemplateNotFoundError(template_name) from None

    def _resolve_template_to_device(self, template: ResourceClaimTemplate) -> str:
        parameters_name = template.parameters_ref
        if parameters_name is None:
            raise MalformedClaimError(
                f"resource claim template {template.name!r} has no parametersRef"
            )
        try:
            parameters = self.parameters.get(parameters_name)
        except NotFoundError:
            raise ParametersNotFoundError(parameters_name, template.name) from None
        try:
            device = decode_parameters(parameters)
        except MissingFieldError as e:
            raise MissingFieldError(e.field, e.api_version, e.parameters, prefix=RESOLVE_ERROR_PREFIX) from None
        except UnsupportedSchemaError as e:
            raise UnsupportedSchemaError(e.api_version, e.parameters, prefix=RESOLVE_ERROR_PREFIX) from None
        return device.qualified_name()


def create_manager(strict: Optional[bool] = None) -> DynamicResourcesManager:
    """Create a manager, taking defaults from the application settings."""
    if strict is None:
        from podclaim.config import settings
        strict = settings.STRICT_PARAMETERS
    return DynamicResourcesManager(strict=strict)
