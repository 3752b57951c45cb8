"""
Dynamic resource claims for podclaim.

This package resolves Kubernetes-style pod resource claims to devices:
- Pydantic models for claim parameters, templates and pod claims
- Write-once registries for parameters and templates
- Schema interpretation of claim parameters into device variants
- The manager that chains the lookups
"""

from .errors import (
    ResourceClaimError, DuplicateEntryError, NotFoundError, TemplateNotFoundError,
    ParametersNotFoundError, MalformedClaimError, UnsupportedClaimShapeError,
    MissingFieldError, UnsupportedSchemaError, RegistrySealedError, ManifestError
)
from .models import (
    ClaimParameters, ResourceClaimTemplate, PodResourceClaim, Pod,
    CDI_CLAIM_PARAMETERS_API_VERSION, SIMPLE_DEVICE_CLAIM_PARAMETERS_API_VERSION
)
from .schemas import SimpleDevice, CDIDevice, decode_parameters
from .registry import ParameterRegistry, TemplateRegistry
from .manager import DynamicResourcesManager, create_manager
from .pods import resolve_pod_devices

__all__ = [
    "ResourceClaimError", "DuplicateEntryError", "NotFoundError", "TemplateNotFoundError",
    "ParametersNotFoundError", "MalformedClaimError", "UnsupportedClaimShapeError",
    "MissingFieldError", "UnsupportedSchemaError", "RegistrySealedError", "ManifestError",
    "ClaimParameters", "ResourceClaimTemplate", "PodResourceClaim", "Pod",
    "CDI_CLAIM_PARAMETERS_API_VERSION", "SIMPLE_DEVICE_CLAIM_PARAMETERS_API_VERSION",
    "SimpleDevice", "CDIDevice", "decode_parameters", "ParameterRegistry",
    "TemplateRegistry", "DynamicResourcesManager", "create_manager", "resolve_pod_devices"
]
