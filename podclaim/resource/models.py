"""
Resource claim models (Pydantic).

This module defines the Kubernetes-shaped objects the resolver consumes:
claim parameter sets, resource claim templates and the pod level claim
references that point at them. Field names follow the manifest camelCase
spelling through aliases, while Python code uses snake_case.

ClaimParameters would normally be a CRD that a resource driver knows how to
interpret. Only two kinds are supported here, one for CDI devices and one for
"simple" host devices, and both only need a string map, so a single model
with a ``spec`` map covers them. The ``apiVersion`` tells them apart.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

PODMAN_RESOURCE_CLASS_NAME = "PodmanResourceClass"
CLAIM_PARAMETERS_KIND = "ClaimParameters"
RESOURCE_CLAIM_TEMPLATE_KIND = "ResourceClaimTemplate"
POD_KIND = "Pod"
RESOURCE_API_VERSION = "resource.k8s.io/v1alpha2"

# ClaimParameters are CRDs, so their apiVersion values are ours to define.
CDI_CLAIM_PARAMETERS_API_VERSION = "cdi.resource.podman.io/v1"
CDI_RESOURCE_CLASS_NAME = "cdidevice.podman.io"
SIMPLE_DEVICE_CLAIM_PARAMETERS_API_VERSION = "simpledevice.resource.podman.io/v1"
SIMPLE_DEVICE_RESOURCE_CLASS_NAME = "simpledevice.podman.io"


class ResourceModel(BaseModel):
    """Base for manifest objects: immutable, alias aware, tolerant of extras."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ObjectMeta(ResourceModel):
    """Standard object metadata."""
    name: str = Field(min_length=1, description="Unique name within its registry")
    namespace: Optional[str] = Field(default=None, description="Namespace, informational only")
    labels: Dict[str, str] = Field(default_factory=dict)
    annotations: Dict[str, str] = Field(default_factory=dict)


class ClaimParameters(ResourceModel):
    """A named, schema-tagged key/value bag describing one device request."""
    api_version: str = Field(alias="apiVersion", description="Schema discriminator")
    kind: str = Field(default=CLAIM_PARAMETERS_KIND)
    metadata: ObjectMeta
    spec: Dict[str, str] = Field(default_factory=dict, description="Schema specific parameters")

    @property
    def name(self) -> str:
        return self.metadata.name


class ParametersReference(ResourceModel):
    """Reference from a claim template to its claim parameters."""
    api_group: Optional[str] = Field(default=None, alias="apiGroup")
    kind: str = Field(default=CLAIM_PARAMETERS_KIND)
    name: str = Field(min_length=1)


class ResourceClaimSpec(ResourceModel):
    resource_class_name: Optional[str] = Field(default=None, alias="resourceClassName")
    parameters_ref: Optional[ParametersReference] = Field(default=None, alias="parametersRef")


class ResourceClaimTemplateSpec(ResourceModel):
    spec: ResourceClaimSpec = Field(default_factory=ResourceClaimSpec)


class ResourceClaimTemplate(ResourceModel):
    """A reusable claim declaration pointing at a parameter set by name."""
    api_version: str = Field(default=RESOURCE_API_VERSION, alias="apiVersion")
    kind: str = Field(default=RESOURCE_CLAIM_TEMPLATE_KIND)
    metadata: ObjectMeta
    spec: ResourceClaimTemplateSpec = Field(default_factory=ResourceClaimTemplateSpec)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def parameters_ref(self) -> Optional[str]:
        """Name of the referenced claim parameters, if any."""
        ref = self.spec.spec.parameters_ref
        return ref.name if ref is not None else None


class ClaimSource(ResourceModel):
    """Exactly one of the two fields is expected to be set."""
    resource_claim_name: Optional[str] = Field(default=None, alias="resourceClaimName")
    resource_claim_template_name: Optional[str] = Field(
        default=None, alias="resourceClaimTemplateName"
    )


class PodResourceClaim(ResourceModel):
    """Entry of a pod's ``spec.resourceClaims``."""
    name: str = Field(min_length=1, description="Name containers use to reference the claim")
    source: ClaimSource = Field(default_factory=ClaimSource)


# ===== Pod models (only what claim resolution needs) =====

class ContainerClaim(ResourceModel):
    name: str = Field(min_length=1)


class ContainerResources(ResourceModel):
    claims: List[ContainerClaim] = Field(default_factory=list)


class Container(ResourceModel):
    name: str = Field(min_length=1)
    image: Optional[str] = None
    resources: ContainerResources = Field(default_factory=ContainerResources)


class PodSpec(ResourceModel):
    containers: List[Container] = Field(default_factory=list)
    resource_claims: List[PodResourceClaim] = Field(default_factory=list, alias="resourceClaims")


class Pod(ResourceModel):
    api_version: str = Field(default="v1", alias="apiVersion")
    kind: str = Field(default=POD_KIND)
    metadata: ObjectMeta
    spec: PodSpec = Field(default_factory=PodSpec)

    @property
    def name(self) -> str:
        return self.metadata.name
