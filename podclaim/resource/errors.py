"""
Exceptions raised by the resource claim registries and resolver.

Every failure is deterministic for a given input, so callers get enough
context on the exception (registry, name, field, schema) to report it
without retrying.
"""
from typing import Optional

RESOLVE_ERROR_PREFIX = "failed to resolve resource claim to device"
INVALID_PARAMETERS_PREFIX = "invalid resource claim parameters"


class ResourceClaimError(Exception):
    """Base exception for resource claim errors."""
    pass


class DuplicateEntryError(ResourceClaimError):
    """Raised when a name is registered twice in the same registry."""

    def __init__(self, registry: str, name: str):
        self.registry = registry
        self.name = name
        super().__init__(f"duplicate {registry} defined: {name!r}")


class NotFoundError(ResourceClaimError):
    """Raised when a registry has no entry for a name."""

    def __init__(self, registry: str, name: str, message: Optional[str] = None):
        self.registry = registry
        self.name = name
        super().__init__(message or f"{registry} {name!r} not found")


class TemplateNotFoundError(NotFoundError):
    """The claim names a template that was never registered."""

    def __init__(self, name: str):
        super().__init__(
            "resource claim template",
            name,
            f"{RESOLVE_ERROR_PREFIX}: resource claim template {name!r} not found",
        )


class ParametersNotFoundError(NotFoundError):
    """The template references claim parameters that were never registered."""

    def __init__(self, name: str, template: str):
        self.template = template
        super().__init__(
            "resource claim parameters",
            name,
            f"{RESOLVE_ERROR_PREFIX}: resource claim parameters {name!r} "
            f"referenced by template {template!r} not found",
        )


class MalformedClaimError(ResourceClaimError):
    """The claim reference is structurally incomplete."""

    def __init__(self, detail: str, claim: Optional[str] = None):
        self.detail = detail
        self.claim = claim
        super().__init__(f"{RESOLVE_ERROR_PREFIX}: {detail}")


class UnsupportedClaimShapeError(ResourceClaimError):
    """The claim names a resource claim directly instead of a template."""

    def __init__(self, claim: Optional[str] = None, resource_claim_name: Optional[str] = None):
        self.claim = claim
        self.resource_claim_name = resource_claim_name
        super().__init__(
            f"{RESOLVE_ERROR_PREFIX}: resource claim should be nil "
            f"(got resourceClaimName {resource_claim_name!r}, only templates are supported)"
        )


class MissingFieldError(ResourceClaimError):
    """A key required by the parameter schema is absent from its spec."""

    def __init__(
        self,
        field: str,
        api_version: str,
        parameters: Optional[str] = None,
        prefix: str = INVALID_PARAMETERS_PREFIX,
    ):
        self.field = field
        self.api_version = api_version
        self.parameters = parameters
        self.prefix = prefix
        super().__init__(
            f"{prefix}: missing {field} parameter of {api_version} "
            f"claim parameters {parameters!r}"
        )


class UnsupportedSchemaError(ResourceClaimError):
    """The parameter set declares an apiVersion outside the recognized set."""

    def __init__(
        self,
        api_version: str,
        parameters: Optional[str] = None,
        prefix: str = INVALID_PARAMETERS_PREFIX,
    ):
        self.api_version = api_version
        self.parameters = parameters
        self.prefix = prefix
        super().__init__(
            f"{prefix}: unsupported resource claim parameter "
            f"apiVersion: {api_version}"
        )


class RegistrySealedError(ResourceClaimError):
    """Raised when adding to a registry after it was sealed."""

    def __init__(self, registry: str, name: str):
        self.registry = registry
        self.name = name
        super().__init__(f"cannot add {name!r}: {registry} registry is sealed")


class ManifestError(ResourceClaimError):
    """Raised when a manifest document cannot be parsed into a resource."""

    def __init__(self, path: str, index: int, message: str):
        self.path = path
        self.index = index
        self.message = message
        super().__init__(f"{path} (document {index}): {message}")
