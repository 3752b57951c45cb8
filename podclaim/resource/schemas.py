"""
Interpretation of claim parameters by schema.

A parameter set is a string map tagged with an ``apiVersion``. Decoding turns
it into one of a closed set of typed device variants, each knowing the device
string it stands for. Adding a device kind means adding a variant and a
decoder entry in ``DECODERS``.
"""
from typing import Callable, Dict, Union

from pydantic import BaseModel, ConfigDict

from .errors import MissingFieldError, UnsupportedSchemaError
from .models import (
    CDI_CLAIM_PARAMETERS_API_VERSION,
    SIMPLE_DEVICE_CLAIM_PARAMETERS_API_VERSION,
    ClaimParameters,
)


class SimpleDevice(BaseModel):
    """A device addressed by its host path, e.g. ``/dev/fuse``."""
    model_config = ConfigDict(frozen=True)

    host_path: str

    def qualified_name(self) -> str:
        return self.host_path


class CDIDevice(BaseModel):
    """A CDI device, addressed as ``vendor/device=name``."""
    model_config = ConfigDict(frozen=True)

    vendor: str
    device: str
    name: str

    def qualified_name(self) -> str:
        return f"{self.vendor}/{self.device}={self.name}"


Device = Union[SimpleDevice, CDIDevice]


def _require(parameters: ClaimParameters, field: str) -> str:
    try:
        return parameters.spec[field]
    except KeyError:
        raise MissingFieldError(field, parameters.api_version, parameters.name) from None


def _decode_simple_device(parameters: ClaimParameters) -> SimpleDevice:
    return SimpleDevice(host_path=_require(parameters, "hostpath"))


def _decode_cdi_device(parameters: ClaimParameters) -> CDIDevice:
    # Checked in this order so the reported missing field is deterministic.
    device = _require(parameters, "device")
    vendor = _require(parameters, "vendor")
    name = _require(parameters, "name")
    return CDIDevice(vendor=vendor, device=device, name=name)


DECODERS: Dict[str, Callable[[ClaimParameters], Device]] = {
    SIMPLE_DEVICE_CLAIM_PARAMETERS_API_VERSION: _decode_simple_device,
    CDI_CLAIM_PARAMETERS_API_VERSION: _decode_cdi_device,
}


def decode_parameters(parameters: ClaimParameters) -> Device:
    """
    Decode a parameter set into its device variant.

    Raises:
        UnsupportedSchemaError: ``apiVersion`` is not a recognized schema.
        MissingFieldError: a key required by the schema is absent.
    """
    decoder = DECODERS.get(parameters.api_version)
    if decoder is None:
        raise UnsupportedSchemaError(parameters.api_version, parameters.name)
    return decoder(parameters)
