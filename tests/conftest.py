import textwrap

import pytest
from click.testing import CliRunner

from podclaim.resource.manager import DynamicResourcesManager
from podclaim.resource.models import (
    CDI_CLAIM_PARAMETERS_API_VERSION,
    SIMPLE_DEVICE_CLAIM_PARAMETERS_API_VERSION,
    ClaimParameters,
    PodResourceClaim,
    ResourceClaimTemplate,
)


def make_parameters(name, api_version, spec):
    return ClaimParameters(apiVersion=api_version, metadata={"name": name}, spec=spec)


def make_template(name, parameters_ref):
    return ResourceClaimTemplate(
        metadata={"name": name},
        spec={"spec": {"parametersRef": {"kind": "ClaimParameters", "name": parameters_ref}}},
    )


def template_claim(template_name, name="claim"):
    return PodResourceClaim(name=name, source={"resourceClaimTemplateName": template_name})


@pytest.fixture
def manager():
    return DynamicResourcesManager()


@pytest.fixture
def populated_manager(manager):
    manager.add_claim_parameters(
        make_parameters("fuse", SIMPLE_DEVICE_CLAIM_PARAMETERS_API_VERSION, {"hostpath": "/dev/fuse"})
    )
    manager.add_claim_parameters(
        make_parameters(
            "gpu0", CDI_CLAIM_PARAMETERS_API_VERSION,
            {"vendor": "nvidia.com", "device": "gpu", "name": "0"},
        )
    )
    manager.add_resource_claim_template(make_template("fuse-template", "fuse"))
    manager.add_resource_claim_template(make_template("gpu-template", "gpu0"))
    return manager


@pytest.fixture
def cli_runner():
    return CliRunner()


POD_MANIFEST = textwrap.dedent("""\
    apiVersion: simpledevice.resource.podman.io/v1
    kind: ClaimParameters
    metadata:
      name: fuse
    spec:
      hostpath: /dev/fuse
    ---
    apiVersion: cdi.resource.podman.io/v1
    kind: ClaimParameters
    metadata:
      name: gpu0
    spec:
      vendor: nvidia.com
      device: gpu
      name: "0"
    ---
    apiVersion: resource.k8s.io/v1alpha2
    kind: ResourceClaimTemplate
    metadata:
      name: fuse-template
    spec:
      spec:
        resourceClassName: simpledevice.podman.io
        parametersRef:
          kind: ClaimParameters
          name: fuse
    ---
    apiVersion: resource.k8s.io/v1alpha2
    kind: ResourceClaimTemplate
    metadata:
      name: gpu-template
    spec:
      spec:
        resourceClassName: cdidevice.podman.io
        parametersRef:
          kind: ClaimParameters
          name: gpu0
    ---
    apiVersion: v1
    kind: Pod
    metadata:
      name: worker
    spec:
      resourceClaims:
      - name: fuse
        source:
          resourceClaimTemplateName: fuse-template
      - name: gpu
        source:
          resourceClaimTemplateName: gpu-template
      containers:
      - name: app
        image: quay.io/example/app
        resources:
          claims:
          - name: gpu
          - name: fuse
      - name: sidecar
        image: quay.io/example/sidecar
    """)


@pytest.fixture
def pod_manifest(tmp_path):
    path = tmp_path / "pod.yaml"
    path.write_text(POD_MANIFEST)
    return path
