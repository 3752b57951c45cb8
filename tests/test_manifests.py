import textwrap

import pytest

from podclaim.core.manifests import ManifestLoader, load_manifests
from podclaim.resource.errors import (
    DuplicateEntryError,
    MalformedClaimError,
    ManifestError,
    RegistrySealedError,
    UnsupportedClaimShapeError,
)
from podclaim.resource.manager import DynamicResourcesManager
from podclaim.resource.models import POD_KIND, ClaimParameters
from podclaim.resource.pods import resolve_pod_devices

from conftest import POD_MANIFEST


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(textwrap.dedent(content))
    return path


class TestManifestLoader:
    def test_load_into_registers_resources(self, pod_manifest):
        manager = DynamicResourcesManager()
        pods = ManifestLoader(pod_manifest).load_into(manager)

        assert manager.parameters.names() == ["fuse", "gpu0"]
        assert manager.templates.names() == ["fuse-template", "gpu-template"]
        assert [pod.name for pod in pods] == ["worker"]
        assert pods[0].kind == POD_KIND
        assert not manager.sealed

    def test_skips_unknown_kinds_and_empty_documents(self, tmp_path):
        path = write(tmp_path, "misc.yaml", """\
            ---
            ---
            apiVersion: v1
            kind: ConfigMap
            metadata:
              name: settings
            """)
        manager = DynamicResourcesManager()
        assert ManifestLoader(path).load_into(manager) == []
        assert len(manager.parameters) == 0

    def test_invalid_document_reports_path_and_index(self, tmp_path):
        path = write(tmp_path, "bad.yaml", """\
            apiVersion: v1
            kind: ConfigMap
            metadata:
              name: ok
            ---
            kind: ClaimParameters
            metadata:
              name: broken
            """)
        with pytest.raises(ManifestError) as exc_info:
            ManifestLoader(path).load_into(DynamicResourcesManager())
        assert exc_info.value.index == 1
        assert "apiVersion" in exc_info.value.message
        assert str(path) in str(exc_info.value)

    def test_non_mapping_document(self, tmp_path):
        path = write(tmp_path, "list.yaml", "- a\n- b\n")
        with pytest.raises(ManifestError, match="not a mapping"):
            list(ManifestLoader(path).load_documents())

    def test_invalid_yaml(self, tmp_path):
        path = write(tmp_path, "broken.yaml", "kind: [unclosed\n")
        with pytest.raises(ManifestError, match="invalid YAML"):
            list(ManifestLoader(path).load_documents())

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestError, match="cannot read manifest"):
            list(ManifestLoader(tmp_path / "absent.yaml").load_documents())

    def test_duplicate_across_files(self, tmp_path, pod_manifest):
        second = write(tmp_path, "again.yaml", POD_MANIFEST)
        with pytest.raises(DuplicateEntryError):
            load_manifests([pod_manifest, second])


class TestLoadManifests:
    def test_seals_by_default(self, pod_manifest):
        manager, pods = load_manifests([pod_manifest])
        assert manager.sealed
        assert len(pods) == 1
        with pytest.raises(RegistrySealedError):
            manager.add_claim_parameters(ClaimParameters(apiVersion="x", metadata={"name": "late"}))

    def test_without_seal(self, pod_manifest):
        manager, _ = load_manifests([pod_manifest], seal=False)
        assert not manager.sealed

    def test_uses_given_manager(self, pod_manifest):
        manager = DynamicResourcesManager()
        returned, _ = load_manifests([pod_manifest], manager=manager, seal=False)
        assert returned is manager

    def test_duplicate_pod_names_rejected(self, tmp_path, pod_manifest):
        other = write(tmp_path, "other.yaml", """\
            apiVersion: v1
            kind: Pod
            metadata:
              name: worker
            """)
        with pytest.raises(DuplicateEntryError) as exc_info:
            load_manifests([pod_manifest, other])
        assert exc_info.value.registry == "pod"
        assert exc_info.value.name == "worker"


class TestResolvePodDevices:
    def test_devices_per_container(self, pod_manifest):
        manager, pods = load_manifests([pod_manifest])
        assert resolve_pod_devices(manager, pods[0]) == {
            "app": ["nvidia.com/gpu=0", "/dev/fuse"],
            "sidecar": [],
        }

    def test_unknown_container_claim(self, tmp_path, pod_manifest):
        pod = write(tmp_path, "lonely.yaml", """\
            apiVersion: v1
            kind: Pod
            metadata:
              name: lonely
            spec:
              containers:
              - name: app
                resources:
                  claims:
                  - name: gpu
            """)
        manager, pods = load_manifests([pod_manifest, pod])
        with pytest.raises(MalformedClaimError, match="unknown claim 'gpu'"):
            resolve_pod_devices(manager, pods[1])

    def test_direct_claim_in_pod(self, tmp_path):
        pod = write(tmp_path, "direct.yaml", """\
            apiVersion: v1
            kind: Pod
            metadata:
              name: direct
            spec:
              resourceClaims:
              - name: gpu
                source:
                  resourceClaimName: my-gpu
              containers:
              - name: app
                resources:
                  claims:
                  - name: gpu
            """)
        manager, pods = load_manifests([pod])
        with pytest.raises(UnsupportedClaimShapeError):
            resolve_pod_devices(manager, pods[0])
