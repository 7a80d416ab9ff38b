import subprocess

import pytest

from aro_capz_e2e.errors import E2EError, InvalidYAMLSyntaxError
from aro_capz_e2e.services.kubectl import KubectlService


class DummyLogger:
    def debug(self, *_args, **_kwargs):
        return None

    def info(self, *_args, **_kwargs):
        return None


class FakeRunner:
    def __init__(self, stdout="", returncode=0):
        self.stdout = stdout
        self.returncode = returncode
        self.calls = []

    def run(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        return subprocess.CompletedProcess(cmd, self.returncode, stdout=self.stdout, stderr=None)


@pytest.fixture
def manifest(tmp_path):
    path = tmp_path / "credentials.yaml"
    path.write_text(
        "apiVersion: v1\nkind: Secret\nmetadata:\n  name: aso-credential\n",
        encoding="utf-8",
    )
    return path


def test_build_apply_cmd_includes_connection_options():
    service = KubectlService(
        command_runner=FakeRunner(),
        logger=DummyLogger(),
        kubectl_bin="oc",
        kubeconfig="/tmp/kubeconfig",
        context="kind-capz-stage",
    )

    cmd = service.build_apply_cmd("secret.yaml", namespace="default")

    assert cmd == [
        "oc",
        "--kubeconfig",
        "/tmp/kubeconfig",
        "--context",
        "kind-capz-stage",
        "apply",
        "-f",
        "secret.yaml",
        "--namespace",
        "default",
    ]


def test_apply_returns_output_on_success(manifest):
    runner = FakeRunner(stdout="secret/aso-credential configured\n")
    service = KubectlService(command_runner=runner, logger=DummyLogger())

    output = service.apply(manifest)

    assert output == "secret/aso-credential configured"
    cmd, kwargs = runner.calls[0]
    assert cmd == ["kubectl", "apply", "-f", str(manifest)]
    assert kwargs["merge_stderr"] is True
    assert kwargs["check"] is False


def test_apply_rejects_failure_output_even_with_zero_exit_code(manifest):
    runner = FakeRunner(
        stdout="secret/aso-credential created\nWarning: resource will be deleted\n",
        returncode=0,
    )
    service = KubectlService(command_runner=runner, logger=DummyLogger())

    with pytest.raises(E2EError, match="kubectl apply did not succeed") as exc_info:
        service.apply(manifest)

    assert "Warning: resource will be deleted" in str(exc_info.value)


def test_apply_validates_manifest_before_running(tmp_path):
    broken = tmp_path / "broken.yaml"
    broken.write_text("apiVersion v1\nkind: Secret\n", encoding="utf-8")
    runner = FakeRunner(stdout="secret/a created")
    service = KubectlService(command_runner=runner, logger=DummyLogger())

    with pytest.raises(InvalidYAMLSyntaxError):
        service.apply(broken)

    assert runner.calls == []
