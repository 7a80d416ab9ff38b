import json

from click.testing import CliRunner

import aro_capz_e2e.cli as cli_module


def test_show_config_prints_json(monkeypatch):
    monkeypatch.setenv("CLUSTER_NAME", "e2e")
    monkeypatch.setenv("ENV", "int")
    monkeypatch.setenv("ARO_REPO_DIR", "/work/repo")

    runner = CliRunner()
    result = runner.invoke(cli_module.main, ["show-config", "--json"])

    assert result.exit_code == 0
    values = json.loads(result.output)
    assert values["cluster_name"] == "e2e"
    assert values["output_dir_name"] == "e2e-int"


def test_validate_yaml_exits_non_zero_when_any_file_fails(tmp_path):
    valid = tmp_path / "valid.yaml"
    valid.write_text("kind: Secret\n", encoding="utf-8")
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli_module.main, ["validate-yaml", str(valid), str(empty)])

    assert result.exit_code == 1
    assert "OK" in result.output
    assert "FAIL" in result.output


def test_validate_yaml_succeeds_for_valid_files(tmp_path):
    valid = tmp_path / "valid.yaml"
    valid.write_text("kind: Secret\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli_module.main, ["validate-yaml", str(valid)])

    assert result.exit_code == 0


def test_check_apply_reads_stdin():
    runner = CliRunner()

    success = runner.invoke(cli_module.main, ["check-apply"], input="secret/my-secret created\n")
    failure = runner.invoke(
        cli_module.main,
        ["check-apply"],
        input='Error from server: secrets "my-secret" not found\n',
    )

    assert success.exit_code == 0
    assert failure.exit_code == 1


def test_check_apply_reads_file(tmp_path):
    output_file = tmp_path / "apply.log"
    output_file.write_text("secret/aso-credential unchanged\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli_module.main, ["check-apply", str(output_file)])

    assert result.exit_code == 0


def test_apply_reports_failure_as_click_error(tmp_path, monkeypatch):
    manifest = tmp_path / "secret.yaml"
    manifest.write_text("kind: Secret\n", encoding="utf-8")

    class FakeKubectlService:
        def __init__(self, **kwargs):
            self.kwargs = kwargs

        def apply(self, manifest_path, namespace=None):
            raise cli_module.E2EError("kubectl apply did not succeed")

    monkeypatch.setattr(cli_module, "KubectlService", FakeKubectlService)

    runner = CliRunner()
    result = runner.invoke(cli_module.main, ["apply", str(manifest), "--namespace", "default"])

    assert result.exit_code == 1
    assert "kubectl apply did not succeed" in result.output
