"""kubectl apply helper combining manifest validation and output checks."""

from pathlib import Path
from typing import List, Optional, Union

from aro_capz_e2e.errors import E2EError
from aro_capz_e2e.errors_catalog import actionable_error
from aro_capz_e2e.services.apply_output import is_kubectl_apply_success
from aro_capz_e2e.services.command_runner import CommandRunner
from aro_capz_e2e.services.yaml_validation import YamlValidationService


class KubectlService:
    """Applies manifests and decides success from kubectl's text output."""

    def __init__(
        self,
        command_runner: CommandRunner,
        logger,
        kubectl_bin: str = "kubectl",
        kubeconfig: Optional[str] = None,
        context: Optional[str] = None,
        validation_service: Optional[YamlValidationService] = None,
    ):
        self.command_runner = command_runner
        self.logger = logger
        self.kubectl_bin = kubectl_bin
        self.kubeconfig = kubeconfig
        self.context = context
        self.validation_service = validation_service or YamlValidationService(logger=logger)

    def build_apply_cmd(
        self, manifest_path: Union[str, Path], namespace: Optional[str] = None
    ) -> List[str]:
        cmd = [self.kubectl_bin]
        if self.kubeconfig:
            cmd += ["--kubeconfig", self.kubeconfig]
        if self.context:
            cmd += ["--context", self.context]
        cmd += ["apply", "-f", str(manifest_path)]
        if namespace:
            cmd += ["--namespace", namespace]
        return cmd

    def apply(self, manifest_path: Union[str, Path], namespace: Optional[str] = None) -> str:
        self.validation_service.validate(manifest_path)

        result = self.command_runner.run(
            self.build_apply_cmd(manifest_path, namespace=namespace),
            check=False,
            merge_stderr=True,
        )
        output = (result.stdout or "").strip()

        # A zero exit code is not enough, the output must report applied resources.
        if not is_kubectl_apply_success(output):
            message = actionable_error("apply_failed", path=str(manifest_path))
            if output:
                message = f"{message}\n{output}"
            raise E2EError(message)

        self.logger.info("Applied %s", manifest_path)
        return output
