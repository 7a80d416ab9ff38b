"""Shared domain models for the ARO CAPZ end-to-end helpers."""

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class TestConfig:
    """Repository, cluster and path settings for one suite run."""

    __test__ = False

    # Repository
    repo_url: str
    repo_branch: str
    repo_dir: str

    # Cluster
    kind_cluster_name: str
    cluster_name: str
    resource_group: str
    openshift_version: str
    region: str
    azure_subscription: str
    environment: str
    user: str

    # Paths
    clusterctl_bin_path: str
    scripts_path: str
    gen_script_path: str

    @property
    def output_dir_name(self) -> str:
        """Directory name the generation script writes infrastructure files to."""
        return f"{self.cluster_name}-{self.environment}"

    def as_dict(self) -> Dict[str, str]:
        values = asdict(self)
        values["output_dir_name"] = self.output_dir_name
        return values
