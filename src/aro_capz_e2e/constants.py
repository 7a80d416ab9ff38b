"""Environment variable names and defaults for the end-to-end suite."""

REPO_DIR_ENV = "ARO_REPO_DIR"
REPO_DIR_PREFIX = "cluster-api-installer-aro-"

DEFAULT_REPO_URL = "https://github.com/RadekCap/cluster-api-installer.git"
DEFAULT_REPO_BRANCH = "ARO-ASO"

DEFAULT_KIND_CLUSTER_NAME = "capz-stage"
DEFAULT_CLUSTER_NAME = "test-cluster"
DEFAULT_RESOURCE_GROUP = "test-rg"
DEFAULT_OPENSHIFT_VERSION = "4.18"
DEFAULT_REGION = "uksouth"
DEFAULT_ENVIRONMENT = "stage"

DEFAULT_CLUSTERCTL_BIN = "./bin/clusterctl"
DEFAULT_SCRIPTS_PATH = "./scripts"
DEFAULT_GEN_SCRIPT_PATH = "./doc/aro-hcp-scripts/aro-hcp-gen.sh"
FALLBACK_TMP_DIR = "/tmp"
