"""Environment-driven configuration for the end-to-end suite."""

import getpass
import logging
import os
import shutil
import tempfile
import threading
from typing import Mapping, Optional

from . import constants
from .models import TestConfig

logger = logging.getLogger("aro_capz_e2e")


def get_env_or_default(key: str, default: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the value of ``key`` when it is set and non-empty, else ``default``."""
    env = os.environ if environ is None else environ
    value = env.get(key, "")
    return value if value else default


class RepoDirResolver:
    """Resolves the repository checkout directory once per process.

    The first caller either honours ``ARO_REPO_DIR`` or reserves a unique
    temporary path. The reserved directory is removed right away because
    ``git clone`` refuses to clone into an existing directory.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = environ
        self._lock = threading.Lock()
        self._repo_dir: Optional[str] = None

    def resolve(self) -> str:
        if self._repo_dir is not None:
            return self._repo_dir

        with self._lock:
            if self._repo_dir is None:
                self._repo_dir = self._compute()
                logger.debug("Repository directory: %s", self._repo_dir)
        return self._repo_dir

    def _compute(self) -> str:
        override = get_env_or_default(constants.REPO_DIR_ENV, "", self.environ)
        if override:
            return override

        try:
            tmp_dir = tempfile.mkdtemp(prefix=constants.REPO_DIR_PREFIX)
        except OSError as exc:
            fallback = os.path.join(
                constants.FALLBACK_TMP_DIR, f"{constants.REPO_DIR_PREFIX}{os.getpid()}"
            )
            logger.warning(
                "Could not allocate a temporary directory (%s); using %s", exc, fallback
            )
            return fallback

        shutil.rmtree(tmp_dir, ignore_errors=True)
        return tmp_dir


_default_resolver = RepoDirResolver()


def default_repo_dir() -> str:
    return _default_resolver.resolve()


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""


def new_test_config(
    environ: Optional[Mapping[str, str]] = None,
    repo_dir_resolver: Optional[RepoDirResolver] = None,
) -> TestConfig:
    """Build the suite configuration. Every field has a default."""
    env = os.environ if environ is None else environ
    resolver = repo_dir_resolver or _default_resolver

    def resolve(key: str, default: str) -> str:
        return get_env_or_default(key, default, env)

    return TestConfig(
        repo_url=resolve("ARO_REPO_URL", constants.DEFAULT_REPO_URL),
        repo_branch=resolve("ARO_REPO_BRANCH", constants.DEFAULT_REPO_BRANCH),
        repo_dir=resolver.resolve(),
        kind_cluster_name=resolve("KIND_CLUSTER_NAME", constants.DEFAULT_KIND_CLUSTER_NAME),
        cluster_name=resolve("CLUSTER_NAME", constants.DEFAULT_CLUSTER_NAME),
        resource_group=resolve("RESOURCE_GROUP", constants.DEFAULT_RESOURCE_GROUP),
        openshift_version=resolve("OPENSHIFT_VERSION", constants.DEFAULT_OPENSHIFT_VERSION),
        region=resolve("REGION", constants.DEFAULT_REGION),
        azure_subscription=resolve("AZURE_SUBSCRIPTION_NAME", ""),
        environment=resolve("ENV", constants.DEFAULT_ENVIRONMENT),
        user=resolve("USER", "") or _current_user(),
        clusterctl_bin_path=resolve("CLUSTERCTL_BIN", constants.DEFAULT_CLUSTERCTL_BIN),
        scripts_path=resolve("SCRIPTS_PATH", constants.DEFAULT_SCRIPTS_PATH),
        gen_script_path=resolve("GEN_SCRIPT_PATH", constants.DEFAULT_GEN_SCRIPT_PATH),
    )
