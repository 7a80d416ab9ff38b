"""
aro-capz-e2e - Test-support helpers for the ARO HCP Cluster API end-to-end suite
"""

__version__ = "0.1.0"

from .config import get_env_or_default, new_test_config
from .errors import E2EError
from .models import TestConfig

__all__ = ["E2EError", "TestConfig", "get_env_or_default", "new_test_config"]
