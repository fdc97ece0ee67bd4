import os
import sys

import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from cdc_platform import config as config_module  # noqa: E402
from cdc_platform.metrics import default_metrics  # noqa: E402


@pytest.fixture(autouse=True)
def reset_metrics():
    default_metrics.reset()
    yield
    default_metrics.reset()


@pytest.fixture(autouse=True)
def unconfigured(monkeypatch):
    # Each test starts as if initialize() had never been called.
    monkeypatch.setattr(config_module, "_active_config", None)
