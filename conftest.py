import os

import pytest

from smartcalc.config import CalculatorSettings, ENV_PREFIX


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from SMARTCALC_* variables and stray .env files."""
    monkeypatch.setattr(os, "environ", dict(os.environ))
    for name in CalculatorSettings.model_fields:
        monkeypatch.delenv(ENV_PREFIX + name.upper(), raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
