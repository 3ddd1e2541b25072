import os

import pytest
from hypothesis import HealthCheck, settings

# This test configuration runs every test twice:
# 1) with the tree-walking evaluator backend ["interp"]
# 2) with the explicit-stack machine backend ["machine"]
# Most tests build a Reducer() or call reduce() without naming an engine. We use
# an autouse fixture to switch Reducer.DefaultEngine for each run without
# changing individual test files.

# The engine switch below is function scoped and does not depend on generated data
_quiet = [HealthCheck.function_scoped_fixture]
settings.register_profile("default", print_blob=True, deadline=None, suppress_health_check=_quiet)
settings.register_profile(
    "ci", print_blob=True, deadline=None, max_examples=300, suppress_health_check=_quiet
)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


@pytest.fixture(params=["interp", "machine"])
def engine(request):
    return request.param


@pytest.fixture(autouse=True)
def _force_reducer_engine(engine, monkeypatch):
    from skicalc.reducer import Reducer

    monkeypatch.setattr(Reducer, "DefaultEngine", engine)
    # Keep the environment from leaking into default budgets or tracing
    monkeypatch.delenv("SKICALC_MAX_DEPTH", raising=False)
    monkeypatch.delenv("SKICALC_ENGINE", raising=False)
    monkeypatch.delenv("SKICALC_TRACE", raising=False)
