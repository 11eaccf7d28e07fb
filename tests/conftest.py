import pytest

from variantkit.core.observability.metrics import reset_metrics


@pytest.fixture(autouse=True)
def _clean_targeting_env(monkeypatch):
    # Config from env must not leak from the developer's shell into tests
    monkeypatch.delenv("VARIANTKIT_STRICT_GAPS", raising=False)
    monkeypatch.delenv("VARIANTKIT_MATCH_WORKERS", raising=False)
    reset_metrics()
    yield
    reset_metrics()
