import sys
from pathlib import Path
from types import SimpleNamespace

import pytest


def pytest_configure():
    # This repo uses a src/ layout, so when running tests without an editable
    # install, we add <repo>/src to sys.path.
    repo_root = Path(__file__).resolve().parents[2]
    src_path = str(repo_root / "src")
    if src_path not in sys.path:
        sys.path.insert(0, src_path)


class StubAdapter:
    """Deterministic adapter: returns a fixed answer (or raises) and records calls."""

    def __init__(self, provider, answer="", exc=None):
        self.provider = provider
        self.answer = answer
        self.exc = exc
        self.calls = []

    def invoke(self, prompt, model, credential):
        self.calls.append(
            SimpleNamespace(prompt=prompt, model=model, credential=credential)
        )
        if self.exc is not None:
            raise self.exc
        return self.answer


@pytest.fixture
def stub_adapters():
    """Factory: one StubAdapter per provider, all answering the same way."""

    def _factory(answer="", exc=None):
        from bugscope.llm.types import ProviderTag

        return {tag: StubAdapter(tag, answer=answer, exc=exc) for tag in ProviderTag}

    return _factory


@pytest.fixture
def make_request():
    def _factory(model_identifier="gpt-4", credential="sk-test-secret-123", **kw):
        from bugscope.llm.types import DiagnosticRequest

        return DiagnosticRequest(
            code_text=kw.get("code_text", "for (i = 0; i <= n; i++) {}"),
            problem_text=kw.get("problem_text", "reads past the end of the array"),
            model_identifier=model_identifier,
            credential=credential,
        )

    return _factory


@pytest.fixture
def recording_factory():
    """Factory: client_factory that records (credential, timeout) and returns `client`."""

    def _factory(client):
        calls = []

        def client_factory(credential, timeout_s):
            calls.append((credential, timeout_s))
            return client

        client_factory.calls = calls  # type: ignore[attr-defined]
        return client_factory

    return _factory
