import os
import tempfile
from typing import Any

import pytest

# Keep test runs from writing log files into the checkout
os.environ.setdefault("HIREAI_LOG_DIR", os.path.join(tempfile.gettempdir(), "hireai_test_logs"))

from hireai.gateway import GenerationGateway
from hireai.llm.base import LanguageModel
from hireai.models import ModelReply
from hireai.navigation import Navigator
from hireai.notifications import Notifier
from hireai.seed import seed_jobs
from hireai.state import AppState
from hireai.store import JobStore, MemorySlot

SEED_NOW_MS = 1_700_000_000_000


class FakeModel(LanguageModel):
    """Scripted model: returns ``reply`` (or raises ``error``) and records every call."""

    name = "fake"

    def __init__(self, reply: ModelReply | None = None, error: Exception | None = None) -> None:
        self.reply = reply or ModelReply(text="")
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def generate(self, prompt, *, schema=None, grounded=False):
        self.calls.append({"prompt": prompt, "schema": schema, "grounded": grounded})
        if self.error is not None:
            raise self.error
        return self.reply


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def fake_model():
    return FakeModel()


@pytest.fixture()
def gateway(fake_model):
    return GenerationGateway(fake_model, search_region="Pakistan")


@pytest.fixture()
def slot():
    return MemorySlot()


@pytest.fixture()
def store(slot):
    return JobStore(slot, seed=lambda: seed_jobs(SEED_NOW_MS))


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def app_state(store, gateway, clock):
    return AppState(store, gateway, navigator=Navigator(), notifier=Notifier(clock=clock))
