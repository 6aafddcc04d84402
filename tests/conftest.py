import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from atlas.shared.core.configuration import ENV_MAP
from atlas.shared.domain.countries.models import Country, FetchState

WAKANDA = {
    "name": {"common": "Wakanda", "official": "Kingdom of Wakanda"},
    "capital": ["Birnin Zana"],
    "population": 6000000,
    "region": "Africa",
    "flags": {"png": "http://x/f.png", "svg": "http://x/f.svg"},
    "area": 1000,
}


class StaticSource:
    """Data source returning a fixed list, or raising a fixed error."""

    def __init__(self, records: Optional[List[Country]] = None, error: Optional[Exception] = None):
        self.records = records or []
        self.error = error
        self.calls = 0

    async def fetch_all(self) -> List[Country]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.records)


class GatedSource:
    """Data source whose calls block until the test releases them one by one."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []

    async def fetch_all(self) -> List[Country]:
        entry: Dict[str, Any] = {"gate": asyncio.Event(), "result": [], "error": None}
        self.calls.append(entry)
        await entry["gate"].wait()
        if entry["error"] is not None:
            raise entry["error"]
        return entry["result"]

    def release(self, index: int, result: Optional[List[Country]] = None, error: Optional[Exception] = None) -> None:
        entry = self.calls[index]
        entry["result"] = result or []
        entry["error"] = error
        entry["gate"].set()


class Recorder:
    """Observer that keeps every state it is handed."""

    def __init__(self) -> None:
        self.states: List[FetchState] = []

    def __call__(self, state: FetchState) -> None:
        self.states.append(state)

    @property
    def statuses(self) -> List[str]:
        return [state.status.value for state in self.states]


async def wait_until(predicate: Callable[[], bool], attempts: int = 100) -> None:
    """Yield to the loop until ``predicate`` holds."""
    for _ in range(attempts):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition never became true")


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def wakanda() -> Country:
    return Country.from_api(WAKANDA)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove ATLAS_* overrides that may be set in the developer's shell."""
    for key in ENV_MAP:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
