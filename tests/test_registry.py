from typing import Any, Dict, List

import pytest

from app.adapters.baileys import BaileysAdapter
from app.adapters.meta import MetaAdapter
from app.adapters.registry import AdapterRegistry
from app.types import MessagingAdapter, NormalizedEvent


class DummyAdapter(MessagingAdapter):
    def normalize_events(self, body: Dict[str, Any]) -> List[NormalizedEvent]:
        return [NormalizedEvent(content=str(body.get("text", "")))]


def test_registry_get_and_register(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(AdapterRegistry, "_registry", dict(AdapterRegistry._registry))
    assert isinstance(AdapterRegistry.get("baileys"), BaileysAdapter)
    assert isinstance(AdapterRegistry.get("meta"), MetaAdapter)

    AdapterRegistry.register("dummy", DummyAdapter)
    d = AdapterRegistry.get("dummy")
    assert isinstance(d, DummyAdapter)
    assert "dummy" in AdapterRegistry.names()


def test_registry_unknown() -> None:
    with pytest.raises(KeyError):
        AdapterRegistry.get("missing")


def test_registry_names_are_sorted() -> None:
    assert AdapterRegistry.names() == ["baileys", "meta"]
