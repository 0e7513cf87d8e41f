from __future__ import annotations

from typing import Dict

from app.types import MessagingAdapter
from app.adapters.baileys import BaileysAdapter
from app.adapters.meta import MetaAdapter


class AdapterRegistry:
    """Registry for inbound webhook adapters by provider name.

    Enables plugging in alternative providers later without changing router
    logic.
    """

    _registry: Dict[str, type[MessagingAdapter]] = {
        "baileys": BaileysAdapter,
        "meta": MetaAdapter,
    }

    @classmethod
    def get(cls, name: str) -> MessagingAdapter:
        provider_cls = cls._registry.get(name)
        if provider_cls is None:
            raise KeyError(f"Unknown messaging adapter: {name}")
        return provider_cls()

    @classmethod
    def register(cls, name: str, adapter_cls: type[MessagingAdapter]) -> None:
        cls._registry[name] = adapter_cls

    @classmethod
    def names(cls) -> list[str]:
        return sorted(cls._registry)
