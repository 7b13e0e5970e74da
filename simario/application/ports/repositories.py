from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.services.dictionary import Dictionary


@runtime_checkable
class DictionaryRepositoryPort(Protocol):
    pass

    def load(self) -> Dictionary: ...

    def clear_cache(self) -> None: ...
