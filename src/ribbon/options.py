# src/ribbon/options.py
"""
Escopos de opções: aplica opções nomeadas a todas as chamadas de um objeto.

    scope = option_scope(wrapper, separator=" -> ")
    scope.to_string()                  # to_string(separator=" -> ")
    scope.to_string(key="upper")       # to_string(separator=" -> ", key="upper")

As opções do escopo e as da chamada são combinadas via `deep_merge`; as
da chamada têm precedência. Valores da chamada que não colidem com o
escopo são repassados sem cópia, então operações in-place continuam
atuando sobre o objeto do chamador. O escopo também pode ser usado como context
manager:

    with option_scope(rendering, separator=" = ") as scoped:
        scoped.render(ribbon)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .core.conversion import to_plain
from .core.merge import deep_merge
from .core.ribbon import Ribbon, extract_data


class Options:
    """Encaminha chamadas ao `receiver`, acrescentando as opções do escopo."""

    __slots__ = ("_receiver", "_options")

    def __init__(self, receiver: Any, options: Any = None, **kwargs: Any) -> None:
        self._receiver = receiver
        self._options = deep_merge(Ribbon(options), kwargs)

    @property
    def options(self) -> Dict[str, Any]:
        return to_plain(self._options)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name in self.__slots__:
            raise AttributeError(name)

        attribute = getattr(self._receiver, name)
        if not callable(attribute):
            return attribute

        def scoped(*arguments: Any, **kwargs: Any) -> Any:
            merged = {
                key: to_plain(value)
                for key, value in extract_data(deep_merge(self._options, kwargs)).items()
            }
            # argumentos sem colisão com o escopo seguem como o chamador os passou
            merged.update((key, value) for key, value in kwargs.items() if key not in self._options)
            return attribute(*arguments, **merged)

        scoped.__name__ = name
        return scoped

    def __enter__(self) -> "Options":
        return self

    def __exit__(self, *exc_info: Any) -> Optional[bool]:
        return None

    def __repr__(self) -> str:
        return f"Options({self._receiver!r}, {self.options!r})"


def option_scope(receiver: Any, options: Any = None, **kwargs: Any) -> Options:
    """Cria um escopo de opções sobre `receiver`. Ver `Options`."""
    return Options(receiver, options, **kwargs)
