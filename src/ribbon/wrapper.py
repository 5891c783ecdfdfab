# src/ribbon/wrapper.py
"""
Wrapper — fachada de propósito geral sobre um Ribbon.

Ribbons reservam todo o namespace de atributos para chaves do usuário.
O Wrapper reexpõe as operações de mapa que o Ribbon omite (iteração,
merge, conversão para dict, serialização) sem ocupar esses nomes:

    r = Ribbon()
    w = Wrapper(r)
    for key, value in w.items():
        ...

Resolução de atributos desconhecidos:
    1. o dicionário interno (`w.keys()`, `w.get(k, d)`, `w.items()`, ...)
    2. o Ribbon envolvido (`w.name` equivale a `r.name`)

Escritas em atributos desconhecidos vão sempre para o Ribbon:

    w.x = 10
    w.ribbon.x
    # => 10

Invariantes:
    - Um Wrapper sempre envolve exatamente um Ribbon
    - Vários Wrappers podem envolver o mesmo Ribbon
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from .core.conversion import to_plain
from .core.errors import UnwrappableObjectError
from .core.merge import Conflict, deep_merge, deep_merge_in_place, merge, merge_in_place
from .core.rendering import render
from .core.ribbon import Ribbon, assign, extract_data, get


_OWN_ATTRIBUTES = ("ribbon", "_ribbon")


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


class Wrapper:
    """Envolve um Ribbon, oferecendo métodos de propósito geral."""

    __slots__ = ("_ribbon",)

    def __init__(self, ribbon: Any = None) -> None:
        self.ribbon = Ribbon() if ribbon is None else ribbon

    @property
    def ribbon(self) -> Ribbon:
        """O Ribbon envolvido."""
        return self._ribbon

    @ribbon.setter
    def ribbon(self, ribbon: Any) -> None:
        """
        Define o Ribbon envolvido.

        Um Wrapper compartilha o Ribbon que ele envolve; um mapa gera um
        novo Ribbon com seus dados; qualquer outro objeto é rejeitado.

        Raises:
            UnwrappableObjectError: Se o objeto não puder ser envolvido.
        """
        if isinstance(ribbon, Wrapper):
            ribbon = ribbon.ribbon
        elif isinstance(ribbon, Mapping):
            ribbon = Ribbon(ribbon)
        elif not isinstance(ribbon, Ribbon):
            raise UnwrappableObjectError(
                f"Não é possível envolver {type(ribbon).__name__}"
            )
        object.__setattr__(self, "_ribbon", ribbon)

    @property
    def data(self) -> Dict[Any, Any]:
        """O dicionário interno do Ribbon envolvido."""
        return extract_data(self._ribbon)

    # -----------------------------
    # Encaminhamento
    # -----------------------------
    def __getattr__(self, name: str) -> Any:
        if _is_dunder(name) or name in _OWN_ATTRIBUTES:
            raise AttributeError(name)

        data = self.data
        if hasattr(data, name):
            return getattr(data, name)
        return getattr(self._ribbon, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if _is_dunder(name) or name in _OWN_ATTRIBUTES:
            object.__setattr__(self, name, value)
            return
        setattr(self._ribbon, name, value)

    def __getitem__(self, key: Any) -> Any:
        return get(self._ribbon, key)

    def __setitem__(self, key: Any, value: Any) -> None:
        assign(self._ribbon, key, value)

    def __delitem__(self, key: Any) -> None:
        del self._ribbon[key]

    def __contains__(self, key: Any) -> bool:
        return key in self._ribbon

    def __iter__(self) -> Iterator[Any]:
        return iter(self._ribbon)

    def __len__(self) -> int:
        return len(self._ribbon)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Wrapper):
            other = other.ribbon
        return self._ribbon == other

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return render(self._ribbon)

    def __repr__(self) -> str:
        return f"Wrapper({render(self._ribbon)})"

    # -----------------------------
    # Conversão e serialização
    # -----------------------------
    def to_dict(self) -> Dict[Any, Any]:
        """Converte o Ribbon envolvido, e todos os Ribbons internos, em dicts."""
        return to_plain(self._ribbon)

    def to_string(self, **options: Any) -> str:
        """Representação textual; aceita as opções de `render`."""
        return render(self._ribbon, **options)

    def to_yaml(self, **options: Any) -> str:
        """
        Serializa o Ribbon envolvido em YAML.

        Para obter um Ribbon de volta basta carregar o texto:

            ribbon = from_yaml(text)
        """
        from .io.serialization import to_yaml

        return to_yaml(self._ribbon, **options)

    def to_json(self, **options: Any) -> str:
        from .io.serialization import to_json

        return to_json(self._ribbon, **options)

    # -----------------------------
    # Merge
    # -----------------------------
    def merge(self, other: Any, conflict: Optional[Conflict] = None) -> "Wrapper":
        return Wrapper(merge(self._ribbon, other, conflict))

    def merge_in_place(self, other: Any, conflict: Optional[Conflict] = None) -> "Wrapper":
        merge_in_place(self._ribbon, other, conflict)
        return self

    def deep_merge(self, other: Any, conflict: Optional[Conflict] = None) -> "Wrapper":
        return Wrapper(deep_merge(self._ribbon, other, conflict))

    def deep_merge_in_place(self, other: Any, conflict: Optional[Conflict] = None) -> "Wrapper":
        deep_merge_in_place(self._ribbon, other, conflict)
        return self

    # -----------------------------
    # Wrap / unwrap recursivos
    # -----------------------------
    def wrap_all(self) -> "Wrapper":
        """Envolve, no lugar, todos os Ribbons contidos neste Wrapper."""
        return _wrap_all(self)

    def unwrap_all(self) -> "Wrapper":
        """Remove, no lugar, todos os Wrappers contidos neste Wrapper."""
        _unwrap_all(self._ribbon)
        return self


def wrap(obj: Any) -> Wrapper:
    """Retorna `obj` se já for um Wrapper; caso contrário, o envolve."""
    if isinstance(obj, Wrapper):
        return obj
    return Wrapper(obj)


def _wrap_all(wrapper: Wrapper) -> Wrapper:
    data = wrapper.data
    for key, value in data.items():
        if isinstance(value, Ribbon):
            data[key] = _wrap_all(Wrapper(value))
        elif isinstance(value, Wrapper):
            _wrap_all(value)
    return wrapper


def _unwrap_all(ribbon: Ribbon) -> Ribbon:
    data = extract_data(ribbon)
    for key, value in data.items():
        if isinstance(value, Wrapper):
            value = data[key] = value.ribbon
        if isinstance(value, Ribbon):
            _unwrap_all(value)
    return ribbon
