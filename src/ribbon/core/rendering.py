# src/ribbon/core/rendering.py
"""
Representação textual de Ribbons.

Gera strings no formato `{chave: valor, ...}`, aplicado recursivamente a
Ribbons e Wrappers aninhados:

    render(r)
    # => {a: {b: {c: 1}}}

As estratégias de conversão da chave e do valor são configuráveis: um
callable, ou o nome de um método a ser chamado no objeto (ex.: "upper").
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Union

from .ribbon import extract_data, is_container


Strategy = Union[str, Callable[[Any], Any]]

DEFAULT_SEPARATOR = ": "


def _resolve(strategy: Strategy) -> Callable[[Any], str]:
    if callable(strategy):
        return lambda obj: str(strategy(obj))

    name = str(strategy)
    return lambda obj: str(getattr(obj, name)())


def _render(
    data: Dict[Any, Any],
    separator: str,
    key_of: Callable[[Any], str],
    value_of: Callable[[Any], str],
) -> str:
    parts = []
    for key, value in data.items():
        if is_container(value):
            text = _render(extract_data(value), separator, key_of, value_of)
        else:
            text = value_of(value)
        parts.append(f"{key_of(key)}{separator}{text}")
    return "{%s}" % ", ".join(parts)


def render(
    ribbon: Any,
    separator: Any = DEFAULT_SEPARATOR,
    key: Strategy = str,
    value: Strategy = repr,
) -> str:
    """
    Gera a representação textual de um Ribbon.

    Args:
        ribbon (Any): Ribbon, Wrapper ou mapa.
        separator (Any): Separador entre chave e valor (padrão ": ").
        key (Strategy): Conversão da chave em texto (padrão `str`).
        value (Strategy): Conversão do valor em texto (padrão `repr`).

    Returns:
        str: A representação textual.
    """
    return _render(extract_data(ribbon), str(separator), _resolve(key), _resolve(value))
