# src/ribbon/core/conversion.py
"""
Conversão entre estruturas simples e Ribbons.

Política de conversão:
    - Mapping       → novo Ribbon (a conversão dos valores internos é feita
                      pelo próprio construtor do Ribbon)
    - list / tuple  → nova sequência do mesmo tipo com cada elemento convertido
    - Ribbon        → inalterado
    - qualquer outro valor → inalterado

`to_plain` é a operação inversa: Ribbons e Wrappers voltam a ser `dict`.

Invariantes:
    - `convert_all` é idempotente
    - `to_plain(convert(m)) == m` para mapas contendo apenas escalares,
      sequências e mapas aninhados
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .ribbon import Ribbon, extract_data, unwrap


def _is_sequence(value: Any) -> bool:
    # namedtuples e subclasses de tuple são tratados como escalares
    return isinstance(value, list) or type(value) is tuple


def convert(value: Any) -> Any:
    """
    Converte mapas em Ribbons, procurando também dentro de sequências.

    Args:
        value (Any): Valor a ser convertido.

    Returns:
        Any: Ribbon, sequência convertida ou o próprio valor.
    """
    if isinstance(value, Ribbon):
        return value
    if isinstance(value, Mapping):
        return Ribbon(value)
    if isinstance(value, list):
        return [convert(element) for element in value]
    if type(value) is tuple:
        return tuple(convert(element) for element in value)
    return value


def convert_all(ribbon: Any) -> Any:
    """
    Converte todos os valores do Ribbon, em profundidade.

    Valores que já são Ribbons (ou Wrappers) são percorridos recursivamente;
    os demais passam por `convert`. A operação muta o Ribbon recebido.

    Returns:
        Any: O mesmo Ribbon, com todos os valores convertidos.
    """
    data = extract_data(ribbon)

    for key, value in data.items():
        target = unwrap(value)
        if isinstance(target, Ribbon):
            convert_all(target)
        else:
            data[key] = convert(value)

    return ribbon


def is_normalized(value: Any) -> bool:
    """True se `value` não contém nenhum mapa simples a converter."""
    if isinstance(value, Mapping):
        return False
    if _is_sequence(value):
        return all(is_normalized(element) for element in value)
    return True


def to_plain(value: Any) -> Any:
    """
    Converte Ribbons, Wrappers e tudo dentro deles em estruturas simples.

    Mapas resultam em `dict`, sequências mantêm o tipo (`list`/`tuple`)
    com os elementos convertidos, e qualquer outro valor é retornado
    inalterado.
    """
    target = unwrap(value)

    if isinstance(target, Ribbon) or isinstance(value, Mapping):
        return {key: to_plain(item) for key, item in extract_data(target).items()}
    if isinstance(value, list):
        return [to_plain(element) for element in value]
    if type(value) is tuple:
        return tuple(to_plain(element) for element in value)
    return value
