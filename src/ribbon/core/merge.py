# src/ribbon/core/merge.py
"""
Merge raso e profundo de Ribbons.

Este módulo implementa a política oficial de merge entre dois Ribbons
(ou Wrappers, ou mapeamentos simples), com resolução opcional de
conflitos por chave.

Política de merge:
    - chave presente só em um lado → preservada
    - chave presente nos dois lados → vence o valor de `new`, a menos que
      `conflict(key, old_value, new_value)` seja informado, caso em que
      o retorno do callback é usado
    - deep merge: se os dois valores forem Ribbons, o merge desce
      recursivamente, repassando o mesmo `conflict`
    - Ribbon contra não-Ribbon nunca recursa: vale `new` (ou o callback)

Decisões arquiteturais:
    - `merge` e `deep_merge` retornam um novo Ribbon e não mutam entradas;
      os Ribbons aninhados do resultado são cópias, então mutar o resultado
      também não altera `old` nem `new`
    - O resultado herda a factory de `old`
    - `merge_in_place` e `deep_merge_in_place` mutam e retornam `old`
    - Valores passam pela mesma validação e conversão de `assign`
    - Um Wrapper conta como o Ribbon que ele envolve

Invariantes:
    - `deep_merge(a, b) == merge(a, b)` quando não há Ribbons aninhados
      colidindo na mesma chave
    - O mesmo par de entradas sempre produz o mesmo resultado

Limites explícitos:
    - Não faz merge de listas elemento a elemento
    - Não realiza coerção de tipos
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .conversion import convert
from .errors import UnwrappableObjectError
from .ribbon import Ribbon, assign, extract_data, get, is_container, is_ribbon, unwrap


logger = logging.getLogger(__name__)

Conflict = Callable[[Any, Any, Any], Any]
MergeFunction = Callable[[Any, Any, Optional[Conflict]], Any]


def _merge_into(target: Any, source: Any, conflict: Optional[Conflict]) -> Any:
    data = extract_data(target)

    for key, new_value in extract_data(source).items():
        new_value = convert(new_value)
        if conflict is not None and key in data:
            new_value = conflict(key, get(target, key), new_value)
        assign(target, key, new_value)

    return target


def _factory_of(obj: Any) -> Any:
    target = unwrap(obj)
    return target.__ribbon_factory__ if is_ribbon(target) else None


def _detach(value: Any) -> Any:
    """Copia a estrutura de Ribbons (e Wrappers) de `value`; folhas são compartilhadas."""
    if is_ribbon(value):
        clone = Ribbon(None, value.__ribbon_factory__)
        data = clone.__ribbon_data__
        for key, item in value.__ribbon_data__.items():
            data[key] = _detach(item)
        return clone
    if is_container(value):
        return type(value)(_detach(unwrap(value)))
    if type(value) in (list, tuple):
        return type(value)(_detach(item) for item in value)
    return value


def merge(old: Any, new: Any, conflict: Optional[Conflict] = None) -> Ribbon:
    """
    Realiza o merge raso entre `old` e `new`, produzindo um novo Ribbon.

    Args:
        old (Any): Ribbon, Wrapper ou mapa com os valores antigos.
        new (Any): Ribbon, Wrapper ou mapa com os valores novos.
        conflict (Optional[Conflict]): Callback `(key, old_value, new_value)`
            cujo retorno é usado quando a chave existe nos dois lados.

    Returns:
        Ribbon: Novo Ribbon com o resultado do merge.

    Raises:
        UnwrappableObjectError: Se alguma entrada não for compatível.
    """
    result = _detach(Ribbon(old, _factory_of(old)))
    _merge_into(result, _detach(Ribbon(new)), conflict)
    logger.debug("merge: %d chave(s) resultantes", len(result))
    return result


def merge_in_place(old: Any, new: Any, conflict: Optional[Conflict] = None) -> Any:
    """
    Mesmo que `merge`, mas mutando `old`.

    `old` precisa ser um Ribbon, um Wrapper ou um `dict`: outros
    mapeamentos não podem ser mutados através de `extract_data`.

    Returns:
        Any: O próprio `old`, já contendo o resultado do merge.
    """
    if not (is_container(old) or isinstance(old, dict)):
        raise UnwrappableObjectError(
            f"Merge in-place requer Ribbon, Wrapper ou dict, recebido: {type(old).__name__}"
        )

    _merge_into(old, new, conflict)
    logger.debug("merge in-place: %d chave(s) resultantes", len(extract_data(old)))
    return old


def _deep(
    merge_function: MergeFunction,
    old: Any,
    new: Any,
    conflict: Optional[Conflict],
) -> Any:
    def resolve(key: Any, old_value: Any, new_value: Any) -> Any:
        if is_container(old_value) and is_container(new_value):
            return _deep(merge_function, old_value, new_value, conflict)
        if conflict is not None:
            return conflict(key, old_value, new_value)
        return new_value

    return merge_function(old, new, resolve)


def deep_merge(old: Any, new: Any, conflict: Optional[Conflict] = None) -> Ribbon:
    """
    Realiza o merge profundo entre `old` e `new`, produzindo um novo Ribbon.

    Chaves cujos valores são Ribbons nos dois lados são mescladas
    recursivamente; todas as outras colisões seguem a regra do merge raso.

        deep_merge({"a": {"x": 1}}, {"a": {"y": 2}})
        # => {a: {x: 1, y: 2}}

    Args:
        old (Any): Ribbon, Wrapper ou mapa com os valores antigos.
        new (Any): Ribbon, Wrapper ou mapa com os valores novos.
        conflict (Optional[Conflict]): Callback para colisões não recursivas.

    Returns:
        Ribbon: Novo Ribbon com o resultado do merge profundo.
    """
    return _deep(merge, old, new, conflict)


def deep_merge_in_place(old: Any, new: Any, conflict: Optional[Conflict] = None) -> Any:
    """Mesmo que `deep_merge`, mas mutando `old` (e os Ribbons aninhados dele)."""
    return _deep(merge_in_place, old, new, conflict)
