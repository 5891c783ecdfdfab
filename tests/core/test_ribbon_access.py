# tests/core/test_ribbon_access.py
"""
Testes do container Ribbon e das operações de acesso.

Os testes asseguram que:
- leituras de caminhos ausentes auto-vivificam Ribbons vazios
- atribuições convertem mapas em Ribbons no momento da escrita
- `peek` nunca muta o Ribbon
- a convenção de marcadores de `send` (`=`, `!`, `?`) é respeitada
- Ribbons e Wrappers são rejeitados como chave

Limites explícitos:
    - Não valida merge (ver test_merge.py)
    - Não valida serialização
"""

import copy
import pickle

import pytest

try:
    from ribbon import Ribbon, Wrapper
    from ribbon.core.errors import InvalidKeyError, UnwrappableObjectError
    from ribbon.core.ribbon import (
        assign,
        extract_data,
        get,
        items,
        keys,
        peek,
        put,
        send,
        values,
    )
except Exception as e:  # noqa: BLE001
    Ribbon = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o módulo do container esteja disponível para os testes.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing Ribbon container modules. Implement:\n"
            "- src/ribbon/core/ribbon.py (Ribbon, get, assign, peek, put, send)\n"
            "- src/ribbon/core/errors.py (InvalidKeyError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


# =====================================================
# Auto-vivificação
# =====================================================

def test_chained_read_of_missing_path_vivifies_empty_ribbons():
    """
    Verifica que ler um caminho ausente cria Ribbons vazios em cada nível.

    Invariantes:
        - Nenhuma exceção é levantada
        - Cada nível intermediário passa a existir como Ribbon vazio
    """
    _require_imports()
    r = Ribbon()

    leaf = r.a.b.c

    assert isinstance(leaf, Ribbon)
    assert len(leaf) == 0
    assert isinstance(r["a"], Ribbon)
    assert "b" in r.a
    assert "c" in r.a.b


def test_set_nested_path_then_read():
    _require_imports()
    r = Ribbon()
    r.a.b.c = 1

    assert r.a.b.c == 1
    assert r["a"]["b"]["c"] == 1
    assert repr(r) == "{a: {b: {c: 1}}}"


def test_custom_factory_is_used_for_missing_keys():
    _require_imports()
    r = Ribbon(factory=lambda: Ribbon({"created": True}))

    assert r.anything.created is True
    assert r.anything == {"created": True}


def test_factory_returning_dict_is_converted():
    _require_imports()
    r = Ribbon(factory=dict)
    assert isinstance(get(r, "x"), Ribbon)


def test_get_calls_callback_with_value_and_returns_value():
    _require_imports()
    r = Ribbon({"x": 10})
    seen = []

    result = get(r, "x", seen.append)

    assert result == 10
    assert seen == [10]


# =====================================================
# Atribuição e conversão ansiosa
# =====================================================

def test_assign_converts_mappings_eagerly():
    """
    Verifica que mapas atribuídos são armazenados como Ribbons.

    Decisões arquiteturais:
        - A conversão acontece na escrita, mantendo a estrutura sempre
          normalizada
    """
    _require_imports()
    r = Ribbon()
    stored = assign(r, "config", {"engine": {"fail_fast": True}})

    assert isinstance(stored, Ribbon)
    assert isinstance(extract_data(r)["config"], Ribbon)
    assert r.config.engine.fail_fast is True
    assert r.config == {"engine": {"fail_fast": True}}


def test_assign_multiple_values_stores_list():
    _require_imports()
    r = Ribbon()
    assign(r, "key", "many", "values")
    assert r.key == ["many", "values"]


def test_attribute_and_item_assignment_are_equivalent():
    _require_imports()
    r = Ribbon()
    r.x = {"y": 1}
    r["z"] = [{"w": 2}]

    assert isinstance(r["x"], Ribbon)
    assert isinstance(r.z[0], Ribbon)
    assert r.z[0].w == 2


def test_get_converts_and_writes_back_plain_values():
    _require_imports()
    r = Ribbon()
    extract_data(r)["raw"] = {"inner": 1}

    value = r.raw

    assert isinstance(value, Ribbon)
    assert extract_data(r)["raw"] is value


def test_put_returns_ribbon_for_chaining():
    _require_imports()
    r = Ribbon()
    result = put(put(r, "x", 1), "y", 2)

    assert result is r
    assert r == {"x": 1, "y": 2}


def test_calling_ribbon_assigns_and_chains():
    _require_imports()
    r = Ribbon()
    r(x=1)(y={"z": 2})
    r.nested({"a": 1}, b=2)

    assert r.x == 1
    assert r.y.z == 2
    assert r.nested == {"a": 1, "b": 2}


def test_ribbon_key_is_rejected():
    _require_imports()
    r = Ribbon()
    with pytest.raises(InvalidKeyError):
        r[Ribbon()] = 1
    with pytest.raises(InvalidKeyError):
        assign(r, Wrapper(), 1)
    with pytest.raises(InvalidKeyError):
        Ribbon({"ok": 1})[Ribbon()]


def test_invalid_key_error_is_a_type_error():
    _require_imports()
    with pytest.raises(TypeError):
        Ribbon()[Ribbon()] = 1


# =====================================================
# peek
# =====================================================

def test_peek_missing_key_does_not_mutate():
    """
    Verifica que `peek` de chave ausente não cria a chave.

    Invariantes:
        - O conjunto de chaves permanece o mesmo
        - O retorno padrão é None
    """
    _require_imports()
    r = Ribbon({"a": 1})

    assert peek(r, "missing") is None
    assert keys(r) == ["a"]


def test_peek_default_and_fallback():
    _require_imports()
    r = Ribbon({"a": 1})

    assert peek(r, "a", 99) == 1
    assert peek(r, "b", 99) == 99
    assert peek(r, "b", fallback=lambda key: key * 2) == "bb"
    assert "b" not in r


# =====================================================
# send — convenção de marcadores
# =====================================================

def test_send_without_marker_reads_and_vivifies():
    _require_imports()
    r = Ribbon()
    value = send(r, "missing")

    assert isinstance(value, Ribbon)
    assert "missing" in r


def test_send_without_marker_with_argument_sets_then_gets():
    _require_imports()
    r = Ribbon()
    value = send(r, "config", {"a": 1})

    assert isinstance(value, Ribbon)
    assert r.config.a == 1


def test_send_assign_marker_returns_value():
    _require_imports()
    r = Ribbon()
    assert send(r, "x=", 5) == 5
    assert send(r, " y = ", 6) == 6
    assert r == {"x": 5, "y": 6}


def test_send_chain_marker_returns_ribbon():
    _require_imports()
    r = Ribbon()
    result = send(send(r, "x!", 1), "y!", 2)

    assert result is r
    assert r == {"x": 1, "y": 2}


def test_send_chain_marker_callback_only_when_present():
    _require_imports()
    r = Ribbon()
    seen = []

    send(r, "x!", callback=seen.append)
    assert seen == []
    assert "x" not in r

    send(r, "x!", 3, callback=seen.append)
    assert seen == [3]


def test_send_peek_marker_never_vivifies():
    _require_imports()
    r = Ribbon({"present": False})

    assert send(r, "present?") is False
    assert send(r, "absent?") is None
    assert send(r, "absent?", "default") == "default"
    assert send(r, "absent?", callback=lambda key: f"no {key}") == "no absent"
    assert keys(r) == ["present"]


def test_send_peek_marker_rejects_many_defaults():
    _require_imports()
    with pytest.raises(TypeError):
        send(Ribbon(), "x?", 1, 2)


# =====================================================
# Protocolo Python
# =====================================================

def test_delete_key_by_attribute_and_item():
    _require_imports()
    r = Ribbon({"a": 1, "b": 2})
    del r.a
    del r["b"]

    assert len(r) == 0
    with pytest.raises(AttributeError):
        del r.a
    with pytest.raises(KeyError):
        del r["b"]


def test_iteration_len_bool_and_inspection():
    _require_imports()
    r = Ribbon({"a": 1, "b": 2})

    assert list(r) == ["a", "b"]
    assert len(r) == 2
    assert bool(r) is True
    assert bool(Ribbon()) is False
    assert keys(r) == ["a", "b"]
    assert values(r) == [1, 2]
    assert items(r) == [("a", 1), ("b", 2)]


def test_dunder_names_are_not_keys():
    _require_imports()
    r = Ribbon()
    assert not hasattr(r, "__missing_dunder__")
    assert len(r) == 0


def test_equality_with_mappings_and_ribbons():
    _require_imports()
    r = Ribbon({"a": {"b": 1}})

    assert r == {"a": {"b": 1}}
    assert {"a": {"b": 1}} == r
    assert r == Ribbon({"a": {"b": 1}})
    assert r != {"a": {"b": 2}}
    assert r != 1


def test_ribbon_is_not_hashable():
    _require_imports()
    with pytest.raises(TypeError):
        hash(Ribbon())


def test_construction_from_ribbon_copies_top_level():
    _require_imports()
    original = Ribbon({"a": 1})
    clone = Ribbon(original)
    clone.a = 2

    assert original.a == 1


def test_construction_from_incompatible_object_raises():
    _require_imports()
    with pytest.raises(UnwrappableObjectError):
        Ribbon([("a", 1)])


def test_copy_deepcopy_and_pickle(nested_ribbon):
    _require_imports()
    shallow = copy.copy(nested_ribbon)
    deep = copy.deepcopy(nested_ribbon)
    restored = pickle.loads(pickle.dumps(nested_ribbon))

    assert shallow == nested_ribbon
    assert deep == nested_ribbon
    assert restored == nested_ribbon

    deep.engine.log_level = "DEBUG"
    assert nested_ribbon.engine.log_level == "INFO"
    assert shallow.engine is nested_ribbon.engine
