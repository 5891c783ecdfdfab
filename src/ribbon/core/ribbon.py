# src/ribbon/core/ribbon.py
"""
Ribbon — estrutura associativa aninhada com acesso por atributo.

Este módulo define o **Ribbon**, um mapa chave-valor cujas chaves podem ser
lidas e escritas como atributos:

    r = Ribbon()
    r.a.b.c = 1          # equivalente a r["a"]["b"]["c"] = 1
    r.a.b.c
    # => 1

Ler uma chave ausente cria, armazena e retorna um Ribbon vazio
(auto-vivificação), o que permite construir estruturas profundas em cadeia.

Decisões arquiteturais:
    - A classe `Ribbon` não define nenhum atributo público que não seja
      dunder: todo identificador fica disponível como chave
    - Operações nomeadas (`get`, `assign`, `peek`, `put`, `send`, ...) são
      funções de módulo que recebem o Ribbon como primeiro argumento
    - O valor criado para chaves ausentes vem de uma `factory` passada ao
      construtor, nunca de estado global
    - Conversão é ansiosa: mapas atribuídos viram Ribbons no momento da
      escrita; a leitura ainda converte (e regrava) valores inseridos
      diretamente no dicionário interno

Invariantes:
    - Todo valor que era um mapa simples é representado como Ribbon
    - Ribbons e Wrappers nunca são aceitos como chave
    - `peek` nunca muta o Ribbon

Limites explícitos:
    - Não é thread-safe
    - Nomes dunder (`__x__`) não são tratados como chaves via atributo;
      use acesso por item (`r["__x__"]`)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, List, Optional

from .errors import InvalidKeyError, UnwrappableObjectError


Factory = Callable[[], Any]
Callback = Callable[[Any], Any]

# Marcadores finais reconhecidos por `send`.
ASSIGN_MARKER = "="
CHAIN_MARKER = "!"
PEEK_MARKER = "?"
_MARKERS = (ASSIGN_MARKER, CHAIN_MARKER, PEEK_MARKER)


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


class Ribbon:
    """
    Mapa chave-valor com auto-vivificação e acesso por atributo.

    Ver a documentação do módulo para o contrato completo. Esta classe só
    define métodos dunder; todo o restante da API vive em funções de módulo
    e no `Wrapper`.
    """

    __slots__ = ("__ribbon_data__", "__ribbon_factory__")

    def __init__(self, initial: Any = None, factory: Optional[Factory] = None) -> None:
        from .conversion import convert_all

        object.__setattr__(self, "__ribbon_data__", {})
        object.__setattr__(self, "__ribbon_factory__", factory)

        if initial is not None:
            data = self.__ribbon_data__
            for key, value in extract_data(initial).items():
                check_key(key)
                data[key] = value

        convert_all(self)

    # -----------------------------
    # Acesso por atributo
    # -----------------------------
    def __getattr__(self, name: str) -> Any:
        if _is_dunder(name):
            raise AttributeError(name)
        return get(self, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if _is_dunder(name):
            object.__setattr__(self, name, value)
            return
        assign(self, name, value)

    def __delattr__(self, name: str) -> None:
        if _is_dunder(name):
            object.__delattr__(self, name)
            return
        try:
            del self.__ribbon_data__[name]
        except KeyError:
            raise AttributeError(name) from None

    # -----------------------------
    # Acesso por item
    # -----------------------------
    def __getitem__(self, key: Any) -> Any:
        return get(self, key)

    def __setitem__(self, key: Any, value: Any) -> None:
        assign(self, key, value)

    def __delitem__(self, key: Any) -> None:
        del self.__ribbon_data__[key]

    def __contains__(self, key: Any) -> bool:
        return key in self.__ribbon_data__

    def __iter__(self) -> Iterator[Any]:
        return iter(self.__ribbon_data__)

    def __len__(self) -> int:
        return len(self.__ribbon_data__)

    def __call__(self, *mappings: Any, **pairs: Any) -> "Ribbon":
        """Atribui cada par recebido e retorna o próprio Ribbon (encadeável)."""
        for mapping in mappings:
            for key, value in extract_data(mapping).items():
                assign(self, key, value)
        for key, value in pairs.items():
            assign(self, key, value)
        return self

    # -----------------------------
    # Igualdade e representação
    # -----------------------------
    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Ribbon):
            return self.__ribbon_data__ == other.__ribbon_data__
        if isinstance(other, Mapping):
            return self.__ribbon_data__ == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from .rendering import render

        return render(self)

    # -----------------------------
    # Cópia e pickling
    # -----------------------------
    def __copy__(self) -> "Ribbon":
        clone = type(self)(None, self.__ribbon_factory__)
        clone.__ribbon_data__.update(self.__ribbon_data__)
        return clone

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Ribbon":
        from copy import deepcopy

        clone = type(self)(None, self.__ribbon_factory__)
        memo[id(self)] = clone
        data = clone.__ribbon_data__
        for key, value in self.__ribbon_data__.items():
            data[deepcopy(key, memo)] = deepcopy(value, memo)
        return clone

    def __reduce__(self):
        return (type(self), (self.__ribbon_data__, self.__ribbon_factory__))


# =====================================================
# Helpers estruturais
# =====================================================

def is_ribbon(obj: Any) -> bool:
    """Retorna True se `obj` for uma instância de Ribbon."""
    return isinstance(obj, Ribbon)


def unwrap(obj: Any) -> Any:
    """Retorna o Ribbon de um Wrapper, ou o próprio objeto caso contrário."""
    from ..wrapper import Wrapper

    if isinstance(obj, Wrapper):
        return obj.ribbon
    return obj


def is_container(obj: Any) -> bool:
    """True para Ribbons e Wrappers (que sempre envolvem um Ribbon)."""
    return isinstance(unwrap(obj), Ribbon)


def extract_data(obj: Any) -> Dict[Any, Any]:
    """
    Extrai o dicionário subjacente de um objeto compatível.

    Política de extração:
        - Ribbon  → o dicionário interno (mesma referência)
        - Wrapper → o dicionário interno do Ribbon envolvido
        - dict    → o próprio dicionário
        - Mapping → uma cópia como `dict`

    Args:
        obj (Any): Ribbon, Wrapper ou mapeamento.

    Returns:
        Dict[Any, Any]: Dicionário com os dados do objeto.

    Raises:
        UnwrappableObjectError: Se o objeto não for compatível.
    """
    obj = unwrap(obj)

    if isinstance(obj, Ribbon):
        return obj.__ribbon_data__
    if isinstance(obj, dict):
        return obj
    if isinstance(obj, Mapping):
        return dict(obj)

    raise UnwrappableObjectError(
        f"Não é possível extrair um mapa de {type(obj).__name__}"
    )


def check_key(key: Any) -> Any:
    """Rejeita Ribbons e Wrappers como chave; retorna a chave válida."""
    if is_container(key):
        raise InvalidKeyError(
            f"{type(key).__name__} não pode ser usado como chave de Ribbon"
        )
    return key


def _vivify(ribbon: Any) -> Any:
    from .conversion import convert

    target = unwrap(ribbon)
    factory = target.__ribbon_factory__ if isinstance(target, Ribbon) else None
    if factory is None:
        return Ribbon()
    return convert(factory())


def _pack(values: tuple) -> Any:
    if len(values) == 1:
        return values[0]
    return list(values)


# =====================================================
# Operações de acesso
# =====================================================

def get(ribbon: Any, key: Any, callback: Optional[Callback] = None) -> Any:
    """
    Lê o valor associado a `key`, criando um Ribbon vazio se ausente.

    Política de leitura:
        - Chave presente → valor existente; mapas (ou sequências contendo
          mapas) são convertidos e o valor convertido é regravado
        - Chave ausente  → o valor produzido pela `factory` do Ribbon é
          armazenado e retornado (auto-vivificação)

    Se `callback` for informado, ele é chamado com o valor resultante. O
    retorno é sempre o valor, nunca o resultado do callback.

    Args:
        ribbon (Any): Ribbon, Wrapper ou dict.
        key (Any): Chave a ser lida.
        callback (Optional[Callback]): Continuação chamada com o valor.

    Returns:
        Any: O valor associado à chave.

    Raises:
        InvalidKeyError: Se a chave for um Ribbon ou Wrapper.
    """
    from .conversion import convert, is_normalized

    data = extract_data(ribbon)
    check_key(key)

    if key in data:
        value = data[key]
        if not is_normalized(value):
            value = data[key] = convert(value)
    else:
        value = data[key] = _vivify(ribbon)

    if callback is not None:
        callback(value)
    return value


def assign(ribbon: Any, key: Any, *values: Any) -> Any:
    """
    Associa valores a `key` e retorna o valor armazenado.

    Um único valor é armazenado como está; vários valores são armazenados
    como lista. Mapas são convertidos em Ribbons no momento da escrita.

        assign(r, "key", "value")          # r.key == "value"
        assign(r, "key", "many", "values") # r.key == ["many", "values"]

    Raises:
        InvalidKeyError: Se a chave for um Ribbon ou Wrapper.
    """
    from .conversion import convert

    data = extract_data(ribbon)
    check_key(key)
    value = data[key] = convert(_pack(values))
    return value


def put(ribbon: Any, key: Any, *values: Any) -> Any:
    """Mesmo que `assign`, mas retorna o próprio Ribbon para encadeamento."""
    assign(ribbon, key, *values)
    return ribbon


def peek(
    ribbon: Any,
    key: Any,
    default: Any = None,
    fallback: Optional[Callable[[Any], Any]] = None,
) -> Any:
    """
    Lê `key` sem criar nada.

    Para chave ausente retorna `fallback(key)` se um fallback for
    informado, caso contrário `default`. Nunca levanta exceção para chave
    ausente e nunca muta o Ribbon.
    """
    data = extract_data(ribbon)
    check_key(key)

    if key in data:
        return data[key]
    if fallback is not None:
        return fallback(key)
    return default


def send(
    ribbon: Any,
    method: Any,
    *arguments: Any,
    callback: Optional[Callback] = None,
) -> Any:
    """
    Despacha um nome de método para a operação correspondente.

    A chave é o nome sem espaços e sem o marcador final (`=`, `!` ou `?`):

        send(r, "name")                 =>  get(r, "name")
        send(r, "name", value)          =>  assign(r, "name", value)
                                            get(r, "name")
        send(r, "name", callback=f)     =>  get(r, "name", f)

        send(r, "name=", value)         =>  assign(r, "name", value)

        send(r, "name!", value)         =>  assign(r, "name", value)
                                            r
        send(r, "name!", callback=f)    =>  f(get(r, "name")) se presente
                                            r

        send(r, "name?")                =>  peek(r, "name")
        send(r, "name?", default)       =>  peek(r, "name", default)
        send(r, "name?", callback=f)    =>  peek(r, "name", fallback=f)

    Raises:
        TypeError: Se `?` receber mais de um valor padrão.
    """
    name = str(method).strip()
    marker = name[-1:] if name[-1:] in _MARKERS else ""
    key = name[:-1].strip() if marker else name

    if marker == ASSIGN_MARKER:
        return assign(ribbon, key, *arguments)

    if marker == CHAIN_MARKER:
        if arguments:
            assign(ribbon, key, *arguments)
        if callback is not None and key in extract_data(ribbon):
            callback(get(ribbon, key))
        return ribbon

    if marker == PEEK_MARKER:
        if len(arguments) > 1:
            raise TypeError(
                f"'{name}' aceita no máximo um valor padrão, recebido: {len(arguments)}"
            )
        default = arguments[0] if arguments else None
        return peek(ribbon, key, default, fallback=callback)

    if arguments:
        assign(ribbon, key, *arguments)
    return get(ribbon, key, callback)


# =====================================================
# Inspeção (sem consumir nomes do Ribbon)
# =====================================================

def keys(ribbon: Any) -> List[Any]:
    return list(extract_data(ribbon).keys())


def values(ribbon: Any) -> List[Any]:
    return list(extract_data(ribbon).values())


def items(ribbon: Any) -> List[tuple]:
    return list(extract_data(ribbon).items())
