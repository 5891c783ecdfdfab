# src/ribbon/__init__.py
"""
Ribbon — mapas aninhados com acesso por atributo.

    from ribbon import Ribbon

    r = Ribbon()
    r.a.b.c = 1
    r
    # => {a: {b: {c: 1}}}

Chaves ausentes viram Ribbons vazios quando lidas, o que permite construir
estruturas profundas em cadeia. O `Wrapper` reexpõe operações de mapa de
propósito geral (iteração, merge, dict, YAML) sem ocupar nomes do Ribbon.

Arquitetura em alto nível:
    - core     → container, conversão, merge, renderização e exceções
    - wrapper  → fachada de propósito geral
    - options  → escopos de opções aplicadas a todas as chamadas
    - io       → serialização YAML/JSON e loader de arquivos

Limites explícitos:
    - Não é thread-safe
    - Não valida esquema
    - Não persiste estado por conta própria
"""

import logging

from .core import (
    InvalidKeyError,
    InvalidRootTypeError,
    Ribbon,
    RibbonError,
    SourceNotFoundError,
    UnsupportedFormatError,
    UnwrappableObjectError,
    assign,
    convert,
    convert_all,
    deep_merge,
    deep_merge_in_place,
    extract_data,
    get,
    is_container,
    is_ribbon,
    items,
    keys,
    merge,
    merge_in_place,
    peek,
    put,
    render,
    send,
    to_plain,
    values,
)
from .io import from_json, from_yaml, load_file, load_ribbon, save_file, to_json, to_yaml
from .options import Options, option_scope
from .wrapper import Wrapper, wrap


__version__ = "0.9.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Ribbon",
    "Wrapper",
    "Options",
    "wrap",
    "option_scope",
    "get",
    "assign",
    "peek",
    "put",
    "send",
    "keys",
    "values",
    "items",
    "extract_data",
    "is_ribbon",
    "is_container",
    "convert",
    "convert_all",
    "to_plain",
    "merge",
    "merge_in_place",
    "deep_merge",
    "deep_merge_in_place",
    "render",
    "to_yaml",
    "from_yaml",
    "to_json",
    "from_json",
    "load_file",
    "save_file",
    "load_ribbon",
    "RibbonError",
    "InvalidKeyError",
    "UnwrappableObjectError",
    "SourceNotFoundError",
    "UnsupportedFormatError",
    "InvalidRootTypeError",
]
