# src/ribbon/core/__init__.py
"""
Core do Ribbon.

Componentes principais:
    - ribbon     → o container com auto-vivificação e operações de acesso
    - conversion → conversão mapa ↔ Ribbon, em profundidade
    - merge      → merge raso e profundo com resolução de conflitos
    - rendering  → representação textual
    - errors     → hierarquia de exceções

Ordem de dependência: ribbon → conversion → merge. O Wrapper e a camada
de I/O ficam fora do core.
"""

from .conversion import convert, convert_all, to_plain
from .errors import (
    InvalidKeyError,
    InvalidRootTypeError,
    RibbonError,
    SourceNotFoundError,
    UnsupportedFormatError,
    UnwrappableObjectError,
)
from .merge import deep_merge, deep_merge_in_place, merge, merge_in_place
from .rendering import render
from .ribbon import (
    Ribbon,
    assign,
    extract_data,
    get,
    is_container,
    is_ribbon,
    items,
    keys,
    peek,
    put,
    send,
    values,
)
