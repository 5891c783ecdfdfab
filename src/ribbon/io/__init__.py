# src/ribbon/io/__init__.py
"""
Camada de I/O do Ribbon.

    - serialization → YAML/JSON em texto ↔ Ribbon
    - loader        → arquivos (defaults + override local) ↔ Ribbon

Nada deste pacote é necessário para usar o core.
"""

from .loader import load_file, load_ribbon, save_file
from .serialization import from_json, from_yaml, to_json, to_yaml
