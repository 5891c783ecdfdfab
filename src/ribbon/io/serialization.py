# src/ribbon/io/serialization.py
"""
Serialização de Ribbons em texto (YAML e JSON).

O core do Ribbon não conhece formatos de texto: ele só precisa de um par
de funções "texto → mapa simples" e "mapa simples → texto". Este módulo
fornece esse par para YAML (PyYAML, sempre em modo `safe`) e JSON.

Decisões arquiteturais:
    - Apenas `yaml.safe_load` / `yaml.safe_dump` são usados
    - A ordem original das chaves é preservada na saída
    - Tuplas são serializadas como listas
    - Documento vazio resulta em Ribbon vazio

Invariantes:
    - `from_yaml(to_yaml(r)) == r` para Ribbons com valores serializáveis
    - O documento raiz carregado é sempre um mapa

Limites explícitos:
    - Não lê nem escreve arquivos (ver `ribbon.io.loader`)
    - Não serializa objetos arbitrários
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import yaml  # PyYAML

from ..core.conversion import to_plain
from ..core.errors import InvalidRootTypeError
from ..core.ribbon import Factory, Ribbon, extract_data


logger = logging.getLogger(__name__)


def _document(obj: Any) -> Dict[Any, Any]:
    def normalize(value: Any) -> Any:
        if isinstance(value, dict):
            return {key: normalize(item) for key, item in value.items()}
        if isinstance(value, (list, tuple)):
            return [normalize(element) for element in value]
        return value

    return normalize(to_plain(extract_data(obj)))


def _to_ribbon(data: Any, factory: Optional[Factory]) -> Ribbon:
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidRootTypeError(
            f"Documento raiz deve ser um mapa, recebido: {type(data).__name__}"
        )

    return Ribbon(data, factory)


def to_yaml(obj: Any, **options: Any) -> str:
    """
    Serializa um Ribbon (ou Wrapper, ou mapa) em YAML.

    Args:
        obj (Any): Objeto a serializar.
        **options: Repassadas para `yaml.safe_dump`. Padrões:
            `sort_keys=False`, `allow_unicode=True`,
            `default_flow_style=False`.

    Returns:
        str: Documento YAML.
    """
    options.setdefault("sort_keys", False)
    options.setdefault("allow_unicode", True)
    options.setdefault("default_flow_style", False)

    document = _document(obj)
    logger.debug("to_yaml: %d chave(s) no nível raiz", len(document))
    return yaml.safe_dump(document, **options)


def from_yaml(text: str, factory: Optional[Factory] = None) -> Ribbon:
    """
    Carrega um documento YAML como Ribbon.

    Raises:
        InvalidRootTypeError: Se o documento raiz não for um mapa.
        yaml.YAMLError: Se o texto não for YAML válido.
    """
    data = yaml.safe_load(text)
    logger.debug("from_yaml: documento do tipo %s", type(data).__name__)
    return _to_ribbon(data, factory)


def to_json(obj: Any, **options: Any) -> str:
    """Serializa em JSON; `options` são repassadas para `json.dumps`."""
    options.setdefault("ensure_ascii", False)
    return json.dumps(_document(obj), **options)


def from_json(text: str, factory: Optional[Factory] = None) -> Ribbon:
    """
    Carrega um documento JSON como Ribbon. Texto em branco resulta em
    Ribbon vazio.

    Raises:
        InvalidRootTypeError: Se o documento raiz não for um objeto.
        json.JSONDecodeError: Se o texto não for JSON válido.
    """
    data = json.loads(text) if text.strip() else None
    return _to_ribbon(data, factory)
