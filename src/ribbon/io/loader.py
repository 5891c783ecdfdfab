# src/ribbon/io/loader.py
"""
Loader de arquivos de configuração em Ribbons.

Um Ribbon é um portador natural de configuração em camadas. Este módulo
carrega arquivos YAML ou JSON e resolve a configuração efetiva a partir
de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

Princípios fundamentais:
    - O arquivo de defaults é obrigatório
    - O override local, quando existe, sempre tem precedência
    - A resolução usa `deep_merge`, então os defaults nunca são mutados
    - Erros estruturais são falhas explícitas

Limites explícitos:
    - Não valida semântica do conteúdo
    - Não observa mudanças nos arquivos
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from ..core.errors import SourceNotFoundError, UnsupportedFormatError
from ..core.merge import deep_merge
from ..core.ribbon import Ribbon
from .serialization import from_json, from_yaml, to_json, to_yaml


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}


def _format_of(path: Path) -> str:
    suffix = path.suffix.lower()

    if suffix in YAML_SUFFIXES:
        return "yaml"
    if suffix in JSON_SUFFIXES:
        return "json"

    raise UnsupportedFormatError(f"Formato não suportado: {path.suffix}")


def load_file(path: PathLike) -> Ribbon:
    """
    Carrega um arquivo YAML ou JSON como Ribbon.

    Decisões arquiteturais:
        - O formato é decidido apenas pela extensão
        - Arquivos vazios resultam em Ribbon vazio
        - O conteúdo raiz deve ser um mapa

    Args:
        path (PathLike): Caminho do arquivo.

    Returns:
        Ribbon: Conteúdo do arquivo.

    Raises:
        SourceNotFoundError: Se o arquivo não existir.
        UnsupportedFormatError: Se a extensão não for suportada.
        InvalidRootTypeError: Se o conteúdo raiz não for um mapa.
    """
    path = Path(path)

    if not path.exists():
        raise SourceNotFoundError(f"Arquivo não encontrado: {path}")

    kind = _format_of(path)

    with path.open("r", encoding="utf-8") as f:
        text = f.read()

    if kind == "yaml":
        return from_yaml(text)
    return from_json(text)


def save_file(obj: Any, path: PathLike, **options: Any) -> Path:
    """
    Grava um Ribbon (ou Wrapper, ou mapa) em YAML ou JSON, pela extensão.

    Returns:
        Path: O caminho gravado.

    Raises:
        UnsupportedFormatError: Se a extensão não for suportada.
    """
    path = Path(path)
    kind = _format_of(path)

    text = to_yaml(obj, **options) if kind == "yaml" else to_json(obj, **options)

    with path.open("w", encoding="utf-8") as f:
        f.write(text)

    logger.debug("Ribbon gravado em %s", path)
    return path


def load_ribbon(
    *,
    defaults_path: PathLike,
    local_path: Optional[PathLike] = None,
) -> Ribbon:
    """
    Carrega e resolve um Ribbon a partir de defaults e override local.

    Política de resolução:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional; se informado mas inexistente, é ignorado
        - Quando presente, o local é aplicado via `deep_merge`

    Args:
        defaults_path (PathLike): Caminho do arquivo base.
        local_path (Optional[PathLike]): Caminho opcional de overrides.

    Returns:
        Ribbon: Resultado resolvido.

    Raises:
        SourceNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedFormatError: Se o formato de algum arquivo não for suportado.
        InvalidRootTypeError: Se algum conteúdo raiz não for um mapa.
    """
    defaults = load_file(defaults_path)
    logger.info("Defaults carregados de %s", defaults_path)

    effective = defaults

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(defaults, load_file(local_file))
            logger.info("Override local aplicado de %s", local_file)
        else:
            logger.debug("Override local ausente, ignorado: %s", local_file)

    return effective
