# tests/conftest.py
"""
Fixtures compartilhados para testes do Ribbon.

Este módulo define fixtures reutilizáveis que fornecem:
- mapas simples aninhados, determinísticos e isolados
- Ribbons já construídos a partir desses mapas
- documentos YAML (defaults + override local) como string

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Cada fixture retorna uma estrutura nova a cada teste
    - Documentos são fornecidos como string; testes que precisam de
      arquivo usam `tmp_path`

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture depende de estado global
"""

import pytest


# =====================================================
# Estruturas simples
# =====================================================

@pytest.fixture
def nested_plain() -> dict:
    """
    Fixture que fornece um mapa simples com aninhamento, listas e tuplas.

    Usado por:
        - Testes de conversão e round-trip
        - Testes de serialização

    Returns:
        dict: Mapa contendo apenas escalares, sequências e mapas aninhados.
    """
    return {
        "name": "ribbon",
        "engine": {"fail_fast": True, "log_level": "INFO"},
        "steps": [
            {"id": "ingest", "enabled": True},
            {"id": "train", "enabled": False},
        ],
        "limits": (1, 2, {"max": 3}),
        "empty": {},
    }


@pytest.fixture
def nested_ribbon(nested_plain):
    """Ribbon construído a partir de `nested_plain`."""
    from ribbon import Ribbon

    return Ribbon(nested_plain)


# =====================================================
# Documentos de configuração
# =====================================================

@pytest.fixture
def defaults_yaml() -> str:
    """
    Fixture que fornece um YAML de defaults.

    Representa a base completa sobre a qual o override local é aplicado
    via deep-merge.

    Returns:
        str: Conteúdo YAML.
    """
    return """\
engine:
  fail_fast: true
  log_level: INFO
steps:
  ingest:
    enabled: true
  train:
    enabled: true
"""


@pytest.fixture
def local_yaml() -> str:
    """
    Fixture que fornece um YAML de override local.

    Contém apenas as chaves sobrescritas.

    Returns:
        str: Conteúdo YAML.
    """
    return """\
engine:
  log_level: DEBUG
steps:
  train:
    enabled: false
"""
