# src/ribbon/core/errors.py
"""
Exceções canônicas do Ribbon.

Este módulo define a hierarquia oficial de exceções levantadas pelo core,
pelo Wrapper e pela camada de I/O (serialização e loader de arquivos).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Nenhuma coerção silenciosa: entradas incompatíveis são rejeitadas
    - Cada exceção também herda da exceção builtin equivalente, para que
      código cliente que já captura `TypeError`/`ValueError` continue válido

Invariantes:
    - Todas as exceções do pacote herdam de `RibbonError`
    - Leitura com `peek` nunca levanta exceção para chave ausente

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra logs
"""


class RibbonError(Exception):
    """
    Exceção base para todos os erros do Ribbon.

    Permite captura genérica de falhas do pacote sem mascarar erros
    de programação não relacionados.
    """


class InvalidKeyError(RibbonError, TypeError):
    """
    Exceção levantada quando um Ribbon (ou Wrapper) é usado como chave.

    Ribbons são mutáveis e não possuem hash estável; usá-los como chave
    de mapa é rejeitado explicitamente, em vez de deixar o `dict`
    falhar com uma mensagem genérica.
    """


class UnwrappableObjectError(RibbonError, TypeError):
    """
    Exceção levantada quando não é possível extrair um mapa do objeto.

    Apenas Ribbons, Wrappers e mapeamentos são aceitos.
    """


class SourceNotFoundError(RibbonError, FileNotFoundError):
    """Arquivo de origem obrigatório não encontrado."""


class UnsupportedFormatError(RibbonError, ValueError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidRootTypeError(RibbonError, TypeError):
    """
    Exceção levantada quando o documento carregado não é um mapa.

    Listas ou escalares no nível raiz não podem ser representados
    como Ribbon.
    """
