# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do crunz-config.

Este módulo contém testes mínimos cujo único objetivo é garantir que:
- o ambiente de testes (pytest) está funcional
- o pacote pode ser importado sem falhas estruturais

Limites explícitos:
    - Não testar lógica de resolução
    - Não evoluir para testes unitários ou de integração
"""


def test_smoke():
    """Smoke test mínimo do repositório."""
    assert True


def test_public_api_importable():
    import crunz_config

    assert hasattr(crunz_config, "ConfigurationResolver")
    assert hasattr(crunz_config, "Configuration")
