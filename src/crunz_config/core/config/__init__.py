# src/crunz_config/core/config/__init__.py
"""
Camada de configuração do crunz-config.

Este pacote contém as estruturas e utilitários responsáveis por localizar,
ler, validar e resolver a configuração efetiva a partir de um `crunz.yml`
opcional no diretório de trabalho.

A configuração é:
    - opcional (ausência do arquivo implica apenas defaults)
    - validada por um schema declarativo e estrito
    - determinística

Responsabilidades do pacote:
    - Localização do arquivo (`locator`)
    - Leitura YAML (`file_parser`)
    - Schema declarativo e processamento (`definition`, `processor`, `merge`)
    - Opções reconhecidas do scheduler (`crunz_schema`)
    - Orquestração com fallback (`resolver`)
    - Leitura por chave pontuada (`configuration`)

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - Erros de conteúdo são fatais; apenas falhas de acesso ao arquivo
      são absorvidas

Limites explícitos:
    - Não define o significado das opções para o restante da aplicação
"""
