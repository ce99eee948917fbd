"""Pacote do relay de webhooks Squadcast -> Slack.

Este pacote contém:
- constants: variáveis de ambiente e valores padrão
- utils: helpers de texto, emoji de status e normalização de canal
- detection: classificação do payload (incidente ou status page)
- formatters: montagem das mensagens Block Kit
- flatten: achatamento do payload para o Workflow Builder
- services: chamadas HTTP para a API do Slack e para o webhook de workflow
- controller: criação do Flask app e endpoints
"""
