"""Relay de alertas do Azure Monitor -> Slack.

Este pacote contém:
- constants: variáveis de ambiente e mapas de configuração
- utils: escape de texto para o mrkdwn do Slack e helpers
- models: tipos de status, alerta, mensagem Slack e resultado de etapas
- formatters: extração do alerta por variante de schema e formatação da mensagem
- services: integração com o webhook do Slack
- handler: pipeline de validação e envio
- controller: criação do Flask app e endpoints
"""
