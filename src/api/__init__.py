"""API: camada de borda HTTP.

Responsabilidades:
- Definir endpoints HTTP (booking, admin, auth, health)
- Converter corpo/resposta entre camelCase do wire e modelos de dominio
- Delegar para os serviços em app/services

NÃO PODE conter: regras de agendamento, acesso direto a stores ou ao Google.
"""
