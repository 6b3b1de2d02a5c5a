"""App: coração do sistema: serviços de agendamento e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de consultor, intervalos, reservas e config de runtime
- services/: disponibilidade, reserva e administração de consultores
- infra/: implementações concretas de IO (Google Calendar, webhook, stores)
- protocols/: contratos/interfaces
- observability/: correlation id e métricas em log estruturado

Padrão: app executa; api adapta; config parametriza; utils apoia.
"""
