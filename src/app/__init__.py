"""App — orquestração, composition root e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- services/: serviço de relay (connector → normalizador)
- infra/: implementações concretas (assinatura HMAC)
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config parametriza; utils apoia.
"""
