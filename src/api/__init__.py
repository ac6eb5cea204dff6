"""API — camada de borda: rotas inbound e connectors upstream.

Subpastas:
- connectors/: clientes HTTP por provedor (WeatherLink, OpenWeather)
- normalizers/: conversão de respostas upstream em corpo de saída
- routes/: endpoints HTTP do relay

NÃO PODE conter: wiring de dependências, leitura de env fora de config/.
"""
