"""Connectors por provedor — adapters de borda para APIs de clima.

Estrutura:
- http_base.py: cliente HTTP base (um GET, sem retry) e descritor de requisição
- weatherlink/: WeatherLink v1 (legada) e v2 (assinada por HMAC)
- openweather/: OpenWeather One Call (previsão)

Cada provedor tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
