import logging
import os

ENV = os.getenv("ENV", "local")

BASE_URL = os.getenv("BASE_URL", "http://127.0.0.1:8000")

# Firma de la cookie de sesión (solo guarda el cart_id)
SESSION_SECRET = os.getenv("SESSION_SECRET", "dev-secret")

# Datos visibles de la tienda
STORE_NAME = os.getenv("STORE_NAME", "GreenNest")
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₹")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def log_level(name: str) -> int:
    """Nivel de logging por nombre; si no es un nivel conocido, INFO."""
    level = getattr(logging, (name or "").upper(), None)
    return level if isinstance(level, int) else logging.INFO
