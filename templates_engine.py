"""
Punto único para crear y configurar la instancia global de Jinja2Templates.

- Todos los routers usan la misma instancia: `from templates_engine import templates`.
- Inyecta helpers globales (`t`, `locale`, datos de la tienda) en TODAS las plantillas.
- `render()` añade el contexto común de cada página (badge del carrito, flashes).
"""

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from config import STORE_NAME, CURRENCY_SYMBOL
from utils.i18n import t, DEFAULT_LOCALE
from utils.cart import CartStore, total_item_count
from utils.flash import get_flashed_messages

BASE_DIR = Path(__file__).resolve().parent

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

templates.env.globals["t"] = t
templates.env.globals["locale"] = DEFAULT_LOCALE
templates.env.globals["store_name"] = STORE_NAME


def format_price(amount: int) -> str:
    # {{ p.price | price }}  -> "₹799"
    return f"{CURRENCY_SYMBOL}{amount}"


templates.env.filters["price"] = format_price


def render(
    request: Request,
    name: str,
    store: CartStore,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
):
    """TemplateResponse con el contexto que necesita base.html."""
    ctx = {
        "cart_count": total_item_count(store.state),
        "messages": get_flashed_messages(request),
    }
    ctx.update(context or {})
    return templates.TemplateResponse(request, name, ctx, status_code=status_code)
