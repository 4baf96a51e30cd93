"""
utils/i18n.py

Mini-sistema de traducciones muy simple.

- Por ahora solo usamos inglés ("en").
- La función principal es `t(key, locale="en")`.
- Si no se encuentra la clave en el catálogo, se devuelve la propia clave.
"""

from typing import Dict

# Idioma por defecto de la app
DEFAULT_LOCALE = "en"

CATALOG: Dict[str, Dict[str, str]] = {
    "en": {
        "nav.products": "Products",
        "nav.cart": "Cart",
        "landing.title": "Welcome to GreenNest",
        "landing.body": (
            "We handpick healthy houseplants that thrive in Indian homes: "
            "easy care, stylish pots, and fast delivery."
        ),
        "landing.cta": "Get Started",
        "products.title": "Shop Plants",
        "products.add": "Add to Cart",
        "products.added": "Added",
        "cart.title": "Shopping Cart",
        "cart.added": "Item added to cart",
        "cart.empty": "Your cart is empty.",
        "cart.total_items": "Total plants:",
        "cart.total_cost": "Total cost:",
        "cart.unit_price": "Unit price:",
        "cart.delete": "Delete",
        "cart.checkout": "Checkout",
        "cart.checkout_soon": "Coming Soon",
        "cart.continue": "Continue Shopping",
        "cart.clear": "Empty cart",
    },
    # si mañana agregas 'hi': {...}
}


def t(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """
    Devuelve el texto traducido para una clave dada y un idioma dado.

    - Si el idioma no existe, usa DEFAULT_LOCALE.
    - Si la clave no existe en el idioma, devuelve la propia clave (para que al menos se vea algo).

    Uso típico en plantillas:
        {{ t("cart.title", locale) }}
    """
    lang_catalog = CATALOG.get(locale) or CATALOG.get(DEFAULT_LOCALE, {})
    return lang_catalog.get(key, key)
