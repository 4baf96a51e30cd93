# Catálogo fijo de la tienda: se siembra al importar y nunca se modifica.

from typing import Dict, List, Optional, Sequence
from pydantic import BaseModel, ConfigDict


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: int          # precio unitario en unidades menores
    category: str
    image_url: str


_IMG = "https://source.unsplash.com/collection/190727/200x200?plant,{}"

PRODUCTS: List[Product] = [
    Product(id="p1", name="Monstera Deliciosa", price=799, category="Tropical", image_url=_IMG.format("monstera")),
    Product(id="p2", name="Snake Plant", price=499, category="Low Light", image_url=_IMG.format("snake")),
    Product(id="p3", name="Fiddle Leaf Fig", price=1299, category="Focal", image_url=_IMG.format("fiddle")),
    Product(id="p4", name="ZZ Plant", price=599, category="Low Light", image_url=_IMG.format("zz")),
    Product(id="p5", name="Pothos", price=299, category="Trailing", image_url=_IMG.format("pothos")),
    Product(id="p6", name="Calathea", price=899, category="Tropical", image_url=_IMG.format("calathea")),
]

PRODUCTS_BY_ID: Dict[str, Product] = {p.id: p for p in PRODUCTS}


def get_product(product_id: str) -> Optional[Product]:
    """Devuelve el producto con ese id, o None si no existe."""
    return PRODUCTS_BY_ID.get(product_id)


def categorized_catalog(products: Sequence[Product] = PRODUCTS) -> Dict[str, List[Product]]:
    """
    Agrupa el catálogo por categoría.

    - Las categorías salen en el orden en que aparecen por primera vez.
    - Dentro de cada categoría se respeta el orden del catálogo.
    """
    groups: Dict[str, List[Product]] = {}
    for p in products:
        groups.setdefault(p.category, []).append(p)
    return groups
