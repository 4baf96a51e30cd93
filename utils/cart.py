# Estado del carrito: transiciones puras + contenedor explícito por visitante.
#
# El CartState es un valor inmutable; cada transición devuelve uno nuevo
# (o el mismo objeto si no hubo cambio). El CartStore es el único que lo
# reemplaza, siempre vía dispatch().

import logging
import secrets
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional

from fastapi import Request

from catalog import Product

log = logging.getLogger("uvicorn.error")  # usa el logger de Uvicorn


@dataclass(frozen=True)
class CartLine:
    product: Product
    qty: int

    @property
    def line_total(self) -> int:
        return self.qty * self.product.price


@dataclass(frozen=True)
class CartState:
    # product_id -> CartLine, en orden de inserción
    lines: Mapping[str, CartLine] = field(default_factory=dict)
    # ids con línea activa; siempre subconjunto de lines
    added: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        # copia de solo lectura: quien tenga el snapshot no puede editarlo
        object.__setattr__(self, "lines", MappingProxyType(dict(self.lines)))
        object.__setattr__(self, "added", frozenset(self.added))

    def is_added(self, product_id: str) -> bool:
        return product_id in self.added


# ============ Transiciones ============

def add_to_cart(state: CartState, product: Product) -> CartState:
    """Crea la línea con qty 0 si falta, suma 1 y marca el producto como añadido."""
    lines = dict(state.lines)
    line = lines.get(product.id) or CartLine(product=product, qty=0)
    lines[product.id] = replace(line, qty=line.qty + 1)
    return CartState(lines=lines, added=state.added | {product.id})


def increase(state: CartState, product_id: str) -> CartState:
    line = state.lines.get(product_id)
    if line is None:
        return state
    lines = dict(state.lines)
    lines[product_id] = replace(line, qty=line.qty + 1)
    return CartState(lines=lines, added=state.added)


def decrease(state: CartState, product_id: str) -> CartState:
    """Resta 1; si la cantidad llega a 0 se elimina la línea y su marca."""
    line = state.lines.get(product_id)
    if line is None:
        return state
    lines = dict(state.lines)
    qty = line.qty - 1
    if qty <= 0:
        del lines[product_id]
        return CartState(lines=lines, added=state.added - {product_id})
    lines[product_id] = replace(line, qty=qty)
    return CartState(lines=lines, added=state.added)


def remove_item(state: CartState, product_id: str) -> CartState:
    if product_id not in state.lines and product_id not in state.added:
        return state
    lines = {k: v for k, v in state.lines.items() if k != product_id}
    return CartState(lines=lines, added=state.added - {product_id})


def clear_cart(state: CartState) -> CartState:
    return CartState()


# ============ Vistas derivadas ============

def total_item_count(state: CartState) -> int:
    return sum(line.qty for line in state.lines.values())


def total_cost(state: CartState) -> int:
    return sum(line.line_total for line in state.lines.values())


# ============ Acciones / reducer ============

ADD_TO_CART = "add_to_cart"
INCREASE = "increase"
DECREASE = "decrease"
REMOVE_ITEM = "remove_item"
CLEAR_CART = "clear_cart"


@dataclass(frozen=True)
class Action:
    type: str
    payload: Any = None


_HANDLERS: Dict[str, Callable[[CartState, Any], CartState]] = {
    ADD_TO_CART: add_to_cart,
    INCREASE: increase,
    DECREASE: decrease,
    REMOVE_ITEM: remove_item,
    CLEAR_CART: lambda state, _payload: clear_cart(state),
}


def reduce(state: CartState, action: Action) -> CartState:
    handler = _HANDLERS.get(action.type)
    if handler is None:
        log.warning("[cart] acción desconocida: %s", action.type)
        return state
    return handler(state, action.payload)


class CartStore:
    """
    Contenedor del estado de UN carrito.

    Las páginas leen `store.state` (snapshot inmutable) y solo escriben
    mediante `dispatch()` o los atajos add_to_cart/increase/...
    """

    def __init__(self, state: CartState | None = None) -> None:
        self._state = state if state is not None else CartState()

    @property
    def state(self) -> CartState:
        return self._state

    def dispatch(self, action: Action) -> CartState:
        self._state = reduce(self._state, action)
        log.debug("[cart] %s %r -> %d items", action.type, action.payload, total_item_count(self._state))
        return self._state

    def add_to_cart(self, product: Product) -> CartState:
        return self.dispatch(Action(ADD_TO_CART, product))

    def increase(self, product_id: str) -> CartState:
        return self.dispatch(Action(INCREASE, product_id))

    def decrease(self, product_id: str) -> CartState:
        return self.dispatch(Action(DECREASE, product_id))

    def remove_item(self, product_id: str) -> CartState:
        return self.dispatch(Action(REMOVE_ITEM, product_id))

    def clear_cart(self) -> CartState:
        return self.dispatch(Action(CLEAR_CART))


class CartRegistry:
    """Carritos en memoria, uno por visitante (clave guardada en la sesión)."""

    def __init__(self) -> None:
        self._stores: Dict[str, CartStore] = {}

    def get(self, key: str) -> CartStore:
        store = self._stores.get(key)
        if store is None:
            store = CartStore()
            self._stores[key] = store
            log.info("[cart] nuevo carrito %s (activos: %d)", key[:8], len(self._stores))
        return store

    def peek(self, key: Optional[str]) -> Optional[CartStore]:
        """Como get(), pero sin crear nada."""
        return self._stores.get(key) if isinstance(key, str) and key else None

    def discard(self, key: str) -> None:
        self._stores.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._stores)

    def __contains__(self, key: str) -> bool:
        return key in self._stores

    def __len__(self) -> int:
        return len(self._stores)


# ============ Dependencia FastAPI ============

def _ensure_cart_id(request: Request) -> str:
    cart_id = request.session.get("cart_id")
    if not isinstance(cart_id, str) or not cart_id:
        cart_id = secrets.token_hex(16)
        request.session["cart_id"] = cart_id
    return cart_id


async def get_cart_store(request: Request) -> CartStore:
    """
    Dependencia para rutas que MODIFICAN el carrito: crea el cart_id y el
    store la primera vez.

    Es async para que corra en el hilo del event loop, igual que las rutas:
    un dispatch a la vez, sin locks.

    Uso:

    @router.post("/algo")
    async def algo(store: CartStore = Depends(get_cart_store)):
        ...
    """
    return request.app.state.carts.get(_ensure_cart_id(request))


async def find_cart_store(request: Request) -> CartStore:
    """
    Dependencia para rutas de solo lectura. Si el visitante aún no tiene
    carrito devuelve uno vacío SIN registrarlo ni tocar la sesión.
    """
    store = request.app.state.carts.peek(request.session.get("cart_id"))
    return store if store is not None else CartStore()
