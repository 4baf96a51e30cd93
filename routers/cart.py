# Ver/editar carrito. El checkout es solo un aviso "Coming Soon".

import logging

from fastapi import APIRouter, Request, Depends, Form, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse

from catalog import get_product
from templates_engine import render
from utils.cart import CartStore, find_cart_store, get_cart_store, total_item_count, total_cost
from utils.flash import flash
from utils.i18n import t

log = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["Cart"])


def _cart_context(store: CartStore) -> dict:
    state = store.state
    return {
        "lines": list(state.lines.values()),
        "total_items": total_item_count(state),
        "total": total_cost(state),
    }


# --------- Vistas de carrito ---------

@router.get("/cart", response_class=HTMLResponse)
async def cart_view(request: Request, store: CartStore = Depends(find_cart_store)):
    return render(request, "cart/cart.html", store, _cart_context(store))


@router.post("/cart/add")
async def cart_add(
    request: Request,
    product_id: str = Form(...),
    store: CartStore = Depends(get_cart_store),
):
    product = get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Producto no encontrado")
    store.add_to_cart(product)
    flash(request, t("cart.added"))
    # Redirige a donde venía (referer) o al listado
    referer = request.headers.get("referer") or "/products"
    return RedirectResponse(url=referer, status_code=303)


@router.post("/cart/increase")
async def cart_increase(product_id: str = Form(...), store: CartStore = Depends(get_cart_store)):
    store.increase(product_id)
    return RedirectResponse(url="/cart", status_code=303)


@router.post("/cart/decrease")
async def cart_decrease(product_id: str = Form(...), store: CartStore = Depends(get_cart_store)):
    store.decrease(product_id)
    return RedirectResponse(url="/cart", status_code=303)


@router.post("/cart/remove")
async def cart_remove(product_id: str = Form(...), store: CartStore = Depends(get_cart_store)):
    store.remove_item(product_id)
    return RedirectResponse(url="/cart", status_code=303)


@router.post("/cart/clear")
async def cart_clear_route(store: CartStore = Depends(get_cart_store)):
    store.clear_cart()
    return RedirectResponse(url="/cart", status_code=303)


# --------- Checkout (no implementado) ---------

@router.post("/cart/checkout", response_class=HTMLResponse)
async def cart_checkout(request: Request, store: CartStore = Depends(find_cart_store)):
    # No toca el estado ni redirige. Con JS el modal se abre en el navegador y esto
    # no se llama; sin JS se re-renderiza la página con el aviso.
    log.info("[cart] checkout solicitado con %d items (no implementado)", total_item_count(store.state))
    ctx = _cart_context(store)
    ctx["notice"] = t("cart.checkout_soon")
    return render(request, "cart/cart.html", store, ctx, status_code=501)


# --------- JSON ---------

@router.get("/cart.json")
async def cart_json(store: CartStore = Depends(find_cart_store)):
    state = store.state
    items = [{
        "product_id": line.product.id,
        "name": line.product.name,
        "price": line.product.price,
        "qty": line.qty,
        "image_url": line.product.image_url,
        "subtotal": line.line_total,
    } for line in state.lines.values()]
    return {"items": items, "total_items": total_item_count(state), "total": total_cost(state)}


@router.get("/cart/count.json")
async def cart_count(store: CartStore = Depends(find_cart_store)):
    return {"count": total_item_count(store.state)}
