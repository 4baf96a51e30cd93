from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse

from catalog import PRODUCTS, categorized_catalog
from templates_engine import render
from utils.cart import CartStore, find_cart_store

router = APIRouter(prefix="", tags=["Public"])


# ---------- LANDING ----------
@router.get("/", name="landing", response_class=HTMLResponse)
async def landing(request: Request, store: CartStore = Depends(find_cart_store)):
    return render(request, "public/landing.html", store)


# ---------- LISTADO DE PRODUCTOS ----------
@router.get("/products", name="products", response_class=HTMLResponse)
async def products_page(request: Request, store: CartStore = Depends(find_cart_store)):
    return render(request, "public/products.html", store, {
        "categories": categorized_catalog(),
        "added": store.state.added,
    })


# JSON para la grilla pública
@router.get("/products.json")
def products_json():
    return [p.model_dump() for p in PRODUCTS]


# ---------- FALLBACK ----------
# Debe registrarse al final: cualquier ruta desconocida muestra el listado.
@router.get("/{full_path:path}", include_in_schema=False, response_class=HTMLResponse)
async def fallback(full_path: str, request: Request, store: CartStore = Depends(find_cart_store)):
    return await products_page(request, store)
