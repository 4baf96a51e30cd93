import logging
from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv())  # antes de leer config

from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware
from starlette.staticfiles import StaticFiles

from config import SESSION_SECRET, LOG_LEVEL, ENV, STORE_NAME, log_level
from routers import cart, public
from utils.cart import CartRegistry

log = logging.getLogger("uvicorn.error")
log.setLevel(log_level(LOG_LEVEL))

BASE_DIR = Path(__file__).resolve().parent

# Comandos varios
# source .venv/bin/activate
# uvicorn main:app --reload


# --- Ciclo de vida ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("%s arrancando (ENV=%s)", STORE_NAME, ENV)
    yield
    # los carritos viven solo en memoria: se pierden al apagar
    log.info("%s apagando, %d carritos descartados", STORE_NAME, len(app.state.carts))


app = FastAPI(title=STORE_NAME, lifespan=lifespan)

# Un único registro de carritos por proceso
app.state.carts = CartRegistry()

app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET)

# --- Static ---
app.mount(
    "/static",
    StaticFiles(directory=str(BASE_DIR / "static")),
    name="static")


# ruta de prueba para verificar que la app que corre es esta
@app.get("/ping")
def ping():
    return {"ok": True}


app.include_router(cart.router)
app.include_router(public.router)   # último: contiene el fallback


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
