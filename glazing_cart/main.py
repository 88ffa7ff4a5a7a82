from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import cart, modules, quotes

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger("glazing_cart")

app = FastAPI(
    title="Glazing Cart",
    description="Normalizes glazing measurements into calculation-engine project carts and transcodes quotes",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(modules.router, prefix="/api")
app.include_router(cart.router, prefix="/api")
app.include_router(quotes.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "glazing-cart"}
