import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shopfaster.api import auth, stores, tiles, items, inventory, list_items
from shopfaster.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="ShopFaster API",
    description="Grocery store floor plans and shopping lists",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth.router)
app.include_router(stores.router)
app.include_router(tiles.router)
app.include_router(items.router)
app.include_router(inventory.router)
app.include_router(list_items.router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "version": "0.1.0"}
