import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from redis.exceptions import RedisError

from healthy_chat.config import ALLOWED_ORIGINS, RECIPES_PATH
from healthy_chat.dependencies import get_recipe_catalog
from healthy_chat.routes import chat_routes, recipe_routes
from healthy_chat.services.recipe_catalog import load_recipes

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Seed the catalog on first start, the way the site seeds its database
    catalog = get_recipe_catalog()
    try:
        if not catalog.all():
            result = catalog.upsert(load_recipes(RECIPES_PATH))
            logger.info("Seeded recipe catalog from %s: %s", RECIPES_PATH, result)
    except RedisError:
        logger.error("Could not reach Redis to seed the recipe catalog", exc_info=True)
    yield


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,  # your frontend origin(s)
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include Routers
app.include_router(chat_routes.router, prefix="/api/chat", tags=["Chat"])
app.include_router(recipe_routes.router, prefix="/api/recipes", tags=["Recipes"])


@app.get("/")
def read_root():
    return {"message": "Healthy Recipes assistant running!"}
