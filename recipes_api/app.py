from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import crud, schemas
from .config import get_settings
from .db import Database
from .errors import InvalidRecipeId, RecipeNotFoundException
from .logger import get_logger, setup_logging

logger = get_logger(__name__)

NOT_FOUND = {"model": schemas.ErrorResponse, "description": "No recipe for the given id"}
BAD_ID = {"model": schemas.ErrorResponse, "description": "Malformed recipe id"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json_format)
    # Open the database once at startup and hand it to requests via app.state
    database = Database(settings.database_url, echo=settings.debug)
    database.init_db()
    app.state.database = database
    try:
        yield
    finally:
        database.close()


app = FastAPI(title=get_settings().app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()


@app.exception_handler(InvalidRecipeId)
async def invalid_recipe_id_handler(request: Request, exc: InvalidRecipeId):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(
        "Storage error: %s", exc,
        extra={"extra_fields": {"method": request.method, "path": request.url.path}},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage error, please retry later."},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception: %r", exc,
        exc_info=exc,
        extra={"extra_fields": {"method": request.method, "path": request.url.path}},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error."},
    )


@app.get("/health")
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("Health check failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "degraded", "error": str(e)},
        )
    return {"status": "ok", "db": "reachable"}


@app.get(
    "/recipes/{recipe_id}",
    response_model=schemas.RecipeEnvelope,
    responses={400: BAD_ID, 404: NOT_FOUND},
)
def get_recipe(recipe_id: str, db: Session = Depends(get_db)):
    """Finds a recipe by its id."""
    db_recipe = crud.get_recipe(db, recipe_id)
    if not db_recipe:
        logger.info("Recipe not found: %s", recipe_id)
        raise RecipeNotFoundException()
    logger.info("Recipe found: %s", db_recipe.name)
    return {"recipe": db_recipe}


@app.post(
    "/recipes",
    response_model=schemas.Recipe,
    status_code=status.HTTP_201_CREATED,
)
def create_recipe(recipe: schemas.RecipeCreate, db: Session = Depends(get_db)):
    """Adds a recipe. Recipes with the same name are allowed."""
    return crud.create_recipe(db, recipe)


@app.patch(
    "/recipes/{recipe_id}",
    response_model=schemas.Recipe,
    responses={400: BAD_ID, 404: NOT_FOUND},
)
def update_recipe(recipe_id: str, recipe: schemas.RecipeUpdate, db: Session = Depends(get_db)):
    """Replaces every field of a recipe; fields left out of the body are cleared."""
    db_recipe = crud.update_recipe(db, recipe_id, recipe)
    if not db_recipe:
        logger.info("Recipe to update not found: %s", recipe_id)
        raise RecipeNotFoundException()
    return db_recipe


@app.delete(
    "/recipes/{recipe_id}",
    response_model=schemas.Recipe,
    responses={400: BAD_ID, 404: NOT_FOUND},
)
def delete_recipe(recipe_id: str, db: Session = Depends(get_db)):
    """Deletes a recipe and returns what it held."""
    deleted = crud.delete_recipe(db, recipe_id)
    if deleted is None:
        logger.info("Recipe to delete not found: %s", recipe_id)
        raise RecipeNotFoundException()
    return deleted
