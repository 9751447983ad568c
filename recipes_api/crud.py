import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import models, schemas
from .errors import InvalidRecipeId
from .logger import get_logger

logger = get_logger(__name__)


def parse_recipe_id(recipe_id) -> str:
    """Normalize any UUID spelling to the 32-char hex form used as key."""
    try:
        return uuid.UUID(str(recipe_id)).hex
    except ValueError:
        raise InvalidRecipeId(recipe_id) from None


def _commit(db: Session):
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


def get_recipe(db: Session, recipe_id: str):
    key = parse_recipe_id(recipe_id)
    return db.query(models.Recipe).filter(models.Recipe.id == key).first()


def create_recipe(db: Session, recipe: schemas.RecipeCreate):
    db_recipe = models.Recipe(
        name=recipe.name,
        desc=recipe.desc,
        image_path=recipe.image_path,
        ingredient_ids=list(recipe.ingredient_ids),
        ingredient_amounts_in_gram=list(recipe.ingredient_amounts_in_gram),
    )
    db.add(db_recipe)
    _commit(db)
    db.refresh(db_recipe)
    logger.info("Recipe saved: %s (%s)", db_recipe.name, db_recipe.id)
    return db_recipe


def update_recipe(db: Session, recipe_id: str, recipe: schemas.RecipeUpdate):
    db_recipe = get_recipe(db, recipe_id)
    if not db_recipe:
        return None
    # whole document is replaced, the id stays
    db_recipe.name = recipe.name
    db_recipe.desc = recipe.desc
    db_recipe.image_path = recipe.image_path
    db_recipe.ingredient_ids = list(recipe.ingredient_ids)
    db_recipe.ingredient_amounts_in_gram = list(recipe.ingredient_amounts_in_gram)
    db.add(db_recipe)
    _commit(db)
    db.refresh(db_recipe)
    logger.info("Recipe updated: %s", db_recipe.id)
    return db_recipe


def delete_recipe(db: Session, recipe_id: str):
    """Delete a recipe and return its last state, or None if it is missing."""
    db_recipe = get_recipe(db, recipe_id)
    if not db_recipe:
        return None
    snapshot = schemas.Recipe.model_validate(db_recipe)
    db.delete(db_recipe)
    _commit(db)
    logger.info("Recipe deleted: %s", snapshot.id)
    return snapshot
