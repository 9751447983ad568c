import uuid

from sqlalchemy import JSON, Column, String, Text

from .db import Base
from .schemas import IMAGE_PATH_MAX_LENGTH, NAME_MAX_LENGTH


def new_recipe_id() -> str:
    return uuid.uuid4().hex


class Recipe(Base):
    __tablename__ = "recipes"
    id = Column(String(32), primary_key=True, default=new_recipe_id)
    name = Column(String(NAME_MAX_LENGTH), index=True, nullable=True)
    desc = Column(Text, nullable=True)
    image_path = Column(String(IMAGE_PATH_MAX_LENGTH), nullable=True)
    # parallel lists, same length
    ingredient_ids = Column(JSON, nullable=False, default=list)
    ingredient_amounts_in_gram = Column(JSON, nullable=False, default=list)
