from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

NAME_MAX_LENGTH = 200
IMAGE_PATH_MAX_LENGTH = 500


class RecipeFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(
        None, max_length=NAME_MAX_LENGTH, json_schema_extra={"example": "Scrambled Eggs"}
    )
    desc: Optional[str] = Field(
        None, json_schema_extra={"example": "4 eggs, salt, pepper"}
    )
    image_path: Optional[str] = Field(
        None,
        alias="imagePath",
        max_length=IMAGE_PATH_MAX_LENGTH,
        json_schema_extra={"example": "../images/scrambled_eggs.jpg"},
    )
    ingredient_ids: List[StrictInt] = Field(
        default_factory=list,
        alias="ingredientIds",
        json_schema_extra={"example": [100001, 100002, 100003]},
    )
    ingredient_amounts_in_gram: List[StrictInt] = Field(
        default_factory=list,
        alias="ingredientAmountsInGram",
        json_schema_extra={"example": [50, 1400, 360]},
    )

    @model_validator(mode="after")
    def check_parallel_ingredients(self):
        if len(self.ingredient_ids) != len(self.ingredient_amounts_in_gram):
            raise ValueError(
                "ingredientIds and ingredientAmountsInGram must have the same length "
                f"(got {len(self.ingredient_ids)} and {len(self.ingredient_amounts_in_gram)})"
            )
        return self


class RecipeCreate(RecipeFields):
    name: str = Field(..., max_length=NAME_MAX_LENGTH, json_schema_extra={"example": "Scrambled Eggs"})


class RecipeUpdate(RecipeFields):
    """Replacement document: fields left out are cleared, not kept."""


class Recipe(RecipeFields):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str = Field(..., json_schema_extra={"example": "6486e12e1848915af487e38d6486e12e"})


class RecipeEnvelope(BaseModel):
    recipe: Recipe


class ErrorResponse(BaseModel):
    detail: str
