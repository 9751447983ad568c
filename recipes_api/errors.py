from fastapi import HTTPException, status


class InvalidRecipeId(ValueError):
    """The given identifier is not a recipe id at all."""

    def __init__(self, recipe_id):
        self.recipe_id = recipe_id
        super().__init__(f"Invalid recipe id: {recipe_id}")


class RecipeNotFoundException(HTTPException):
    def __init__(self):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe does not exist.")
