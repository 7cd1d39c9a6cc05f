"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional

from chefmate.domain.MealPlan import MealPlan
from chefmate.domain.Recipe import Recipe
from chefmate.utilities.constants import BUDGETS, DAYS_OF_WEEK, DIFFICULTIES, MEAL_SLOTS, SKILL_LEVELS


def _one_of(values) -> str:
    return r"^(" + "|".join(values) + r")$"


class IngredientInput(BaseModel):
    """Schema for ingredient input validation.

    `item` and `unit` are kept exactly as sent: the shopping list merges on
    them verbatim, so "flour " and "flour" stay separate entries.
    """
    item: str = Field(..., max_length=200)
    # Zero and negative amounts are accepted and summed as given
    amount: float = Field(..., allow_inf_nan=False)
    unit: str = Field("", max_length=50)


class NutritionInput(BaseModel):
    calories: float = Field(0, ge=0)
    protein: float = Field(0, ge=0)
    carbs: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)
    fiber: float = Field(0, ge=0)


class RecipeInput(BaseModel):
    """Schema for a recipe as embedded in a meal plan or sent to the recipe endpoint."""
    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    prep_time: int = Field(0, ge=0)
    cook_time: int = Field(0, ge=0)
    servings: int = Field(1, ge=1, le=50)
    difficulty: str = Field("easy", pattern=_one_of(DIFFICULTIES))
    ingredients: List[IngredientInput] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    nutrition: NutritionInput = Field(default_factory=NutritionInput)
    dietary_restrictions: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('instructions')
    @classmethod
    def validate_instructions(cls, v):
        """Filter out empty steps."""
        return [step.strip() for step in v if step and step.strip()]

    @field_validator('dietary_restrictions')
    @classmethod
    def validate_tags(cls, v):
        return [tag.strip() for tag in v if tag and tag.strip()]

    def to_domain(self) -> Recipe:
        return Recipe.from_dict(self.model_dump())


class NewRecipeInput(RecipeInput):
    """Schema for creating a catalogue recipe."""

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Ensure recipe has at least one ingredient."""
        if not v:
            raise ValueError('Recipe must have at least one ingredient')
        return v


class PreferencesInput(BaseModel):
    dietary_restrictions: List[str] = Field(default_factory=list)
    calorie_goal: int = Field(2000, ge=0, le=10000)
    skill_level: str = Field("intermediate", pattern=_one_of(SKILL_LEVELS))
    prep_time: int = Field(30, ge=0)
    servings: int = Field(2, ge=1, le=50)
    excluded_ingredients: List[str] = Field(default_factory=list)
    budget: str = Field("medium", pattern=_one_of(BUDGETS))
    equipment: List[str] = Field(default_factory=list)


class MealPlanInput(BaseModel):
    """Schema for a meal plan: day -> slot -> recipe (or null)."""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    preferences: PreferencesInput = Field(default_factory=PreferencesInput)
    meals: Dict[str, Dict[str, Optional[RecipeInput]]] = Field(default_factory=dict)

    @field_validator('meals')
    @classmethod
    def validate_meals(cls, v):
        """Only the seven week days and the five meal slots are allowed."""
        for day, slots in v.items():
            if day not in DAYS_OF_WEEK:
                raise ValueError(f"Unknown day: {day}")
            for slot in slots:
                if slot not in MEAL_SLOTS:
                    raise ValueError(f"Unknown meal slot: {slot}")
        return v

    def to_domain(self) -> MealPlan:
        return MealPlan.from_dict(self.model_dump())


class ChatInput(BaseModel):
    """Schema for a chat completion request; unset fields use the configured defaults."""
    prompt: str = Field(..., min_length=1)
    model: Optional[str] = None
    system_prompt: Optional[str] = None
    temperature: Optional[float] = Field(None, ge=0, le=2)

    @field_validator('prompt')
    @classmethod
    def strip_prompt(cls, v):
        if not v.strip():
            raise ValueError('Prompt cannot be empty')
        return v.strip()
