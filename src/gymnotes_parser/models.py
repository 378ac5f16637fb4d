"""
Data models

Pydantic models for parsed workout entries, plans, and the exercise catalog.
Range checks are deliberately left to the validator so that out-of-range
values are reported, not raised.
"""

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

WeightUnit = Literal["kg", "lbs"]
Difficulty = Literal["beginner", "intermediate", "advanced"]
Category = Literal["chest", "back", "legs", "shoulders", "arms", "core", "cardio"]
Equipment = Literal["barbell", "dumbbell", "bodyweight", "machine", "cable", "kettlebell"]
StrategyName = Literal[
    "detailed",
    "standard",
    "flexible",
    "compact",
    "natural_language",
    "context",
    "ai",
]


class ExerciseDefinition(BaseModel):
    """A single catalog entry. Immutable once loaded."""
    model_config = ConfigDict(frozen=True)

    key: str
    name: str = Field(..., description="Canonical display name, e.g. 'Bench Press'")
    category: Category
    equipment: Optional[Equipment] = None
    aliases: Tuple[str, ...] = Field(default_factory=tuple, description="Lower-cased aliases")
    glyph: Optional[str] = None


class ParsedEntry(BaseModel):
    """Structured result of parsing one line of workout text."""
    exercise: str = Field(..., description="Canonical exercise name after normalization")
    sets: int = 1
    reps: int = 1
    weight: Optional[float] = None
    unit: WeightUnit = "kg"
    rpe: Optional[int] = None
    rest_seconds: Optional[int] = None
    tempo: Optional[str] = None  # e.g. "3-1-1" or "3010"
    notes: Optional[str] = None
    strategy: Optional[StrategyName] = Field(
        default=None, description="Grammar that produced this entry"
    )


class PlanDay(BaseModel):
    """One training day of an imported plan."""
    name: str
    exercises: List[ParsedEntry] = Field(default_factory=list)


class ParsedPlan(BaseModel):
    """Structured result of segmenting a pasted multi-line plan."""
    name: str = "My Workout Plan"
    description: Optional[str] = None
    days: List[PlanDay] = Field(default_factory=list)
    estimated_difficulty: Difficulty = "beginner"

    @property
    def exercise_count(self) -> int:
        return sum(len(day.exercises) for day in self.days)


class ValidationResult(BaseModel):
    """Outcome of range/shape checks. Never raised."""
    ok: bool = True
    errors: List[str] = Field(default_factory=list)


class LineParseResult(BaseModel):
    """Single-entry parse outcome handed to the entry screen."""
    success: bool
    entry: Optional[ParsedEntry] = None
    errors: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class PlanParseResult(BaseModel):
    """Plan import outcome handed to the onboarding flow."""
    success: bool
    plan: Optional[ParsedPlan] = None
    errors: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
