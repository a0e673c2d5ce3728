"""
Pydantic models for the fitness-age calculator.
"""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Gender = Literal["Male", "Female", "Other"]


class FitnessProfile(BaseModel):
    """Vital signs and activity levels submitted to the fitness-age calculator."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "age": 35,
                "gender": "Male",
                "restingHeartRate": 65,
                "height": 180,
                "weight": 80,
                "waist": 85,
                "cardioMinutes": 150,
                "strengthSessions": 2
            }
        },
    )

    age: int = Field(..., ge=0, description="Chronological age in years")
    gender: Gender
    restingHeartRate: int = Field(..., ge=0, description="Resting heart rate in bpm")
    height: float = Field(..., ge=0, description="Height in cm")
    weight: float = Field(..., ge=0, description="Weight in kg")
    waist: float = Field(..., ge=0, description="Waist circumference in cm")
    cardioMinutes: int = Field(..., ge=0, description="Weekly cardio minutes")
    strengthSessions: int = Field(..., ge=0, description="Weekly strength sessions")


class FitnessAgeResult(BaseModel):
    """Health audit returned by the AI for a FitnessProfile."""

    model_config = ConfigDict(frozen=True)

    fitnessAge: int = Field(..., ge=0)
    analysis: str
    strengths: tuple[str, ...] = Field(..., min_length=1)
    areasForImprovement: tuple[str, ...] = Field(..., min_length=1)
    vo2MaxEstimate: float
    disclaimer: str = Field(..., min_length=1)
