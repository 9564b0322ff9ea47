"""Demo metadata value objects."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PatternCategory(str, Enum):
    """Pattern category enumeration."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"
    PRINCIPLES = "principles"


class DemoInfo(BaseModel):
    """Descriptive metadata for a registered demo."""
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    name: str = Field(..., min_length=1, description="Registry key, e.g. 'observer'")
    title: str = Field(..., description="Human-readable pattern name")
    category: PatternCategory
    summary: str = Field("", description="One-line description of the pattern")
