from typing import List

from pydantic import BaseModel, Field

from converter import Direction

class ConversionStats(BaseModel):
    variables: int = Field(0, description="Number of custom property declarations in the output")
    lines: int = Field(0, description="Number of non-blank output lines")


class ThemeConversionResponse(BaseModel):
    success: bool = Field(..., description="False when a recognized color value could not be converted")
    css: str = Field(..., description="The converted stylesheet")
    errors: List[str] = Field(default_factory=list, description="Conversion failures with source line numbers")
    validation_errors: List[str] = Field(default_factory=list, description="Advisory syntax diagnostics; never block conversion")
    stats: ConversionStats = Field(default_factory=ConversionStats)


class ValidationResponse(BaseModel):
    valid: bool
    errors: List[str] = Field(default_factory=list)


class SampleResponse(BaseModel):
    direction: Direction
    css: str
