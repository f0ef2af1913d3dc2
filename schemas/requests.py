from pydantic import BaseModel, Field

from converter import Direction

class ThemeConvertRequest(BaseModel):
    css: str = Field(..., description="The theme stylesheet (CSS custom properties) to convert")
    direction: Direction = Field(..., description="Conversion direction: v3-to-v4 (HSL to OKLCH) or v4-to-v3 (OKLCH to HSL)")


class ThemeValidateRequest(BaseModel):
    css: str = Field(..., description="The theme stylesheet to check for brace balance and variable syntax")
