from .requests import ThemeConvertRequest, ThemeValidateRequest
from .responses import ConversionStats, SampleResponse, ThemeConversionResponse, ValidationResponse

__all__ = [
    "ThemeConvertRequest",
    "ThemeValidateRequest",
    "ConversionStats",
    "SampleResponse",
    "ThemeConversionResponse",
    "ValidationResponse",
]
