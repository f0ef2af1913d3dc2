from .themeTools import router as themeTools_router

__all__ = ["themeTools_router"]
