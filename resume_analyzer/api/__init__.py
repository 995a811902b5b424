from .router import analysis_router

__all__ = ["analysis_router"]
