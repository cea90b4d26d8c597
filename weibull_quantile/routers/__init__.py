from .quantile import router as quantile_router

__all__ = ['quantile_router']
