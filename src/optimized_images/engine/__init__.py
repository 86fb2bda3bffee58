from .engine import OptimizedImagesEngine
from .expander import VariantExpander

__all__ = ["OptimizedImagesEngine", "VariantExpander"]
