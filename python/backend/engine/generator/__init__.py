from backend.engine.generator.generator import LayoutGenerator

__all__ = ["LayoutGenerator"]
