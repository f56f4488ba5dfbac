from backend.engine.neighborhood.neighborhood import Neighborhood

__all__ = ["Neighborhood"]
