from backend.engine.oracle.oracle import DistanceOracle

__all__ = ["DistanceOracle"]
