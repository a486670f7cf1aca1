from backend.engine.gravity.gravity import Gravity

__all__ = ["Gravity"]
