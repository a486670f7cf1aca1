from backend.engine.resolver.resolver import MoveResolver

__all__ = ["MoveResolver"]
