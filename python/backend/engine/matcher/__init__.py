from backend.engine.matcher.matcher import Matcher

__all__ = ["Matcher"]
