from backend.engine.gamegenerator.generator import GameGenerator

__all__ = ["GameGenerator"]
