from backend.engine.gamegenerator.generator import MAX_SHUFFLE_ATTEMPTS, ShuffleGenerator

__all__ = ["MAX_SHUFFLE_ATTEMPTS", "ShuffleGenerator"]
