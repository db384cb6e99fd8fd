from backend.engine.gamesolver.solvability import inversion_count, is_solvable

__all__ = ["inversion_count", "is_solvable"]
