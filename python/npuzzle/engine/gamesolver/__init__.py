from npuzzle.engine.gamesolver.solver import SearchStats, Solution, Solver

__all__ = ["SearchStats", "Solution", "Solver"]
