from tilesolver.engine.solver.solver import NodeOrder, Solver

__all__ = ["NodeOrder", "Solver"]
