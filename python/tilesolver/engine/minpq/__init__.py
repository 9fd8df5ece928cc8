from tilesolver.engine.minpq.heap import HeapMinPQ

__all__ = ["HeapMinPQ"]
