from .aggregator import FlowCounter

__all__ = ["FlowCounter"]
