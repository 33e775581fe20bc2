from .classifier import classify_line, resolve_protocol

__all__ = ["classify_line", "resolve_protocol"]
