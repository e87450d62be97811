from dashlib.core.entities import Revenue

__all__ = ["Revenue"]
