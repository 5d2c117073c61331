from .hello import HelloMessageRead

__all__ = ["HelloMessageRead"]
