from facade.client import Client

__all__ = ["Client"]
