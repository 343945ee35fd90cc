from spacex.client import SpaceXClient

__all__ = ["SpaceXClient"]
