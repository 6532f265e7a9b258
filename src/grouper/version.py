"""Version of the grouper package"""

__all__ = ["version", "version_info"]


version = "1.0.0"

version_info = tuple(map(int, version.split(".")))
