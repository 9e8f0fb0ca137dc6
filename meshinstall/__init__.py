from meshinstall.configuration import __VERSION__

__all__ = ["__VERSION__"]
