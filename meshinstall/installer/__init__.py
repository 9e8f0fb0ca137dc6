from .abstract import AbstractMeshInstaller
from .factory import MeshType, installer_factory

__all__ = ["AbstractMeshInstaller", "MeshType", "installer_factory"]
