from enum import Enum
from typing import Optional

from meshinstall.configuration import InstallerConfiguration
from meshinstall.installer.abstract import AbstractMeshInstaller
from meshinstall.installer.consul import ConsulBuilder
from meshinstall.installer.istio import IstioBuilder


class MeshType(Enum):
    CONSUL = "consul"
    ISTIO = "istio"


class InstallerFactory:
    def __init__(self):
        self._builders = {}

    def register_builder(self, mesh_type: MeshType, builder):
        self._builders[mesh_type.value] = builder

    def __create(
        self, mesh_type: MeshType, configuration: Optional[InstallerConfiguration], **kwargs
    ):
        builder = self._builders.get(mesh_type.value)
        if not builder:
            raise ValueError(mesh_type)
        return builder(configuration, **kwargs)

    def get(
        self, mesh_type: MeshType, configuration: Optional[InstallerConfiguration], **kwargs
    ) -> AbstractMeshInstaller:
        return self.__create(mesh_type, configuration, **kwargs)


installer_factory = InstallerFactory()
installer_factory.register_builder(MeshType.CONSUL, ConsulBuilder())
installer_factory.register_builder(MeshType.ISTIO, IstioBuilder())
