from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from meshinstall.configuration import InstallerConfiguration
    from meshinstall.types import Install


class AbstractMeshInstaller(ABC):
    mesh_type = ""
    default_namespace = ""
    crb_name = ""
    use_hardcoded_namespace = False

    def get_default_namespace(self) -> str:
        """
        The namespace the chart release is installed to
        """
        return self.default_namespace

    def get_crb_name(self) -> str:
        """
        The name of the ClusterRoleBinding the chart deployment manages
        """
        return self.crb_name

    @abstractmethod
    def get_overrides_yaml(self, install: "Install") -> str:
        """
        Returns the chart values for this install request with all tokens resolved
        """
        raise NotImplementedError

    @abstractmethod
    def do_pre_helm_install(self) -> None:
        """
        Prepare the cluster before the chart is deployed
        """
        raise NotImplementedError

    @abstractmethod
    def do_post_helm_install(
        self,
        install: "Install",
        config: "InstallerConfiguration",
        release_name: str,
    ) -> None:
        """
        Fix up resources the chart deployment created
        """
        raise NotImplementedError

    def do_post_helm_uninstall(self) -> None:
        """
        Clean up after the chart release was removed
        """
        return None
