import logging
from typing import Optional

from meshinstall.cluster.webhook import repair_mutating_webhook
from meshinstall.configuration import InstallerConfiguration
from meshinstall.exceptions import InstallerError, MeshInstallError
from meshinstall.installer.abstract import AbstractMeshInstaller
from meshinstall.types import Install

from .overrides import get_overrides

logger = logging.getLogger(__name__)

CRB_NAME = "consul-crb"
DEFAULT_NAMESPACE = "consul"
WEBHOOK_CFG = "consul-connect-injector-cfg"


class ConsulInstaller(AbstractMeshInstaller):
    mesh_type = "consul"
    default_namespace = DEFAULT_NAMESPACE
    crb_name = CRB_NAME

    def get_overrides_yaml(self, install: Install) -> str:
        return get_overrides(install.encryption)

    def do_pre_helm_install(self) -> None:
        return None

    def do_post_helm_install(
        self, install: Install, config: InstallerConfiguration, release_name: str
    ) -> None:
        if not install.tls_enabled:
            logger.debug("mTLS disabled, connect injector webhook left as is")
            return None
        # the chart prefixes the webhook configuration with the release name
        try:
            repair_mutating_webhook(
                config.K8S_ADMISSION_API,
                release_name,
                WEBHOOK_CFG,
                strict=config.WEBHOOK_REPAIR_STRICT,
            )
        except MeshInstallError as e:
            raise InstallerError(f"Error setting up webhook: {e}") from e


class ConsulBuilder:
    def __call__(self, configuration: Optional[InstallerConfiguration], **_ignored):
        return ConsulInstaller()
