import logging
from typing import List, Optional

import kubernetes as k8s

from meshinstall.cluster.crds import create_crds, crds_from_manifest, remove_crds
from meshinstall.cluster.security import add_scc_to_users, service_account_user
from meshinstall.configuration import InstallerConfiguration
from meshinstall.exceptions import InstallerError, MeshInstallError
from meshinstall.installer.abstract import AbstractMeshInstaller
from meshinstall.types import Install

from .crds import ISTIO_CRD_YAML
from .overrides import get_overrides

logger = logging.getLogger(__name__)

CRB_NAME = "istio-crb"
DEFAULT_NAMESPACE = "istio-system"
CRD_GROUP_SUFFIX = "istio.io"

SERVICE_ACCOUNTS = [
    "default",
    "istio-ingress-service-account",
    "prometheus",
    "istio-egressgateway-service-account",
    "istio-citadel-service-account",
    "istio-ingressgateway-service-account",
    "istio-cleanup-old-ca-service-account",
    "istio-mixer-post-install-account",
    "istio-mixer-service-account",
    "istio-pilot-service-account",
    "istio-sidecar-injector-service-account",
    "istio-galley-service-account",
]


def is_istio_crd(name: str) -> bool:
    return name.endswith(f".{CRD_GROUP_SUFFIX}")


class IstioInstaller(AbstractMeshInstaller):
    mesh_type = "istio"
    default_namespace = DEFAULT_NAMESPACE
    crb_name = CRB_NAME

    def __init__(
        self,
        extension_api: Optional[k8s.client.ApiextensionsV1Api],
        security_api: Optional[k8s.client.CustomObjectsApi] = None,
        scc_name: str = "anyuid",
        conflict_retries: int = 3,
    ):
        self.extension_api = extension_api
        self.security_api = security_api
        self.scc_name = scc_name
        self.conflict_retries = conflict_retries
        self.crds: List[dict] = crds_from_manifest(ISTIO_CRD_YAML)

    def get_overrides_yaml(self, install: Install) -> str:
        return get_overrides(install.encryption)

    def do_pre_helm_install(self) -> None:
        if self.extension_api is None:
            raise InstallerError("creating istio crds: CRD client not provided")
        try:
            create_crds(self.extension_api, *self.crds)
        except MeshInstallError as e:
            raise InstallerError(f"creating istio crds: {e}") from e
        if self.security_api is None:
            return None
        users = [
            service_account_user(self.default_namespace, sa) for sa in SERVICE_ACCOUNTS
        ]
        try:
            add_scc_to_users(
                self.security_api,
                self.scc_name,
                *users,
                retries=self.conflict_retries,
            )
        except MeshInstallError as e:
            raise InstallerError(
                f"adding istio service accounts to {self.scc_name}: {e}"
            ) from e

    def do_post_helm_install(
        self, install: Install, config: InstallerConfiguration, release_name: str
    ) -> None:
        return None

    def do_post_helm_uninstall(self) -> None:
        # networking CRDs stay registered, other components depend on them
        logger.debug("Leaving istio CRDs registered")
        return None

    def remove_crds(self) -> List[str]:
        if self.extension_api is None:
            raise InstallerError("CRD client not provided")
        return remove_crds(self.extension_api, is_istio_crd)


class IstioBuilder:
    def __call__(
        self,
        configuration: Optional[InstallerConfiguration],
        offline: bool = False,
        **_ignored,
    ):
        # offline installers only render overrides and never talk to the cluster
        if offline:
            return IstioInstaller(extension_api=None)
        security_api = None
        if configuration.OPENSHIFT:
            security_api = configuration.K8S_CUSTOM_OBJECT_API
        return IstioInstaller(
            extension_api=configuration.K8S_EXTENSION_API,
            security_api=security_api,
            scc_name=configuration.SCC_NAME,
            conflict_retries=configuration.CONFLICT_RETRIES,
        )
