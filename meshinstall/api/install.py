import logging
from pathlib import Path
from typing import Callable, List, Optional

from meshinstall.configuration import InstallerConfiguration
from meshinstall.exceptions import InstallerError
from meshinstall.installer import AbstractMeshInstaller, MeshType, installer_factory
from meshinstall.installer.istio import IstioInstaller
from meshinstall.types import Install

from .utils import stopwatch

__all__ = [
    "ChartDeployer",
    "get_installer",
    "overrides",
    "pre_install",
    "install",
    "post_install",
    "post_uninstall",
    "remove_istio_crds",
]

logger = logging.getLogger("meshinstall")

# (namespace, release_name, overrides_yaml); deploys the mesh chart
ChartDeployer = Callable[[str, str, str], None]


def get_installer(
    mesh: str, config: Optional[InstallerConfiguration], offline: bool = False
) -> AbstractMeshInstaller:
    try:
        mesh_type = MeshType(mesh)
    except ValueError:
        raise ValueError(
            f"Mesh {mesh} not supported. Choices are: "
            f"{', '.join(m.value for m in MeshType)}"
        ) from None
    return installer_factory.get(mesh_type, config, offline=offline)


def _get_config(
    config: Optional[InstallerConfiguration],
    kubeconfig: Optional[Path],
    kubecontext: Optional[str],
) -> InstallerConfiguration:
    if config is not None:
        return config
    return InstallerConfiguration(kube_config_file=kubeconfig, kube_context=kubecontext)


def overrides(install: Install) -> str:
    # rendering values needs neither a cluster nor the environment settings
    installer = get_installer(install.mesh, None, offline=True)
    return installer.get_overrides_yaml(install)


@stopwatch
def pre_install(
    mesh: str,
    config: Optional[InstallerConfiguration] = None,
    kubeconfig: Optional[Path] = None,
    kubecontext: Optional[str] = None,
) -> None:
    config = _get_config(config, kubeconfig, kubecontext)
    installer = get_installer(mesh, config)
    logger.debug(f"Running pre-install for {mesh}")
    installer.do_pre_helm_install()


@stopwatch
def post_install(
    install: Install,
    release_name: Optional[str] = None,
    config: Optional[InstallerConfiguration] = None,
    kubeconfig: Optional[Path] = None,
    kubecontext: Optional[str] = None,
) -> None:
    config = _get_config(config, kubeconfig, kubecontext)
    installer = get_installer(install.mesh, config)
    release_name = release_name or install.release_name or config.RELEASE_NAME
    logger.debug(f"Running post-install for {install.mesh} release {release_name}")
    installer.do_post_helm_install(install, config, release_name)


@stopwatch
def install(
    install: Install,
    deploy_chart: ChartDeployer,
    config: Optional[InstallerConfiguration] = None,
    kubeconfig: Optional[Path] = None,
    kubecontext: Optional[str] = None,
) -> str:
    """
    Install a mesh: prepare the cluster, hand the resolved chart values to
    `deploy_chart` and fix up what the chart created.

    Every phase raises on failure and leaves the cluster as it is; nothing is
    rolled back. Returns the overrides the chart was deployed with.
    """
    config = _get_config(config, kubeconfig, kubecontext)
    installer = get_installer(install.mesh, config)
    namespace = install.namespace or installer.get_default_namespace()
    release_name = install.release_name or config.RELEASE_NAME

    logger.info(f"Preparing cluster for {install.mesh}")
    installer.do_pre_helm_install()

    values = installer.get_overrides_yaml(install)
    logger.info(f"Deploying {install.mesh} chart as {release_name} to {namespace}")
    logger.debug(values)
    deploy_chart(namespace, release_name, values)

    logger.info(f"Finishing {install.mesh} installation")
    installer.do_post_helm_install(install, config, release_name)
    return values


@stopwatch
def post_uninstall(
    mesh: str,
    config: Optional[InstallerConfiguration] = None,
    kubeconfig: Optional[Path] = None,
    kubecontext: Optional[str] = None,
) -> None:
    config = _get_config(config, kubeconfig, kubecontext)
    get_installer(mesh, config).do_post_helm_uninstall()


@stopwatch
def remove_istio_crds(
    config: Optional[InstallerConfiguration] = None,
    kubeconfig: Optional[Path] = None,
    kubecontext: Optional[str] = None,
) -> List[str]:
    config = _get_config(config, kubeconfig, kubecontext)
    installer = get_installer(MeshType.ISTIO.value, config)
    if not isinstance(installer, IstioInstaller):
        raise InstallerError(
            f"Expected an IstioInstaller, got {type(installer).__name__}"
        )
    return installer.remove_crds()
