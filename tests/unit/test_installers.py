from unittest.mock import MagicMock

import pytest
from kubernetes.client import ApiException

from meshinstall.api import get_installer
from meshinstall.exceptions import InstallerError
from meshinstall.installer import MeshType, installer_factory
from meshinstall.installer.consul import WEBHOOK_CFG, ConsulInstaller
from meshinstall.installer.istio import SERVICE_ACCOUNTS, IstioInstaller
from meshinstall.types import Encryption, Install

from tests.utils import (
    FakeAdmissionApi,
    FakeCustomObjectsApi,
    FakeExtensionApi,
    make_configuration,
    make_webhook,
)


def test_installer_metadata():
    consul = ConsulInstaller()
    istio = IstioInstaller(extension_api=None)
    assert consul.get_default_namespace() == "consul"
    assert consul.get_crb_name() == "consul-crb"
    assert istio.get_default_namespace() == "istio-system"
    assert istio.get_crb_name() == "istio-crb"
    assert istio.use_hardcoded_namespace is False


def test_factory_dispatch():
    config = make_configuration()
    assert isinstance(installer_factory.get(MeshType.CONSUL, config), ConsulInstaller)
    istio = installer_factory.get(MeshType.ISTIO, config)
    assert isinstance(istio, IstioInstaller)
    assert istio.extension_api is config.K8S_EXTENSION_API
    assert istio.security_api is None


def test_factory_openshift():
    config = make_configuration(openshift=True, scc_name="privileged")
    istio = installer_factory.get(MeshType.ISTIO, config)
    assert istio.security_api is config.K8S_CUSTOM_OBJECT_API
    assert istio.scc_name == "privileged"


def test_unknown_mesh():
    with pytest.raises(ValueError) as e:
        get_installer("linkerd", make_configuration())
    assert "consul, istio" in str(e.value)


def test_consul_pre_install_is_a_noop():
    assert ConsulInstaller().do_pre_helm_install() is None


def test_consul_post_install_without_tls_leaves_webhook():
    admission = FakeAdmissionApi(make_webhook(f"mesh-{WEBHOOK_CFG}"))
    config = make_configuration(admission_api=admission)
    ConsulInstaller().do_post_helm_install(
        Install(mesh="consul", encryption=Encryption(tls_enabled=False)), config, "mesh"
    )
    ConsulInstaller().do_post_helm_install(Install(mesh="consul"), config, "mesh")
    assert list(admission.webhooks) == [f"mesh-{WEBHOOK_CFG}"]


def test_consul_post_install_repairs_webhook():
    admission = FakeAdmissionApi(make_webhook(f"relA-{WEBHOOK_CFG}"))
    config = make_configuration(admission_api=admission)
    ConsulInstaller().do_post_helm_install(
        Install(mesh="consul", encryption=Encryption(tls_enabled=True)), config, "relA"
    )
    assert list(admission.webhooks) == [WEBHOOK_CFG]


def test_consul_post_install_error():
    config = make_configuration(admission_api=FakeAdmissionApi())
    with pytest.raises(InstallerError) as e:
        ConsulInstaller().do_post_helm_install(
            Install(mesh="consul", encryption=Encryption(tls_enabled=True)),
            config,
            "relA",
        )
    assert str(e.value).startswith("Error setting up webhook")


def test_istio_pre_install_creates_crds():
    extension = FakeExtensionApi()
    installer = IstioInstaller(extension_api=extension)
    installer.do_pre_helm_install()
    assert len(extension.crds) == len(installer.crds) == 16
    # second run only meets existing definitions
    installer.do_pre_helm_install()
    assert len(extension.crds) == 16


def test_istio_pre_install_grants_service_accounts():
    security = FakeCustomObjectsApi(users=["system:admin"])
    installer = IstioInstaller(
        extension_api=FakeExtensionApi(), security_api=security
    )
    installer.do_pre_helm_install()
    assert security.scc["users"][0] == "system:admin"
    assert security.scc["users"][1:] == [
        f"system:serviceaccount:istio-system:{sa}" for sa in SERVICE_ACCOUNTS
    ]


def test_istio_pre_install_crd_error_skips_grant():
    extension = FakeExtensionApi()
    extension.errors["virtualservices.networking.istio.io"] = ApiException(
        status=403, reason="Forbidden"
    )
    security = MagicMock()
    installer = IstioInstaller(extension_api=extension, security_api=security)
    with pytest.raises(InstallerError) as e:
        installer.do_pre_helm_install()
    assert "creating istio crds" in str(e.value)
    assert "virtualservices.networking.istio.io" in str(e.value)
    security.get_cluster_custom_object.assert_not_called()


def test_istio_pre_install_grant_error():
    installer = IstioInstaller(
        extension_api=FakeExtensionApi(),
        security_api=FakeCustomObjectsApi(name="restricted"),
    )
    with pytest.raises(InstallerError) as e:
        installer.do_pre_helm_install()
    assert "anyuid" in str(e.value)


def test_offline_istio_installer_cannot_touch_the_cluster():
    installer = get_installer("istio", make_configuration(), offline=True)
    with pytest.raises(InstallerError):
        installer.do_pre_helm_install()
    with pytest.raises(InstallerError):
        installer.remove_crds()


def test_istio_hooks_after_install():
    extension = FakeExtensionApi()
    installer = IstioInstaller(extension_api=extension)
    installer.do_pre_helm_install()
    installer.do_post_helm_install(Install(mesh="istio"), make_configuration(), "mesh")
    installer.do_post_helm_uninstall()
    # the CRDs survive an uninstall
    assert len(extension.crds) == 16
    assert len(installer.remove_crds()) == 16
    assert extension.crds == {}


def test_consul_post_install_keeps_stale_webhook_visible():
    admission = FakeAdmissionApi(
        make_webhook(WEBHOOK_CFG, resource_version="1", ca_bundle="U1RBTEU="),
        make_webhook(f"relA-{WEBHOOK_CFG}"),
    )
    config = make_configuration(admission_api=admission)
    with pytest.raises(InstallerError) as e:
        ConsulInstaller().do_post_helm_install(
            Install(mesh="consul", encryption=Encryption(tls_enabled=True)),
            config,
            "relA",
        )
    assert "already exists" in str(e.value)
    assert sorted(admission.webhooks) == [WEBHOOK_CFG, f"relA-{WEBHOOK_CFG}"]
