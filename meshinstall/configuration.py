import logging
from os import path
from pathlib import Path
from typing import Optional, Union

from decouple import config

logger = logging.getLogger("meshinstall")

__VERSION__ = "0.4.0"


class InstallerConfiguration(object):
    def __init__(
        self,
        kube_config_file: Optional[Union[str, Path]] = None,
        kube_context: Optional[str] = None,
        scc_name: Optional[str] = None,
        openshift: Optional[bool] = None,
        conflict_retries: Optional[int] = None,
        webhook_repair_strict: Optional[bool] = None,
        release_name: Optional[str] = None,
    ):
        self._kube_config_path = None
        self._kube_context = kube_context
        if kube_config_file:
            self.KUBE_CONFIG_FILE = str(kube_config_file)

        # the security context constraint Istio's service accounts are added to
        self.SCC_NAME = scc_name or config("MESHINSTALL_SCC_NAME", default="anyuid")
        self.OPENSHIFT = (
            openshift
            if openshift is not None
            else config("MESHINSTALL_OPENSHIFT", default=False, cast=bool)
        )
        self.CONFLICT_RETRIES = (
            conflict_retries
            if conflict_retries is not None
            else config("MESHINSTALL_CONFLICT_RETRIES", default=3, cast=int)
        )
        self.WEBHOOK_REPAIR_STRICT = (
            webhook_repair_strict
            if webhook_repair_strict is not None
            else config("MESHINSTALL_WEBHOOK_REPAIR_STRICT", default=True, cast=bool)
        )
        self.RELEASE_NAME = release_name or config(
            "MESHINSTALL_RELEASE_NAME", default="mesh"
        )
        if self.CONFLICT_RETRIES < 1:
            raise ValueError(
                f"MESHINSTALL_CONFLICT_RETRIES must be at least 1, got {self.CONFLICT_RETRIES}"
            )

    @property
    def KUBE_CONTEXT(self):
        return self._kube_context

    @KUBE_CONTEXT.setter
    def KUBE_CONTEXT(self, context):
        self._kube_context = context

    @property
    def KUBE_CONFIG_FILE(self):
        if not self._kube_config_path:
            from kubernetes.config.kube_config import KUBE_CONFIG_DEFAULT_LOCATION

            self.KUBE_CONFIG_FILE = KUBE_CONFIG_DEFAULT_LOCATION
        return self._kube_config_path

    @KUBE_CONFIG_FILE.setter
    def KUBE_CONFIG_FILE(self, kube_config_path):
        if not path.isfile(path.expanduser(kube_config_path)):
            raise RuntimeError(f"KUBE_CONFIG_FILE {kube_config_path} not found.")
        self._kube_config_path = kube_config_path

    def _init_kubeapi(self):
        from kubernetes.client import (
            AdmissionregistrationV1Api,
            ApiextensionsV1Api,
            CustomObjectsApi,
        )
        from kubernetes.config import load_kube_config

        load_kube_config(self.KUBE_CONFIG_FILE, context=self.KUBE_CONTEXT)
        self.K8S_EXTENSION_API = ApiextensionsV1Api()
        self.K8S_ADMISSION_API = AdmissionregistrationV1Api()
        self.K8S_CUSTOM_OBJECT_API = CustomObjectsApi()

    def __getattr__(self, item):
        # only called for missing attributes: the API handles are created on first use
        if item in [
            "K8S_EXTENSION_API",
            "K8S_ADMISSION_API",
            "K8S_CUSTOM_OBJECT_API",
        ]:
            self._init_kubeapi()
            return self.__getattribute__(item)
        raise AttributeError(item)

    def to_dict(self):
        return {k: v for k, v in self.__dict__.items() if k.isupper()}

    def __str__(self):
        return str(self.to_dict())
