import copy
from types import SimpleNamespace
from typing import Dict, List, Optional

from kubernetes.client import (
    AdmissionregistrationV1ServiceReference,
    AdmissionregistrationV1WebhookClientConfig,
    ApiException,
    V1MutatingWebhook,
    V1MutatingWebhookConfiguration,
    V1ObjectMeta,
    V1RuleWithOperations,
)

from meshinstall.configuration import InstallerConfiguration


def not_found():
    return ApiException(status=404, reason="Not Found")


def conflict():
    return ApiException(status=409, reason="Conflict")


def make_webhook(
    name: str, resource_version: str = "4711", ca_bundle: str = "Q0EgYnVuZGxl"
):
    return V1MutatingWebhookConfiguration(
        api_version="admissionregistration.k8s.io/v1",
        kind="MutatingWebhookConfiguration",
        metadata=V1ObjectMeta(
            name=name, resource_version=resource_version, uid=f"uid-{name}"
        ),
        webhooks=[
            V1MutatingWebhook(
                name="consul-connect-injector.consul.hashicorp.com",
                admission_review_versions=["v1"],
                side_effects="None",
                client_config=AdmissionregistrationV1WebhookClientConfig(
                    ca_bundle=ca_bundle,
                    service=AdmissionregistrationV1ServiceReference(
                        name="consul-connect-injector-svc",
                        namespace="consul",
                        path="/mutate",
                    ),
                ),
                rules=[
                    V1RuleWithOperations(
                        api_groups=[""],
                        api_versions=["v1"],
                        operations=["CREATE"],
                        resources=["pods"],
                    )
                ],
            )
        ],
    )


class FakeAdmissionApi:
    def __init__(self, *webhooks: V1MutatingWebhookConfiguration):
        self.webhooks: Dict[str, V1MutatingWebhookConfiguration] = {
            w.metadata.name: copy.deepcopy(w) for w in webhooks
        }
        self.delete_error: Optional[ApiException] = None
        self.created: List[V1MutatingWebhookConfiguration] = []
        self._version = 5000

    def read_mutating_webhook_configuration(self, name):
        if name not in self.webhooks:
            raise not_found()
        return copy.deepcopy(self.webhooks[name])

    def create_mutating_webhook_configuration(self, body):
        name = body.metadata.name
        if name in self.webhooks:
            raise conflict()
        if body.metadata.resource_version:
            raise ApiException(
                status=400, reason="resourceVersion should not be set on create"
            )
        self.created.append(copy.deepcopy(body))
        stored = copy.deepcopy(body)
        self._version += 1
        stored.metadata.resource_version = str(self._version)
        self.webhooks[name] = stored
        return copy.deepcopy(stored)

    def delete_mutating_webhook_configuration(self, name):
        if self.delete_error is not None:
            raise self.delete_error
        if name not in self.webhooks:
            raise not_found()
        del self.webhooks[name]


class FakeExtensionApi:
    def __init__(self, *names: str):
        self.crds: Dict[str, dict] = {
            name: {"metadata": {"name": name}} for name in names
        }
        self.create_calls: List[str] = []
        self.errors: Dict[str, ApiException] = {}

    def create_custom_resource_definition(self, body):
        name = body["metadata"]["name"]
        self.create_calls.append(name)
        if name in self.errors:
            raise self.errors[name]
        if name in self.crds:
            raise conflict()
        self.crds[name] = copy.deepcopy(body)
        return body

    def list_custom_resource_definition(self):
        return SimpleNamespace(
            items=[
                SimpleNamespace(metadata=SimpleNamespace(name=name))
                for name in self.crds
            ]
        )

    def delete_custom_resource_definition(self, name):
        if name in self.errors:
            raise self.errors[name]
        if name not in self.crds:
            raise not_found()
        del self.crds[name]


class FakeCustomObjectsApi:
    """
    Serves one SecurityContextConstraints object and rejects writes based on
    a stale resourceVersion, like the API server does.
    """

    def __init__(self, name: str = "anyuid", users: Optional[List[str]] = None):
        self.name = name
        self.scc = {
            "apiVersion": "security.openshift.io/v1",
            "kind": "SecurityContextConstraints",
            "metadata": {"name": name, "resourceVersion": "1"},
            "users": list(users or []),
        }
        # users "someone else" adds right before each of our writes
        self.concurrent_writes: List[List[str]] = []
        self.replace_error: Optional[ApiException] = None
        self.replace_calls = 0

    def _bump(self):
        version = int(self.scc["metadata"]["resourceVersion"]) + 1
        self.scc["metadata"]["resourceVersion"] = str(version)

    def get_cluster_custom_object(self, group, version, plural, name):
        if name != self.name:
            raise not_found()
        return copy.deepcopy(self.scc)

    def replace_cluster_custom_object(self, group, version, plural, name, body):
        self.replace_calls += 1
        if self.replace_error is not None:
            raise self.replace_error
        if self.concurrent_writes:
            self.scc["users"].extend(self.concurrent_writes.pop(0))
            self._bump()
        if body["metadata"]["resourceVersion"] != self.scc["metadata"]["resourceVersion"]:
            raise conflict()
        self.scc = copy.deepcopy(body)
        self._bump()
        return copy.deepcopy(self.scc)


def make_configuration(
    admission_api=None, extension_api=None, custom_object_api=None, **kwargs
) -> InstallerConfiguration:
    config = InstallerConfiguration(**kwargs)
    config.K8S_ADMISSION_API = admission_api or FakeAdmissionApi()
    config.K8S_EXTENSION_API = extension_api or FakeExtensionApi()
    config.K8S_CUSTOM_OBJECT_API = custom_object_api or FakeCustomObjectsApi()
    return config
