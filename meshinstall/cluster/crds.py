import logging
from typing import Callable, List

import kubernetes as k8s
import yaml

from meshinstall.exceptions import CrdBootstrapError, ClusterError, ManifestError

logger = logging.getLogger(__name__)

CRD_KIND = "CustomResourceDefinition"


def crd_name(crd: dict) -> str:
    return crd["metadata"]["name"]


def crds_from_manifest(manifest: str) -> List[dict]:
    """
    Parse all CustomResourceDefinitions out of a (multi-document) YAML manifest.

    Empty documents and objects of other kinds are skipped.
    """
    try:
        docs = list(yaml.safe_load_all(manifest))
    except yaml.YAMLError as e:
        raise ManifestError(f"Could not parse CRD manifest: {e}") from e
    crds = []
    for doc in docs:
        if not isinstance(doc, dict) or doc.get("kind") != CRD_KIND:
            continue
        if not doc.get("metadata", {}).get("name"):
            raise ManifestError(f"CRD without metadata.name in manifest: {doc}")
        crds.append(doc)
    return crds


def create_crds(
    extension_api: k8s.client.ApiextensionsV1Api, *crds: dict
) -> None:
    """
    Create the given CRDs, treating already registered ones as created.

    Any other API error stops at the failing CRD; CRDs created before it stay
    registered.
    """
    for crd in crds:
        name = crd_name(crd)
        try:
            extension_api.create_custom_resource_definition(body=crd)
            logger.info(f"CRD {name} created")
        except k8s.client.exceptions.ApiException as e:
            if e.status == 409:
                logger.debug(f"CRD {name} already registered")
            else:
                raise CrdBootstrapError(
                    f"Could not create CRD {name}: {e.reason} ({e.status})"
                ) from e


def remove_crds(
    extension_api: k8s.client.ApiextensionsV1Api, predicate: Callable[[str], bool]
) -> List[str]:
    try:
        crd_list = extension_api.list_custom_resource_definition()
    except k8s.client.exceptions.ApiException as e:
        raise ClusterError(f"Error getting CRDs: {e.reason} ({e.status})") from e
    removed = []
    for crd in crd_list.items:
        name = crd.metadata.name
        if not predicate(name):
            continue
        try:
            extension_api.delete_custom_resource_definition(name=name)
        except k8s.client.exceptions.ApiException as e:
            if e.status == 404:
                continue
            raise ClusterError(
                f"Error deleting CRD {name}: {e.reason} ({e.status})"
            ) from e
        logger.info(f"CRD {name} removed")
        removed.append(name)
    return removed
