import copy
import logging
from typing import Optional

import kubernetes as k8s
from kubernetes.client import V1MutatingWebhookConfiguration

from meshinstall.exceptions import (
    ClusterError,
    ResourceAlreadyExists,
    ResourceNotFound,
    WebhookRepairError,
)

logger = logging.getLogger(__name__)


def release_qualified_name(release_name: str, name: str) -> str:
    return f"{release_name}-{name}"


def get_fixed_webhook(
    webhook: V1MutatingWebhookConfiguration, name: str
) -> V1MutatingWebhookConfiguration:
    fixed = copy.deepcopy(webhook)
    fixed.metadata.name = name
    # a create must not carry the server-side identity of the original object
    fixed.metadata.resource_version = None
    fixed.metadata.uid = None
    fixed.metadata.creation_timestamp = None
    fixed.metadata.managed_fields = None
    return fixed


def _read_webhook(
    admission_api: k8s.client.AdmissionregistrationV1Api, name: str
) -> Optional[V1MutatingWebhookConfiguration]:
    try:
        return admission_api.read_mutating_webhook_configuration(name=name)
    except k8s.client.exceptions.ApiException as e:
        if e.status == 404:
            return None
        raise ClusterError(
            f"Could not read MutatingWebhookConfiguration {name}: {e.reason} ({e.status})"
        ) from e


def repair_mutating_webhook(
    admission_api: k8s.client.AdmissionregistrationV1Api,
    release_name: str,
    name: str,
    strict: bool = True,
) -> V1MutatingWebhookConfiguration:
    """
    Move a MutatingWebhookConfiguration the chart created as
    "<release_name>-<name>" to its canonical name.

    The configuration is read, recreated under `name` and the release-qualified
    original is deleted afterwards. This is not atomic: if the delete fails both
    configurations stay registered and a WebhookRepairError is raised.

    A missing original raises ResourceNotFound, an existing canonical
    configuration raises ResourceAlreadyExists. With `strict` unset an
    interrupted repair can be run again: a canonical configuration carrying
    the same webhooks as the original is kept, and a missing original is
    accepted when the canonical one is present.
    """
    original_name = release_qualified_name(release_name, name)

    try:
        original = admission_api.read_mutating_webhook_configuration(
            name=original_name
        )
    except k8s.client.exceptions.ApiException as e:
        if e.status != 404:
            raise ClusterError(
                f"Could not read MutatingWebhookConfiguration {original_name}: "
                f"{e.reason} ({e.status})"
            ) from e
        existing = None if strict else _read_webhook(admission_api, name)
        if existing is not None:
            logger.info(
                f"MutatingWebhookConfiguration {name} already in place, nothing to repair"
            )
            return existing
        raise ResourceNotFound(
            f"MutatingWebhookConfiguration {original_name} not found"
        ) from e
    logger.debug(f"Fetched MutatingWebhookConfiguration {original_name}")

    fixed = get_fixed_webhook(original, name)
    try:
        created = admission_api.create_mutating_webhook_configuration(body=fixed)
        logger.debug(f"Created MutatingWebhookConfiguration {name}")
    except k8s.client.exceptions.ApiException as e:
        if e.status != 409:
            raise ClusterError(
                f"Could not create MutatingWebhookConfiguration {name}: "
                f"{e.reason} ({e.status})"
            ) from e
        existing = None if strict else _read_webhook(admission_api, name)
        # a leftover from another release must not replace the chart's webhooks
        if existing is None or existing.webhooks != original.webhooks:
            raise ResourceAlreadyExists(
                f"MutatingWebhookConfiguration {name} already exists"
            ) from e
        logger.warning(
            f"MutatingWebhookConfiguration {name} already exists with the same "
            "webhooks, keeping it"
        )
        created = existing

    try:
        admission_api.delete_mutating_webhook_configuration(name=original_name)
    except k8s.client.exceptions.ApiException as e:
        raise WebhookRepairError(
            f"Could not delete MutatingWebhookConfiguration {original_name}: "
            f"{e.reason} ({e.status}). Both {original_name} and {name} are "
            "registered now, remove one of them manually."
        ) from e
    logger.info(f"MutatingWebhookConfiguration {original_name} renamed to {name}")
    return created
