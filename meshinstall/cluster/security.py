import logging
from typing import List

import kubernetes as k8s

from meshinstall.exceptions import SecurityGrantError

logger = logging.getLogger(__name__)

SCC_GROUP = "security.openshift.io"
SCC_VERSION = "v1"
SCC_PLURAL = "securitycontextconstraints"


def service_account_user(namespace: str, name: str) -> str:
    return f"system:serviceaccount:{namespace}:{name}"


def add_scc_to_users(
    custom_object_api: k8s.client.CustomObjectsApi,
    scc_name: str,
    *users: str,
    retries: int = 3,
) -> List[str]:
    """
    Append users to a SecurityContextConstraints object.

    The object is read, extended and replaced as a whole. When the replace
    fails with a conflict (someone else updated the object in between) the
    whole cycle is repeated up to `retries` times. Existing users are never
    removed. Returns the resulting user list.
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            scc = custom_object_api.get_cluster_custom_object(
                group=SCC_GROUP,
                version=SCC_VERSION,
                plural=SCC_PLURAL,
                name=scc_name,
            )
        except k8s.client.exceptions.ApiException as e:
            raise SecurityGrantError(
                f"Could not read SecurityContextConstraints {scc_name}: {e.reason} ({e.status})"
            ) from e
        scc["users"] = list(scc.get("users") or []) + list(users)
        try:
            custom_object_api.replace_cluster_custom_object(
                group=SCC_GROUP,
                version=SCC_VERSION,
                plural=SCC_PLURAL,
                name=scc_name,
                body=scc,
            )
        except k8s.client.exceptions.ApiException as e:
            if e.status == 409 and attempt < retries:
                logger.warning(
                    f"Conflict updating SecurityContextConstraints {scc_name}. "
                    f"Retrying ({attempt}/{retries})."
                )
                continue
            raise SecurityGrantError(
                f"Could not update SecurityContextConstraints {scc_name}: {e.reason} ({e.status})"
            ) from e
        logger.info(f"Added {len(users)} user(s) to SecurityContextConstraints {scc_name}")
        return scc["users"]
