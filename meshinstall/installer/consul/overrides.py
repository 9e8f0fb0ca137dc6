from typing import Optional

from meshinstall.misc.overrides import render_overrides
from meshinstall.types import Encryption

MTLS_ENABLED = "MTLS_ENABLED"

OVERRIDES_YAML = """
global:
  # soloio/consul:latest provides a 1.4 container, consul:1.3.0 is the
  # latest official one on docker hub
  image: "soloio/consul:latest"
  imageK8S: "hashicorp/consul-k8s:0.2.1"

server:
  replicas: 1
  bootstrapExpect: 1
  connect: @@MTLS_ENABLED@@
  disruptionBudget:
    enabled: false
    maxUnavailable: null

connectInject:
  enabled: @@MTLS_ENABLED@@
"""


def get_overrides(encryption: Optional[Encryption]) -> str:
    # connect and connectInject have no default in the template
    tls_enabled = encryption.tls_enabled if encryption is not None else False
    return render_overrides(OVERRIDES_YAML, {MTLS_ENABLED: tls_enabled})
