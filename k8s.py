# k8s.py
"""Cluster access: credential resolution, client construction, ingress listing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from kubernetes import client, config

from errors import ClientError, ConfigurationError, ListError

IN_CLUSTER = "in-cluster"
KUBECONFIG = "kubeconfig"


@dataclass(frozen=True)
class Credentials:
    source: str  # IN_CLUSTER or KUBECONFIG
    configuration: client.Configuration


def resolve_credentials(kubeconfig: str) -> Credentials:
    """Prefer the pod's service account; fall back to a kubeconfig file.

    When both fail the kubeconfig error is the one reported.
    """
    cfg = client.Configuration()
    try:
        config.load_incluster_config(client_configuration=cfg)
        return Credentials(IN_CLUSTER, cfg)
    except Exception:
        pass

    cfg = client.Configuration()
    try:
        # read-only: refreshed tokens are never written back to the file
        config.load_kube_config(
            config_file=kubeconfig, client_configuration=cfg, persist_config=False
        )
    except Exception as e:
        raise ConfigurationError(e) from e
    return Credentials(KUBECONFIG, cfg)


def new_api_client(creds: Credentials) -> client.ApiClient:
    try:
        return client.ApiClient(creds.configuration)
    except Exception as e:
        raise ClientError(e) from e


def list_ingresses(api_client: client.ApiClient, namespace: str) -> List[dict]:
    """Single list call. An empty namespace lists across all namespaces."""
    networking = client.NetworkingV1Api(api_client)
    try:
        if namespace:
            res = networking.list_namespaced_ingress(namespace)
        else:
            res = networking.list_ingress_for_all_namespaces()
    except Exception as e:
        raise ListError(e) from e
    return [i.to_dict() for i in res.items or []]
