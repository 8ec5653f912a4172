"""Recognition of OCI registry references."""

from __future__ import annotations

import re


class DetectionError(ValueError):
    """Raised when a source looks like a registry but is not a valid reference."""


_REGISTRIES = [
    re.compile(r"azurecr\.io"),
    re.compile(r"gcr\.io"),
    re.compile(r"registry\.gitlab\.com"),
    re.compile(r"pkg\.dev"),
    re.compile(r"[0-9]{12}\.dkr\.ecr\.[a-z0-9-]*\.amazonaws\.com"),
    re.compile(r"^quay\.io"),
]

_LOCAL_REGISTRY = re.compile(r"(?:::1|127\.0\.0\.1|(?i:localhost)):[0-9]{1,5}")


def contains_oci_registry(src: str) -> bool:
    """True if *src* names a well-known hosted OCI registry."""
    return any(pattern.search(src) for pattern in _REGISTRIES)


def contains_local_registry(src: str) -> bool:
    """True if *src* names a registry on a loopback host with a port."""
    return _LOCAL_REGISTRY.search(src) is not None


def repository_from_url(url: str) -> str:
    """Return *url* with a ``:latest`` tag added when it has none."""
    if ":" in url.split("/")[-1]:
        return url
    return url + ":latest"


class OCIDetector:
    """Turns registry references into ``oci://`` URLs."""

    def detect(self, src: str, pwd: str) -> str | None:
        """Return the ``oci://`` URL for *src*, or None if it is not a registry."""
        if not src:
            return None
        if not (contains_oci_registry(src) or contains_local_registry(src)):
            return None
        if len(src.split("/")) < 2:
            raise DetectionError("detect http: URL is not a valid registry URL")
        return "oci://" + repository_from_url(src)