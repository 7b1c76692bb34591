# jscrawler/crawler/resolver.py
"""
String-level resolution of script references against the page URL.

Works on plain strings rather than :func:`urllib.parse.urljoin` and never
raises: odd input yields a best-effort string.
"""
from __future__ import annotations

_SCHEME_SEP = "://"


def resolve_url(base: str, ref: str) -> str:
    """
    Turn *ref* into an absolute URL relative to *base*.

    * ``http://``/``https://`` references are returned untouched.
    * ``//host/path`` inherits the scheme of *base*.
    * ``/path`` is appended to ``scheme://host`` of *base*; without a
      scheme separator in *base* the reference comes back unresolved.
    * anything else replaces the last path segment of *base*.
    """
    if ref.startswith(("http://", "https://")):
        return ref

    if ref.startswith("//"):
        scheme = "https:" if base.startswith("https://") else "http:"
        return scheme + ref

    base = base.removesuffix("/")
    sep = base.find(_SCHEME_SEP)

    if ref.startswith("/"):
        if sep == -1:
            return ref
        host_start = sep + len(_SCHEME_SEP)
        host_end = base.find("/", host_start)
        if host_end == -1:
            return base + ref
        return base[:host_end] + ref

    # the last slash must lie past "://", otherwise we would cut into the host
    last_slash = base.rfind("/")
    if last_slash > sep + 2:
        base = base[:last_slash]
    return f"{base}/{ref}"


__all__ = ["resolve_url"]
