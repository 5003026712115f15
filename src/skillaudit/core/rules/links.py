"""Link domain policy."""

from __future__ import annotations

from typing import Iterable
from urllib.parse import urlsplit

DEFAULT_ALLOWED_DOMAINS = (
    "developer.apple.com",
    "swift.org",
    "apple.com",
)


class DomainAllowList:
    """
    Decides whether a link target belongs to the approved domains.

    The default check is a plain substring test against the URL, so a path
    or query that mentions an approved domain is accepted as well. Pass
    ``strict=True`` to compare the parsed hostname instead.
    """

    def __init__(
        self, domains: Iterable[str] = DEFAULT_ALLOWED_DOMAINS, strict: bool = False
    ):
        self.domains = tuple(domains)
        self.strict = strict

    def is_allowed(self, url: str) -> bool:
        return any(domain in url for domain in self.domains)

    def is_allowed_host(self, url: str) -> bool:
        try:
            host = urlsplit(url).hostname
        except ValueError:
            return False
        if not host:
            return False
        return any(
            host == domain or host.endswith("." + domain) for domain in self.domains
        )

    def check(self, url: str) -> bool:
        if self.strict:
            return self.is_allowed_host(url)
        return self.is_allowed(url)

    def __repr__(self) -> str:
        mode = "host" if self.strict else "substring"
        return f"DomainAllowList({list(self.domains)}, mode={mode})"
