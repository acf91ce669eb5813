# indexnow_sync/runner/context.py
"""
Run context - the values one run threads through walker, differ and submitter.

Resolved once, up front, from the config plus what the build hands over
(output directory, declared site URL). Resolution is where the fatal
preconditions live: no key or no usable site URL means no run.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

from indexnow_sync.cache.store import resolve_cache_path
from indexnow_sync.config.schema import IndexNowConfig
from indexnow_sync.exceptions import ConfigError


def resolve_out_dir(out_dir: str | Path) -> Path:
    """Accept a filesystem path or a file:// URL (as some build hosts pass)."""
    if isinstance(out_dir, str) and out_dir.startswith("file:"):
        parsed = urlparse(out_dir)
        return Path(url2pathname(parsed.path))
    return Path(out_dir)


def resolve_site_url(override: Optional[str], declared: Optional[str]) -> str:
    """
    Pick the site base URL: explicit override first, then the declared site.

    Trailing slashes are stripped so page URLs get a single separator.
    """
    site = override or declared
    if not site:
        raise ConfigError("Missing site URL")

    site = site.rstrip("/")
    parsed = urlparse(site)
    if not parsed.scheme or not parsed.netloc:
        raise ConfigError(f"Site URL must be absolute (scheme and host): {site!r}")
    if parsed.username is not None or parsed.password is not None:
        raise ConfigError("Site URL must not contain credentials")
    try:
        parsed.port
    except ValueError as e:
        raise ConfigError(f"Site URL has an invalid port: {site!r}") from e
    return site


@dataclass(frozen=True)
class RunContext:
    """Immutable per-run values."""

    out_dir: Path
    site_url: str
    key: str
    cache_path: Path

    @property
    def key_location(self) -> str:
        return f"{self.site_url}/{self.key}.txt"

    @property
    def key_file(self) -> Path:
        return self.out_dir / f"{self.key}.txt"

    @classmethod
    def resolve(
        cls,
        config: IndexNowConfig,
        out_dir: str | Path,
        declared_site: Optional[str] = None,
        project_root: Optional[str | Path] = None,
    ) -> "RunContext":
        """
        Build the context, raising ConfigError on a missing key or site URL.

        Nothing on disk is touched here.
        """
        if not config.key:
            raise ConfigError("Missing IndexNow key")

        return cls(
            out_dir=resolve_out_dir(out_dir),
            site_url=resolve_site_url(config.site_url, declared_site),
            key=config.key,
            cache_path=resolve_cache_path(config.cache_dir, project_root),
        )


__all__ = ["RunContext", "resolve_out_dir", "resolve_site_url"]
