"""
Resolution of the default answer suggested by a question.

A default is looked up through an ordered list of providers (explicit override, cached answer, environment variable,
hardcoded fallback). Providers are evaluated lazily and the first one returning a value wins.
"""

from typing import Any, Callable, Mapping, Optional, Sequence

from galileocli.lib.cache import Cache

DefaultProvider = Callable[[], Optional[Any]]


def resolve_default(providers: Sequence[DefaultProvider], skip_empty: bool = False) -> Optional[Any]:
    """
    Returns the value of the first provider that has one

    Parameters
    ----------
    providers: Sequence[DefaultProvider]
        Providers in priority order
    skip_empty: bool
        Also skip falsy values (empty strings, empty lists) and not only None

    Returns
    -------
    Optional[Any]
        The resolved default, None when no provider has a value
    """
    for provider in providers:
        value = provider()
        if value is None or (skip_empty and not value):
            continue
        return value
    return None


def from_value(value: Optional[Any]) -> DefaultProvider:
    return lambda: value


def from_cache(cache: Cache, key: str) -> DefaultProvider:
    return lambda: cache.get_item(key)


def from_env(environ: Mapping[str, str], name: str) -> DefaultProvider:
    return lambda: environ.get(name)
