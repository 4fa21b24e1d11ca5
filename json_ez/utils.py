from typing import Mapping, TypeVar

D = TypeVar("D", bound=Mapping)


def resolve_config(config: Mapping | None, default_config: D) -> D:
    """Overlay the keys of *config* that *default_config* knows about."""
    resolved = dict(default_config)
    for key, value in (config or {}).items():
        if key in resolved:
            resolved[key] = value
    return resolved  # type: ignore[return-value]
