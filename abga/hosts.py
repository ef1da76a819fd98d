from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, FrozenSet, Optional


MONSTERINSIGHTS_CAPABILITY = "MonsterInsights"
ANALYTIFY_TYPE = "WP_Analytify"


class Host(enum.Enum):
    NONE = "none"
    MONSTERINSIGHTS = "monsterinsights"
    ANALYTIFY = "analytify"

    def __bool__(self) -> bool:
        return self is not Host.NONE


class HostUnavailable(RuntimeError):
    """A host was detected but the environment does not expose its settings."""


@dataclass(frozen=True)
class HostEnvironment:
    """
    Capabilities the running platform exposes to this integration.

    `capabilities` holds global function names and `types` holds class
    names, mirroring what the platform can answer "does this exist?" for.
    The two handles are what the option accessors talk to:

    - `monsterinsights_get_option(key, default)` for MonsterInsights
    - `analytify`, the Analytify instance whose `.settings` object has
      `get_option(key, section, default)`
    """

    capabilities: FrozenSet[str] = field(default_factory=frozenset)
    types: FrozenSet[str] = field(default_factory=frozenset)
    monsterinsights_get_option: Optional[Callable[[str, Any], Any]] = None
    analytify: Any = None


@dataclass(frozen=True)
class ActiveHost:
    host: Host
    settings: Any = None

    def __bool__(self) -> bool:
        return bool(self.host)


def detect_host(environment: HostEnvironment) -> Host:
    """
    Return the analytics plugin present in `environment`.

    MonsterInsights wins when both markers are present.
    """
    if MONSTERINSIGHTS_CAPABILITY in environment.capabilities:
        return Host.MONSTERINSIGHTS

    if ANALYTIFY_TYPE in environment.types:
        return Host.ANALYTIFY

    return Host.NONE


def resolve(environment: HostEnvironment) -> ActiveHost:
    """
    Detect the host and bind the settings provider that reads its options.
    """
    # options imports Host from this module.
    from .options import AnalytifySettings, MonsterInsightsSettings

    host = detect_host(environment)

    if host is Host.MONSTERINSIGHTS:
        if environment.monsterinsights_get_option is None:
            raise HostUnavailable(
                "MonsterInsights detected but no option accessor was provided"
            )
        return ActiveHost(
            host, MonsterInsightsSettings(environment.monsterinsights_get_option)
        )

    if host is Host.ANALYTIFY:
        settings = getattr(environment.analytify, "settings", None)
        if settings is None:
            raise HostUnavailable(
                "Analytify detected but its settings object is missing"
            )
        return ActiveHost(host, AnalytifySettings(settings))

    return ActiveHost(Host.NONE)
