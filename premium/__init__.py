"""
Premium ranks — per-player rank levels for named rank categories.

    from premium import RankStore, CommandDispatcher, load_config

    store = RankStore.from_config(load_config())
    dispatcher = CommandDispatcher(store, players=host_players)
    outcome = dispatcher.dispatch(actor, ["upgrade", "vip"])
    print(outcome.text)   # Your vip rank is now: 1

The store picks one of the connectors (sqlite, mysql, postgresql) from
database.type; the dispatcher and suggestion provider only ever talk to
the store.
"""

from .commands import CommandDispatcher, Outcome, Status
from .completion import SuggestionProvider
from .config import Config, load_config
from .errors import BackendConnectionError, ConfigError, PremiumError, UnsupportedBackendError
from .permissions import (
    PERM_CREATE,
    PERM_GET_OTHERS,
    PERM_GET_SELF,
    PERM_UPGRADE,
    Actor,
    PlayerDirectory,
)
from .store import NO_RANK, RankStore

__version__ = "0.1.0"

__all__ = [
    "RankStore",
    "NO_RANK",
    "CommandDispatcher",
    "Outcome",
    "Status",
    "SuggestionProvider",
    "Config",
    "load_config",
    "PremiumError",
    "ConfigError",
    "BackendConnectionError",
    "UnsupportedBackendError",
    "Actor",
    "PlayerDirectory",
    "PERM_CREATE",
    "PERM_UPGRADE",
    "PERM_GET_SELF",
    "PERM_GET_OTHERS",
]
