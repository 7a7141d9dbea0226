#!/usr/bin/env python3
"""Premium console — drive /premium from a terminal.

Usage:
  premium-console                                   # console actor, all permissions
  premium-console --player Steve --uuid <uuid>      # act as an online player
  premium-console --online Alex=<uuid>              # another online player for `get Alex vip`
  premium-console --config ./config.yml -v debug

Then type subcommands, one per line:
  create vip
  upgrade vip
  get vip
  get Alex vip
  get ?            # suggestions instead of running (trailing '?')
"""

import argparse
import sys
import uuid
from dataclasses import dataclass, field
from typing import Optional

from .commands import DEFAULT_LABEL, CommandDispatcher
from .completion import SuggestionProvider
from .config import load_config
from .errors import ConfigError, UnsupportedBackendError
from .log import setup_logging
from .permissions import ALL_PERMISSIONS
from .store import RankStore

EXIT_OK = 0
EXIT_CONFIG = 2


@dataclass
class LocalActor:
    name: str = "CONSOLE"
    player_id: Optional[str] = None
    permissions: frozenset = field(default_factory=lambda: frozenset(ALL_PERMISSIONS))

    def has_permission(self, node: str) -> bool:
        return node in self.permissions


class LocalPlayers:
    """Player directory holding a fixed set of online players."""

    def __init__(self, players=()):
        self._players = {p.name: p for p in players}

    def find_online(self, name):
        return self._players.get(name)

    def online_names(self):
        return list(self._players)


def _split(line: str) -> list[str]:
    """Split a partial command, keeping an empty trailing token after a space."""
    parts = line.split()
    if not line or line[-1].isspace():
        parts.append("")
    return parts


def run(dispatcher, suggester, actor, lines, out=None, label=DEFAULT_LABEL) -> int:
    out = out or sys.stdout
    for raw in lines:
        line = raw.rstrip()
        if not line.strip():
            continue
        if line.strip().lower() in ("quit", "exit"):
            break
        if line.endswith("?"):
            print(" ".join(suggester.suggest(actor, _split(line[:-1].lstrip()))), file=out)
            continue
        outcome = dispatcher.dispatch(actor, line.split(), label)
        for text in outcome.lines:
            print(text, file=out)
    return EXIT_OK


def _player(spec: str) -> LocalActor:
    name, sep, player_id = spec.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=UUID, got {spec!r}")
    try:
        player_id = str(uuid.UUID(player_id))
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a UUID: {player_id!r}")
    return LocalActor(name=name, player_id=player_id)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="premium-console",
        description="Run /premium subcommands against the configured rank store",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", help="Config file (default: $PREMIUM_CONFIG or <data dir>/config.yml)")
    parser.add_argument("--data-dir", help="Data directory (default: $PREMIUM_DATA_DIR or ~/.premium)")
    parser.add_argument("--player", help="Act as this player instead of the console")
    parser.add_argument("--uuid", help="UUID of --player")
    parser.add_argument("--online", action="append", type=_player, default=[],
                        metavar="NAME=UUID", help="Another online player (repeatable)")
    parser.add_argument("--label", default=DEFAULT_LABEL, help="Command label shown in usage")
    parser.add_argument("-v", "--log-level", default="warning", help="debug|info|warning|error or D/I/W/E")
    args = parser.parse_args(argv)

    if bool(args.player) != bool(args.uuid):
        parser.error("--player and --uuid go together")

    setup_logging(args.log_level)

    actor = LocalActor()
    online = list(args.online)
    if args.player:
        try:
            actor = _player(f"{args.player}={args.uuid}")
        except argparse.ArgumentTypeError as e:
            parser.error(str(e))
        online.append(actor)

    try:
        config = load_config(args.config, data_dir=args.data_dir)
        store = RankStore.from_config(config)
    except (ConfigError, UnsupportedBackendError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    players = LocalPlayers(online)
    with store:
        return run(
            CommandDispatcher(store, players, label=args.label),
            SuggestionProvider(store, players),
            actor,
            sys.stdin,
            label=args.label,
        )


if __name__ == "__main__":
    sys.exit(main())
