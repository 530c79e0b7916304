"""
Print player rankings and month history for a user's saved games.

Usage:
    python scripts/stats_report.py --user u1
    python scripts/stats_report.py --user u1 --games-dir data/games --history
    python scripts/stats_report.py --user u1 --config config/default_config.yaml --limit 50
"""
import sys
import argparse
from datetime import datetime
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dartstats.core import Config, DEFAULT_CONFIG_PATH, AccessDenied, TransportFailure
from dartstats.service import StatsService
from dartstats.stats import most_recent_month_key, resolve_timezone
from dartstats.storage import YamlGameStore
import logging

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def print_rankings(rankings) -> None:
    print(f"{'#':>3}  {'Player':<20} {'Games':>5} {'Wins':>5} {'Win%':>6} {'Avg':>6} {'CO%':>6}")
    for position, r in enumerate(rankings, start=1):
        checkout = f"{r.checkout_pct:.1f}" if r.checkout_pct is not None else "-"
        print(
            f"{position:>3}  {r.name:<20} {r.games_played:>5} {r.wins:>5} "
            f"{r.win_pct:>6.1f} {r.avg_per_3:>6.1f} {checkout:>6}"
        )


def print_history(groups, tz) -> None:
    newest = most_recent_month_key(groups)
    for group in groups:
        marker = "*" if group.sort_key == newest else " "
        print(f"{marker} {group.label} ({len(group.games)} games)")
        for game in group.games:
            when = datetime.fromtimestamp(game.timestamp, tz=tz).strftime("%d.%m %H:%M")
            players = ", ".join(
                f"{p.name} {p.legs_won} ({p.average:.2f})" for p in game.players
            )
            print(f"    {when}  {game.game_mode} {game.finish_mode}  winner: {game.winner}  [{players}]")


def main():
    parser = argparse.ArgumentParser(description="Dart statistics report")
    parser.add_argument('--user', required=True, help='User id owning the games')
    parser.add_argument('--config', type=Path, default=DEFAULT_CONFIG_PATH, help="Config YAML")
    parser.add_argument('--games-dir', type=Path, default=None, help='Game store directory')
    parser.add_argument('--limit', type=int, default=None, help='Max games to load')
    parser.add_argument('--history', action='store_true', help='Show month history instead of ranking')
    args = parser.parse_args()

    config = Config(args.config)
    games_dir = args.games_dir or Path(config.get("storage", "games_dir", "data/games"))
    service = StatsService(YamlGameStore(games_dir), config)

    try:
        if args.history:
            tz = resolve_timezone(config.get("history", "timezone", "UTC"))
            print_history(service.month_groups(args.user, args.limit), tz)
        else:
            print_rankings(service.player_rankings(args.user, args.limit))
    except AccessDenied as e:
        logger.error(f"Permission denied: {e}")
        return 2
    except TransportFailure as e:
        logger.error(f"Could not load games: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
