from __future__ import annotations

import sys

from .cli.analyze_csv import main as analyze_main
from .cli.stats_report import main as stats_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Default behavior: run analysis if no subcommand
    if not argv:
        return analyze_main([])

    # Minimal subcommand router
    cmd = argv[0].lower()
    rest = argv[1:]

    if cmd in {"analyze", "analysis", "arena"}:
        return analyze_main(rest)

    if cmd in {"stats", "statistics"}:
        return stats_main(rest)

    # If user passes flags, treat as analyze
    if cmd.startswith("-"):
        return analyze_main(argv)

    print("Usage:")
    print("  python -m connect4cli_analysis analyze [--csv ...] [--metric ...]")
    print("  python -m connect4cli_analysis stats [--csv connect4_stats.csv]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
