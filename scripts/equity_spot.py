#!/usr/bin/env python3
"""Estimate equity and outs for a poker spot."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from eqtrainer.config import EquityConfig
from eqtrainer.errors import EquityError
from eqtrainer.game.cards import parse_cards
from eqtrainer.game.equity import EquityCalculator, HandRequest
from eqtrainer.game.outs import compute_outs, current_best
from eqtrainer.game.streets import BOARD_LIMITS, GameVariant, Street


def main():
    parser = argparse.ArgumentParser(
        description="Estimate hero equity, hand distribution and outs"
    )
    parser.add_argument(
        "-H", "--hero",
        required=True,
        help="Hero hole cards (e.g., 'AsAh' or 'As Ah Kd Kc')",
    )
    parser.add_argument(
        "-b", "--board",
        default="",
        help="Board cards (e.g., 'AdKd2c'), empty for preflop",
    )
    parser.add_argument(
        "-g", "--game",
        choices=["holdem", "omaha"],
        default="holdem",
        help="Game variant (default: holdem)",
    )
    parser.add_argument(
        "-n", "--opponents",
        type=int,
        default=1,
        help="Number of random opponents, 1-9 (default: 1)",
    )
    parser.add_argument(
        "-m", "--mode",
        choices=["fast", "accurate"],
        default="accurate",
        help="Accuracy mode (default: accurate)",
    )
    parser.add_argument(
        "-i", "--iterations",
        type=int,
        help="Iteration budget, overrides --mode",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible results",
    )
    parser.add_argument(
        "--split-ties",
        action="store_true",
        help="Credit 1/N of a pot for N-way ties instead of half",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()
    console = Console()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    config = EquityConfig.from_env()
    if args.split_ties:
        config.split_ties = True

    try:
        hero = parse_cards(args.hero)
        board = parse_cards(args.board)
        variant = GameVariant.from_string(args.game)
        street = _street_for_board(len(board))
        request = HandRequest(
            hero_cards=hero,
            board_cards=board,
            variant=variant,
            opponent_count=args.opponents,
            iterations=args.iterations or config.iterations_for(args.mode),
            street=street,
        )

        console.print(f"[bold]Game:[/] {variant.value}")
        console.print(f"[bold]Hero:[/] {' '.join(c.pretty for c in hero)}")
        board_display = " ".join(c.pretty for c in board) or "-"
        console.print(f"[bold]Board:[/] {board_display} ({street.name.lower()})")
        console.print(f"[bold]Opponents:[/] {args.opponents}")
        console.print()

        with console.status("[bold]Simulating...[/]"):
            calculator = EquityCalculator(config=config)
            equity = calculator.compute(request, rng=args.seed)
            outs = compute_outs(request, config=config)
        best = current_best(hero, board, variant, calculator.evaluator)
    except EquityError as e:
        console.print(f"[red]{e}[/]")
        return 1

    if best is not None:
        console.print(f"[bold]Made hand:[/] {best.category.label}")
    console.print(f"[bold]Equity:[/] [green]{equity.equity:.1%}[/]")
    console.print(f"[bold]Ties:[/] {equity.tie_probability:.1%}")
    console.print(
        f"[dim]{equity.trials} trials, {equity.strategy.value.replace('_', ' ')}[/]"
    )
    if street is not Street.RIVER and street is not Street.PREFLOP:
        console.print(
            f"[bold]Outs:[/] {outs.outs_count} of {outs.remaining} "
            f"({outs.outs_percentage:.1%})"
        )
    console.print()

    _display_distribution(console, equity.labeled_distribution)
    return 0


def _street_for_board(size: int) -> Street:
    """Earliest street whose board limit fits size cards."""
    for street, limit in BOARD_LIMITS.items():
        if size <= limit:
            return street
    return Street.RIVER


def _display_distribution(console: Console, distribution: dict[str, float]):
    """Display the hero's final hand categories."""
    table = Table(title="Hero Final Hand")
    table.add_column("Category", style="cyan")
    table.add_column("Probability", justify="right")

    for label, prob in reversed(list(distribution.items())):
        style = "dim" if prob == 0 else ""
        table.add_row(label, f"{prob:.1%}", style=style)

    console.print(table)


if __name__ == "__main__":
    sys.exit(main())
