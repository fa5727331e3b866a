#!/usr/bin/env python3
"""
Coin Flip Simulator
Generates coin flips, displays them and counts runs of consecutive
identical outcomes from an interactive menu.
"""

import argparse
import re
import sys
from typing import List, Optional

from flip_analyzer import SEQUENCE_LENGTH, analyze, randomness_checks
from flip_buffer import MAX_FLIPS, MIN_FLIPS, AllocationError, FlipSession
from flip_console import ConsoleSink
from flip_source import RandomOutcomeSource, outcome_label

# =========================
# CONFIG
# =========================

PAUSE_INTERVAL = 20                  # table lines between two pauses


# ==================== INPUT ====================

INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def parse_int(text: str) -> Optional[int]:
    """Plain decimal integer with an optional minus sign, None for anything else"""
    text = text.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    return int(text)


def get_valid_input(sink, minimum: int, maximum: int) -> int:
    """Read integers until one falls inside [minimum, maximum]"""
    while True:
        value = parse_int(sink.read_line())
        if value is not None and minimum <= value <= maximum:
            return value
        sink.write(f"Please enter a number between {minimum} and {maximum}: ", end="")


# ==================== COMMANDS ====================

def display_menu(sink):
    sink.write("================ MAIN MENU ===============")
    sink.write("1 - Generate coin flips")
    sink.write("2 - Display flip results")
    sink.write("3 - Show pattern statistics")
    sink.write("0 - Exit program")
    sink.write("==========================================")


def generate_flips(session: FlipSession, sink) -> int:
    sink.write("How many coin flips would you like to generate?")
    sink.write(f"(Range: {MIN_FLIPS} - {MAX_FLIPS}): ", end="")

    requested_flips = get_valid_input(sink, MIN_FLIPS, MAX_FLIPS)
    session.generate(requested_flips)

    sink.write(f"\nSuccessfully generated {session.num_flips} coin flips!")
    return session.num_flips


def display_flips(session: FlipSession, sink, pause_interval: int = PAUSE_INTERVAL):
    """Print every flip as index | value | label, pausing every `pause_interval` lines"""
    if session.buffer is None:
        sink.write("No flips have been generated yet.")
        return

    flips = session.buffer.tolist()
    num_flips = len(flips)

    for i, flip in enumerate(flips):
        sink.write(f"{i + 1:6d}  |   {flip}   | {outcome_label(flip)}")

        # no pause after the last line, the footer follows directly
        if (i + 1) % pause_interval == 0 and i < num_flips - 1:
            sink.pause()

    sink.write("========================")
    sink.write(f"Total flips displayed: {num_flips}")


def show_statistics(session: FlipSession, sink, extended: bool = False):
    report = analyze(session.buffer)

    if report is None:
        sink.write("No flips have been generated yet.")
        sink.write("Please use option 1 to generate flips first.")
        return

    sink.write("FLIP DISTRIBUTION:")
    sink.write("==================")
    sink.write(f"Total Heads: {report.total_heads} ({report.heads_pct:.1f}%)")
    sink.write(f"Total Tails: {report.total_tails} ({report.tails_pct:.1f}%)")

    sink.write("\nCONSECUTIVE SEQUENCE ANALYSIS:")
    sink.write("==============================")
    sink.write(f"Sequences of {SEQUENCE_LENGTH} consecutive HEADS: {report.heads_run_count}")
    sink.write(f"Sequences of {SEQUENCE_LENGTH} consecutive TAILS: {report.tails_run_count}")
    sink.write(f"Total consecutive sequences found: {report.total_runs}")

    if extended:
        show_randomness_checks(randomness_checks(session.buffer), sink)


def show_randomness_checks(checks: dict, sink):
    sink.write("\nRANDOMNESS CHECKS:")
    sink.write("==================")

    if "error" in checks:
        sink.write(checks["error"])
        return

    monobit = checks["monobit"]
    runs = checks["runs"]
    sink.write(f"Monobit test: z={monobit['z_score']:.4f}, p={monobit['p_value']:.6f}")
    if runs["p_value"] is None:
        sink.write(f"Runs test: {runs['observed']} run(s), not applicable (all flips identical)")
    else:
        sink.write(f"Runs test: observed={runs['observed']}, expected={runs['expected']:.1f}, "
                   f"z={runs['z_score']:.4f}, p={runs['p_value']:.6f}")
    sink.write(f"Shannon entropy: {checks['entropy']:.6f} bits (perfect: 1.000000)")
    sink.write(f"Longest run: HEADS {checks['longest_heads_run']}, TAILS {checks['longest_tails_run']}")


# ==================== MENU LOOP ====================

def run_menu(session: FlipSession, sink, pause_interval: int = PAUSE_INTERVAL, extended: bool = False):
    """Main loop; returns when the user picks 0 or input runs out"""
    sink.clear()

    try:
        while True:
            display_menu(sink)
            sink.write("Enter your choice (0-3): ", end="")
            choice = parse_int(sink.read_line())
            sink.write()

            if choice == 1:
                generate_flips(session, sink)
            elif choice == 2:
                display_flips(session, sink, pause_interval)
            elif choice == 3:
                show_statistics(session, sink, extended)
            elif choice == 0:
                sink.write("Thank you for using the Coin Flip Simulator!")
                return
            else:
                sink.write("Invalid choice. Please try again.")

            sink.pause()
            sink.clear()

    except EOFError:
        sink.write()
        sink.write("Thank you for using the Coin Flip Simulator!")


# ==================== MAIN EXECUTION ====================

def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Simulate coin flips and analyze runs of identical outcomes')
    parser.add_argument('--seed', '-s', type=int, default=None,
                        help='Seed for the random generator (default: current time)')
    parser.add_argument('--pause-interval', '-p', type=positive_int, default=PAUSE_INTERVAL,
                        help='Lines shown between pauses when displaying flips')
    parser.add_argument('--no-clear', action='store_true',
                        help='Do not clear the screen between menu screens')
    parser.add_argument('--extended', '-e', action='store_true',
                        help='Add monobit/runs/entropy checks to the statistics screen')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, sink=None) -> int:
    """Main execution function"""
    args = parse_args(argv)
    if sink is None:
        sink = ConsoleSink(clear_screen=not args.no_clear)

    source = RandomOutcomeSource(args.seed)

    try:
        with FlipSession(source) as session:
            run_menu(session, sink, args.pause_interval, args.extended)
    except AllocationError as e:
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
