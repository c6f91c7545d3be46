#!/usr/bin/env python3
import os
from argparse import ArgumentParser

from CSVLoader import CSVLoader
from Contest import Contest


# Applies ranked-choice voting (https://ballotpedia.org/Ranked-choice_voting_(RCV))
# to a csv file of ballots and prints the ranking, one "<position>: <candidate>"
# line per round winner.

def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Rank candidates from a csv file of ranked-choice ballots")
    parser.add_argument("csv_file", nargs="?", help="csv file with one ballot per line")
    parser.add_argument("--stats", action="store_true", help="print ballot statistics", default=False)
    parser.add_argument("--rounds", action="store_true", help="print the tally of every round", default=False)
    parser.add_argument("--pairwise", action="store_true", help="print pairwise comparisons", default=False)
    parser.add_argument("--debug", action="store_true", help="Debug flag", default=False)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.csv_file is None:
        print("Expected CSV file location as argument.")
        return

    full_csv_file = os.path.abspath(args.csv_file)
    if not os.path.isfile(full_csv_file):
        print(f"Expected provided CSV file at {full_csv_file} to exist, but it didn't.")
        return

    loader = CSVLoader(full_csv_file, debug=args.debug)
    contest = Contest(os.path.basename(full_csv_file))
    contest.add_rows(loader.rows)

    if args.stats:
        contest.print_stats()
    if args.pairwise:
        contest.print_pairwise()

    result = contest.run_election(debug=args.debug)
    if args.rounds:
        contest.print_irv_result(result)

    print(result.format_ranking())


if __name__ == "__main__":
    main()
