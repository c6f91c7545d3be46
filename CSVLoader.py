import csv
from typing import List


# Each line of the file is one ballot, preferences separated by commas,
# most preferred first:
#
#   person1Vote1,person1Vote2,person1Vote3,...
#   person2Vote1,person2Vote2,...
#
# There is no header row.  Cells are passed through untouched; turning them
# into ballots is up to Contest.  A leading byte order mark is dropped and
# undecodable bytes become U+FFFD.

class CSVLoader(object):
    def __init__(self, csv_file: str, debug: bool = False):
        self.csv_file = csv_file
        self.debug = debug
        self.rows: List[List[str]] = []

        self.load()

    def load(self):
        if self.debug:
            print(f"loading ballots from csv {self.csv_file}")
        with open(self.csv_file, "r", newline="", encoding="utf-8-sig", errors="replace") as f:
            self.rows = [row for row in csv.reader(f)]
        if self.debug:
            print(f"number of rows: {len(self.rows)}")
