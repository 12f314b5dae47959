# basic_usage.py

import argparse
from tabprinter import Alignment, Table, TableStyle

def main():
    parser = argparse.ArgumentParser(description='Print a small table')
    parser.add_argument('-s', '--style', default='grid',
        choices=[style.value for style in TableStyle],
        help='Border style')
    parser.add_argument('--no-color',
        action='store_true',
        help='Disable colored output')
    args = parser.parse_args()

    table = Table(args.style)
    table.add_column("Name", 10, Alignment.LEFT)
    table.add_column("Age", 5, Alignment.RIGHT)
    table.add_column("City", 15, Alignment.CENTER)

    table.add_row(["Alice", "30", "New York"])
    table.add_row(["Bob", "25", "Los Angeles"])

    table.print(colorized=not args.no_color)

if __name__ == "__main__":
    main()
