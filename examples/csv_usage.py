# csv_usage.py

import argparse
import os
from tabprinter import Interface, TableError

DATA = os.path.join(os.path.dirname(__file__), 'data.csv')

def main():
    parser = argparse.ArgumentParser(description='Show a CSV file as a table')
    parser.add_argument('path', nargs='?', default=DATA,
        help='CSV file with a header record')
    parser.add_argument('-s', '--style', default='neon',
        help='Border style')
    parser.add_argument('-o', '--output',
        help='Write the rows back out to this CSV file')
    args = parser.parse_args()

    ui = Interface()
    try:
        table = ui.load_csv(args.path, style=args.style)
    except TableError as e:
        print(f"Error: {e}")
        raise SystemExit(1)

    ui.show(table)
    if args.output:
        table.to_csv(args.output)

if __name__ == "__main__":
    main()
