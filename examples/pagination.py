# pagination.py

import argparse
from tabprinter import Alignment, Interface, Table, TableStyle

def main():
    parser = argparse.ArgumentParser(description='Page through a generated table')
    parser.add_argument('-n', '--page-size', type=int, default=10,
        help='Rows per page')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')
    args = parser.parse_args()

    ui = Interface(logging_enabled=args.enable_logging, log_file=args.log_file)

    table = Table(TableStyle.GRID)
    table.add_column("ID", 5, Alignment.RIGHT)
    table.add_column("Name", 20, Alignment.LEFT)
    table.add_column("Age", 5, Alignment.CENTER)
    table.add_column("City", 15, Alignment.LEFT)

    for i in range(1, 26):
        table.add_row([i, f"Person {i}", 20 + i % 30, f"City {i % 5 + 1}"])

    ui.page(table, args.page_size)

if __name__ == "__main__":
    main()
