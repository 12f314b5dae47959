# different_styles.py

from tabprinter import Alignment, Table, TableStyle

def main():
    for style in TableStyle:
        print(f"{style.name} style:")
        table = Table(style)
        table.add_column("Name", 10, Alignment.LEFT)
        table.add_column("Age", 5, Alignment.RIGHT)
        table.add_column("City", 15, Alignment.CENTER)

        table.add_row(["Alice", "30", "New York"])
        table.add_row(["Bob", "25", "Los Angeles"])

        table.print()
        print("\n")

if __name__ == "__main__":
    main()
