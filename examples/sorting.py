# sorting.py

from tabprinter import Alignment, Table, TableStyle

def main():
    table = Table(TableStyle.ROUND)
    table.add_column("Name", alignment=Alignment.LEFT)
    table.add_column("Age", alignment=Alignment.RIGHT)
    table.add_column("City", alignment=Alignment.LEFT)

    table.add_rows([
        ["Charlie", "35", "Chicago"],
        ["Alice", "30", "New York"],
        ["Bob", "25", "Los Angeles"],
        ["Dave", "09", "Boston"],
    ])

    print("Sorted by name:")
    table.sort_by_column(0)
    table.print()

    # Ages are zero padded so their text order is their numeric order
    print("\nSorted by age, descending:")
    table.sort_by_column(1, ascending=False)
    table.print()

    print("\nOver 28:")
    table.filter(lambda row: row[1] > "28").print()

if __name__ == "__main__":
    main()
