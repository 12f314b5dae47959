# custom_data.py

from dataclasses import dataclass
from tabprinter import Alignment, Table, TableStyle

@dataclass
class Person:
    name: str
    age: int
    city: str

PEOPLE = [
    Person("Alice", 30, "New York"),
    Person("Bob", 25, "Los Angeles"),
    Person("Charlie", 35, "Chicago"),
]

def main():
    table = Table(TableStyle.FANCY_GRID)
    table.add_column("Name", alignment=Alignment.LEFT)
    table.add_column("Age", alignment=Alignment.RIGHT)
    table.add_column("City", alignment=Alignment.CENTER)

    for person in PEOPLE:
        table.add_row([person.name, person.age, person.city])

    table.print()

if __name__ == "__main__":
    main()
