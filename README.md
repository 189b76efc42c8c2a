# msmanager

msmanager is an interactive, bilingual (English / Bahasa Melayu) console program for a small table of the 13 Malaysian states and 3 federal territories. For each one it keeps the name, the year it was created, its area in km² and its population.

## Installation

```
pip install .
```

## Usage

Start the program:

```
msmanager
```

`msmanager --help` prints a short description. The program takes no other options.

A short loading spinner runs first. You then choose a language: 1 for English, 2 for Bahasa Melayu. The main menu offers these choices:

1. Display all records as a coloured table.
2. Sort records by name, creation year, area or population, ascending or descending. Enter `0` to go back. The sorted table is shown straight away.
3. Insert a record. Enter `0` as the name to cancel. The year must be between 1000 and 3000. Names are cut to 49 characters.
4. Delete a record by its exact name. The match is case-sensitive.
5. Search for a record by name. The match ignores case.
6. Generate a CSV report, `report.csv`, in the current directory. On Windows the folder is then opened in Explorer.
0. Exit.

If you type something that is not a number, the program asks again. If you give a number outside the allowed range, it also asks again. The program ends quietly when input runs out.

## Using it as a library

The record store is in `msmanager.data`:

```python
from msmanager.data import SortField, StateRegistry, default_registry

registry = default_registry()          # the 16 built-in records
registry.sort(SortField.POPULATION, ascending=False)
for state in registry:
    print(state.name, state.year, state.area, state.population)

found = registry.search("sabah")       # a State, or None
registry.delete("Labuan")              # True if a record was removed
registry.insert("Example", 2000, 10.0, 1000)
```

`StateRegistry` supports `len()`, iteration, `insert`, `delete`, `sort`, `search` and `clear`. Sorting is stable. An unknown sort field leaves the order unchanged.

`msmanager.helpers` contains:

- `write_report(registry, directory)` writes `report.csv` into the given directory, or into the current directory when the argument is `None`. It returns the file's path. The file has a `Name,Year,Area(km2),Population` header and one row per record, with the name in quotes and the area to one decimal place.
- `Console` reads typed values from any text streams.
- `format_header()` and `format_row(state)` produce the coloured table lines.

`msmanager.main.run(console, registry, report_dir)` runs the menu loop. You can give it your own console, registry and report directory.

## Limitations

Records are held in memory only. Changes made while the program runs are lost when it exits, and every start begins from the 16 built-in records. The CSV report is written out but never read back.

## Running the tests

```
pip install .[test]
pytest
```