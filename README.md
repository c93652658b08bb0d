# unidb

An interactive console database of university students and workers. Each
person is identified by a PESEL number. The database keeps people in memory.
It can search, sort and delete them, and it can save them to a plain-text file
and load them back.

## Installation

```
pip install .
```

## Running

```
unidb
```

The same program also runs with `python -m unidb.menu`. It takes no options
apart from `--help`.

The program prints a menu and then reads one command at a time. It stops on
`q` or at the end of input:

| Command   | Effect              |
|-----------|---------------------|
| `menu`    | Show Menu           |
| `show`    | Print All Records   |
| `load`    | Load Records        |
| `save`    | Save Records        |
| `add`     | Add Student         |
| `search1` | Search              |
| `search2` | Search By Pesel     |
| `sort1`   | Sort By Surname     |
| `sort2`   | Sort By Pesel       |
| `sort3`   | Sort By Income      |
| `del1`    | Delete By Pesel     |
| `del2`    | Delete By Index     |
| `vpesel`  | Validate PESEL      |
| `change`  | Change income       |
| `w`       | Generate Worker     |
| `s`       | Generate Student    |
| `q`       | End Program         |

The printed menu lists every command except `add`, which still works when you
type it.

- `add` asks for each field of a student. After a PESEL fails validation it
  asks whether to try again, and it gives up after three wrong PESELs.
- `change` asks for the PESEL of a worker and then for a new income. A
  negative income is ignored.
- `search1` asks for the field to search by. The field is one of
  `firstname`, `surname`, `city` or `street`.
- `sort3` puts workers first, ordered by ascending income. Students follow
  them.
- `w` and `s` add a worker or a student with random Polish names, a random
  address and a random valid PESEL.
- `save` and `load` use the file `db.txt` in the current directory. `load`
  replaces what is in memory.

The database refuses a person whose PESEL it already holds. In that case it
prints `Person already exist. Adding abort.`

If `load` cannot read the file, it prints `Error! Invalid data.` If the file
holds a record that cannot be read, the program prints the error and exits
with status 1.

## Using the library

```python
from unidb.database import Database
from unidb.gender import Gender
from unidb.person import Address, Student, Worker
from unidb.pesel import check_pesel

db = Database()
db.add_person(
    Student(
        first_name="Anna",
        surname="Nowak",
        address=Address("Gdańsk", "Gdańska", "3a"),
        pesel="00000000000",
        gender=Gender.FEMALE,
        index_number=1001,
    )
)

check_pesel("00000000000")          # True
db.search_by_surname("Nowak")       # [Student(...)]
db.sort_by_pesel(reverse=True)
len(db)                             # 1
db.save_to_file("db.txt")
```

The library is split into these modules:

- `unidb.pesel` provides `check_pesel`, which checks the length, the digits
  and the check digit.
- `unidb.gender` provides the `Gender` enum, `text_to_gender` and
  `translate_gender`.
- `unidb.person` provides the `Address`, `Student` and `Worker` dataclasses.
  Each person has a `print_person` method that writes a card and a `to_record`
  method. This module also has `quote` and `tokenize` for the record format.
- `unidb.database` provides the `Database` class and `read_persons`, which
  parses records.
  - `add_person` adds a person.
  - `search_by_pesel`, `search_by_first_name`, `search_by_surname`,
    `search_by_street` and `search_by_city` find people.
  - `sort_by_pesel`, `sort_by_surname` and `sort_by_income` take a `reverse`
    flag.
  - `delete_by_pesel`, `delete_by_index`, `delete_by_first_name` and
    `delete_by_surname` remove people.
  - `print_all`, `save_to_file` and `load_from_file` print, save and load.
  - The `persons` property holds the people in their current order.
- `unidb.console` and `unidb.commands` hold the console and the interactive
  commands.
- `unidb.menu` provides the `Menu` class and `main`.

A saved record is one line per person, written in UTF-8. String fields are
quoted:

```
STUDENT "Anna" "Nowak" "Gdańsk" "Gdańska" "3a" 1001 "00000000000" Female
WORKER "Jan" "Kowalski" "Kraków" "Krakowska" "1" "11111111116" Male 4200
```

## Limitations

The only kind of person you can type in by hand is a student, using `add`.
To get workers, generate them with `w` or load them from a file. There is no
command to edit a person's fields other than a worker's income.

## Tests

```
pip install .[test]
pytest
```