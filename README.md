# clinicdesk

Record keeping for a small clinic's front desk. Receptionists, examination
rooms and clinical test services are kept in plain text files, one record per
line, with the fields separated by a delimiter (`|` by default). Each line
starts with an id prefix (`TT-` for receptionists, `PHG-` for examination
rooms, `CLS-` for test services), and that prefix tells the loader which kind
of record the line holds.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Records

`clinicdesk.entities` holds three dataclasses:

- `TestService`: `id`, `name`, `cost`
- `RoomExamination`: `id`, `name`, `department_id`, `waiting_count`,
  `examination_fee`, with `add_to_waiting_list()` and
  `remove_from_waiting_list()` to move the waiting count up or down by one
- `Receptionist`: `id`, `name`, `gender`, `address`, `phone`, `dob` (a `Date`),
  `education`, `base_salary`, `subsidies`, `working_days`

## Dates and times

`clinicdesk.date.Date` and `clinicdesk.timeofday.Time` are small value types.
They carry overflowing fields into the next unit, take negative parts as their
absolute value, compare and hash by value, and print in the formats the files
use:

```python
from clinicdesk.date import Date
from clinicdesk.timeofday import Time

str(Date.parse("05/03/2024"))   # "05/03/2024"
str(Date(32, 1, 2024))          # "01/02/2024"
str(Time.parse("09:75:10"))     # "10:15:10"
Time(10, 0, 0) - Time(9, 30, 0) # 1800 (seconds)
```

`Date.today()` and `Time.now()` give the current local date and time.
`Date.from_days(n)` counts `n` days on from 1/1/1, and `Time.from_seconds(n)`
builds a time from a number of seconds. Parsing text that does not fit the
format raises `ValueError`, as does subtracting a later `Time` from an earlier
one.

## Examination states

`clinicdesk.states` describes what may be done with an examination in a given
state. `WaitingState` permits nothing; `TestPendingState` permits prescribing
medicine and ordering clinical tests but not completing. Each state reports its
`StateName` through `state_name()`.

## Querying in-memory collections

`clinicdesk.query` filters, updates and deletes items of a list in place.
Getters and setters may be callables or attribute names:

```python
from clinicdesk.query import query, ComparisonOperator, FilterMode

cheap = query(services).where("cost", 100.0, ComparisonOperator.LT).find()

query(services, FilterMode.OR).where("id", "CLS-001") \
    .where("id", "CLS-002").delete_many()

query(rooms).where("id", "PHG-001").update_one("examination_fee", 50000.0)
```

A value only matches a filter value of exactly the same type; when a getter
returns a value of another type, the query raises `TypeError`.

## New ids

`clinicdesk.ids.create_id` picks the first free number for a printf-style
format, starting at `start_at` (1 by default) and stopping at the first gap.
`id_format` gives the format for a kind of record, named by its class name,
class or an instance:

```python
from clinicdesk.entities import RoomExamination
from clinicdesk.ids import create_id, id_format

create_id(existing_rooms, id_format(RoomExamination))   # e.g. "PHG-004"
```

## Repositories

`clinicdesk.repositories` has `EmployeeRepository` (default file
`employees.txt`), `RoomExaminationRepository` (`rooms.txt`) and
`TestServiceRepository` (`tests.txt`). Each reads its file when it is created,
so the file must already exist, and writes the whole file again after every
change. The file is written to a temporary file first, which then takes the
original file's place.

```python
from clinicdesk.repositories import TestServiceRepository
from clinicdesk.entities import TestService

repo = TestServiceRepository("tests.txt")
repo.add(TestService(id="CLS-010", name="Blood count", cost=150000.0))
repo.remove_by_id("CLS-002")
for service in repo.data():
    print(service.id, service.name, service.cost)
```

Updating a record that does not exist raises `NotFoundError` in the room and
test-service repositories; `EmployeeRepository` leaves its records unchanged
instead, and raises `TypeError` when asked to replace a record with one of a
different class. A file that cannot be opened, or that holds a line with an
unknown prefix, raises `clinicdesk.storage.StorageError`; a line whose number
fields cannot be read raises `ValueError`.

The lower layers are available on their own: `clinicdesk.parsing.ParserFactory`
gives the parser for an id prefix, `clinicdesk.writing.TextWriter` turns a
record back into a line, and `clinicdesk.storage.load_entities` and
`save_entities` read and write whole files.

## What the package does not do

It only reads and writes receptionists, examination rooms and test services.
Doctors, nurses, patients, departments, medicines and medical records have no
record types, parsers or writers here, so lines starting with their prefixes
are rejected as unknown. Of the examination states only waiting and
test-pending are provided. There is no command-line tool and no graphical
interface; the package is a library.