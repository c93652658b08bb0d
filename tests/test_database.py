import io

import pytest

from unidb.database import Database, read_persons
from unidb.gender import Gender
from unidb.person import Address, Student, Worker

NON_EXIST_PESEL = "90000000000"
EXIST_PESEL_1 = "00000000000"
EXIST_PESEL_2 = "01234567890"
EXIST_PESEL_3 = "11111111111"
PESEL_ORDER = [EXIST_PESEL_1, EXIST_PESEL_2, EXIST_PESEL_3]

ONCE = "onceExistSurName"
TWICE = "twiceExistSurName"
NON_EXIST_SURNAME = "nonExistSurName"
NOT_IMPORTANT = "notImportant"
NAMES = ["Student A", "Student A", "Student CCCCCCCCCCCCCCCCCCCCCCCCCCCCC"]


def _student(name, surname, index, pesel):
    return Student(
        first_name=name,
        surname=surname,
        address=Address(NOT_IMPORTANT, NOT_IMPORTANT, NOT_IMPORTANT),
        pesel=pesel,
        gender=Gender.UNDEFINED,
        index_number=index,
    )


def _students():
    return [
        _student(NAMES[0], ONCE, 0, EXIST_PESEL_1),
        _student(NAMES[1], TWICE, 1, EXIST_PESEL_2),
        _student(NAMES[2], TWICE, 2, EXIST_PESEL_3),
    ]


def _other_student():
    return _student("otherStudentName", "otherStudentSurName", 0, NON_EXIST_PESEL)


def _worker(name, pesel, income, city="Gdańsk"):
    return Worker(
        first_name=name,
        surname="Nowak",
        address=Address(city, "Gdańska", "5/12"),
        pesel=pesel,
        gender=Gender.MALE,
        income=income,
    )


def _filled():
    db = Database()
    for student in _students():
        assert db.add_person(student)
    return db


def test_add_student_to_empty_database():
    db = Database()
    assert db.add_person(_students()[0])
    assert len(db) == 1


def test_add_new_student_to_existing_database():
    db = _filled()
    before = len(db)
    assert db.add_person(_other_student())
    assert len(db) == before + 1


def test_skip_adding_existing_student(capsys):
    db = _filled()
    before = len(db)
    assert not db.add_person(_students()[0])
    assert len(db) == before
    assert "Person already exist. Adding abort." in capsys.readouterr().out


def test_sort_by_surname_ascending():
    db = _filled()
    db.sort_by_surname()
    assert [p.surname for p in db.persons] == [ONCE, TWICE, TWICE]


def test_sort_by_surname_descending():
    db = _filled()
    db.sort_by_surname(reverse=True)
    assert [p.surname for p in db.persons] == [TWICE, TWICE, ONCE]


def test_sort_by_pesel_ascending():
    db = _filled()
    db.sort_by_pesel(reverse=True)
    db.sort_by_pesel()
    assert [p.pesel for p in db.persons] == PESEL_ORDER


def test_sort_by_pesel_descending():
    db = _filled()
    db.sort_by_pesel(reverse=True)
    assert [p.pesel for p in db.persons] == PESEL_ORDER[::-1]


def test_search_by_surname_in_empty_database():
    assert Database().search_by_surname(NON_EXIST_SURNAME) == []


def test_search_by_surname_not_existing():
    assert _filled().search_by_surname(NON_EXIST_SURNAME) == []


def test_search_by_surname_existing_once():
    result = _filled().search_by_surname(ONCE)
    assert [p.surname for p in result] == [ONCE]


def test_search_by_surname_existing_twice():
    result = _filled().search_by_surname(TWICE)
    assert len(result) == 2
    assert result[0].surname == result[1].surname == TWICE


def test_search_by_pesel_in_empty_database():
    assert Database().search_by_pesel(NON_EXIST_PESEL) == []


def test_search_by_pesel_not_existing():
    assert _filled().search_by_pesel(NON_EXIST_PESEL) == []


def test_search_by_pesel_existing_once():
    result = _filled().search_by_pesel(EXIST_PESEL_1)
    assert len(result) == 1
    assert result[0].first_name == NAMES[1]


def test_search_by_pesel_after_adding_twice():
    db = _filled()
    for student in _students():
        db.add_person(student)
    result = db.search_by_pesel(EXIST_PESEL_3)
    assert len(result) == 1
    assert result[0].first_name == NAMES[2]


def test_search_by_first_name_city_and_street():
    db = _filled()
    db.add_person(_worker("Jan", "24090833676", 100, city="Kraków"))
    assert [p.pesel for p in db.search_by_first_name(NAMES[0])] == [EXIST_PESEL_1, EXIST_PESEL_2]
    assert [p.first_name for p in db.search_by_city("Kraków")] == ["Jan"]
    assert [p.first_name for p in db.search_by_street("Gdańska")] == ["Jan"]
    assert len(db.search_by_city(NOT_IMPORTANT)) == 3


def test_delete_by_pesel_in_empty_database():
    db = Database()
    db.delete_by_pesel(NON_EXIST_PESEL)
    assert len(db) == 0


def test_delete_by_non_existing_pesel():
    db = _filled()
    db.delete_by_pesel(NON_EXIST_PESEL)
    assert len(db) == 3


def test_delete_by_existing_pesel():
    db = _filled()
    db.delete_by_pesel(EXIST_PESEL_1)
    assert len(db) == 2
    assert db.search_by_pesel(EXIST_PESEL_1) == []


def test_delete_by_index_ignores_workers():
    db = _filled()
    db.add_person(_worker("Jan", "24090833676", 1))
    db.delete_by_index(1)
    assert [p.pesel for p in db.persons] == [EXIST_PESEL_1, EXIST_PESEL_3, "24090833676"]


def test_delete_by_names():
    db = _filled()
    db.delete_by_surname(TWICE)
    assert [p.surname for p in db.persons] == [ONCE]
    db.delete_by_first_name(NAMES[0])
    assert len(db) == 0


def test_sort_by_income_puts_workers_first():
    db = _filled()
    db.add_person(_worker("Rich", "24090833676", 300))
    db.add_person(_worker("Poor", "44051401359", 100))
    db.sort_by_income()
    names = [p.first_name for p in db.persons]
    assert names[:2] == ["Poor", "Rich"]
    assert all(isinstance(p, Student) for p in db.persons[2:])
    db.sort_by_income(reverse=True)
    assert [p.first_name for p in db.persons][:2] == ["Rich", "Poor"]


def test_persons_is_read_only_view():
    db = _filled()
    view = db.persons
    db.delete_by_pesel(EXIST_PESEL_1)
    assert len(view) == 3
    assert len(db) == 2


def test_print_all_empty():
    out = io.StringIO()
    Database().print_all(out)
    assert out.getvalue() == "\t Database: \nError! Empty Database!\n"


def test_print_all_lists_every_person():
    out = io.StringIO()
    _filled().print_all(out)
    text = out.getvalue()
    assert text.startswith("\t Database: \n")
    assert text.count("STUDENT") == 3
    assert all(pesel in text for pesel in PESEL_ORDER)


def test_save_and_load_round_trip(tmp_path):
    db = _filled()
    db.add_person(_worker('Jan "Big"', "24090833676", 4200))
    path = tmp_path / "db.txt"
    db.save_to_file(path)

    loaded = Database()
    loaded.add_person(_other_student())
    loaded.load_from_file(path)
    assert loaded.persons == db.persons


def test_load_reports_duplicates(tmp_path, capsys):
    path = tmp_path / "db.txt"
    record = _students()[0].to_record()
    path.write_text(record + "\n" + record + "\n", encoding="utf-8")
    db = Database()
    db.load_from_file(path)
    assert len(db) == 1
    assert "Add person to database from file failed." in capsys.readouterr().out


def test_load_missing_file_raises(tmp_path):
    db = _filled()
    with pytest.raises(OSError):
        db.load_from_file(tmp_path / "missing.txt")
    assert len(db) == 0


def test_read_worker_record():
    text = 'WORKER "Jan" "Nowak" "Gdańsk" "Gdańska" "3a" "24090833676" Male 1200\n'
    (worker,) = read_persons(text)
    assert worker == Worker(
        first_name="Jan",
        surname="Nowak",
        address=Address("Gdańsk", "Gdańska", "3a"),
        pesel="24090833676",
        gender=Gender.MALE,
        income=1200,
    )


def test_read_student_record_with_unknown_gender():
    text = 'STUDENT "Anna" "Boruc" "Olsztyn" "Krakowska" "7-1" 42 "24090833676" Other'
    (student,) = read_persons(text)
    assert student.index_number == 42
    assert student.gender is Gender.UNDEFINED
    assert student.address.number_of_street == "7-1"


def test_read_empty_text_yields_nothing():
    assert list(read_persons("  \n")) == []


def test_read_unknown_type_raises():
    with pytest.raises(ValueError, match="Don't know how to read this type of person:TEACHER"):
        list(read_persons('TEACHER "a"'))


def test_read_truncated_record_raises():
    with pytest.raises(ValueError):
        list(read_persons('WORKER "Jan" "Nowak"'))


def test_read_bad_income_raises():
    with pytest.raises(ValueError):
        list(read_persons('WORKER "J" "N" "c" "s" "1" "24090833676" Male lots'))