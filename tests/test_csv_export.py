import csv
from datetime import date
from io import StringIO

from csv_export import export_filename, export_header, session_to_csv, session_to_csv_bytes
from survey_state import start_session


def test_walkthrough_export(asha_at_results):
    lines = session_to_csv(asha_at_results.session).splitlines()
    assert lines == [
        "EmployeeName,EmployeeID,EngagementAvg,DominantTrait,e1,e2,e3,e4,e5,e6,e7,e8,e9,e10,e11,e12",
        "Asha,ITC001,5.00,Executor,5,5,5,5,5,5,5,5,5,5,5,5",
    ]


def test_export_without_session_uses_placeholders():
    header, row = session_to_csv(None).splitlines()
    assert row == "Anonymous,N/A,0.00,Unknown" + "," * 12
    assert header.split(",")[4:] == [f"e{i}" for i in range(1, 13)]


def test_unanswered_questions_are_blank():
    session = start_session("Asha", "ITC001")
    session.responses.record_engagement("e1", 4)
    session.responses.record_engagement("e3", 3)
    row = session_to_csv(session).splitlines()[1].split(",")
    assert row[:4] == ["Asha", "ITC001", "3.50", "Unknown"]
    assert row[4:7] == ["4", "", "3"]
    assert row[7:] == [""] * 9


def test_fields_with_commas_are_quoted():
    session = start_session('Kumar, Amit "AK"', "ITC\n09")
    text = session_to_csv(session)
    assert '"Kumar, Amit ""AK"""' in text
    rows = list(csv.reader(StringIO(text)))
    assert len(rows) == 2
    assert rows[1][0] == 'Kumar, Amit "AK"'
    assert rows[1][1] == "ITC\n09"
    assert len(rows[1]) == len(export_header())


def test_bytes_are_utf8():
    session = start_session("आशा", "ITC001")
    assert session_to_csv_bytes(session).decode("utf-8").splitlines()[1].startswith("आशा,ITC001")


def test_filename_pattern():
    assert export_filename(date(2024, 3, 9)) == "ITC_Survey_PowerBI_Export_2024-03-09.csv"
    assert export_filename().startswith("ITC_Survey_PowerBI_Export_")
