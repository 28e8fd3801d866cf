import pandas as pd
import pytest

from csvtree.config import InputConfig
from csvtree.io import frame_to_rows, load_rows, remove_source


def test_load_rows_reads_csv_without_header(sample_csv, conversation_rows):
    rows = load_rows(sample_csv)
    assert rows == conversation_rows


def test_load_rows_strips_cells_and_fills_missing(tmp_path):
    path = tmp_path / "padded.csv"
    path.write_text(" Root , name ,\n\n,Child,  x  \n", encoding="utf-8")

    rows = load_rows(path)
    assert rows == [
        ["Root", "name", ""],
        ["", "", ""],
        ["", "Child", "x"],
    ]


def test_load_rows_pads_ragged_lines_to_widest_row(tmp_path):
    path = tmp_path / "ragged.csv"
    path.write_text("Root,name\nKids,\n,\n,Child,a\n", encoding="utf-8")

    rows = load_rows(path)
    assert rows == [
        ["Root", "name", ""],
        ["Kids", "", ""],
        ["", "", ""],
        ["", "Child", "a"],
    ]


def test_load_rows_honours_delimiter_and_skip_rows(tmp_path):
    path = tmp_path / "semicolon.csv"
    path.write_text("level;label;value\nRoot;a, b;\n", encoding="utf-8")

    rows = load_rows(path, InputConfig(delimiter=";", skip_rows=1))
    assert rows == [["Root", "a, b", ""]]


def test_load_rows_reads_excel_sheet(tmp_path):
    frame = pd.DataFrame(
        [
            ["Root", "name", ""],
            ["Children", "", ""],
            ["", "", ""],
            ["", "Child1", "name"],
        ]
    )
    path = tmp_path / "tree.xlsx"
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        frame.to_excel(writer, sheet_name="Dialog", header=False, index=False)

    rows = load_rows(path, InputConfig(sheet="Dialog"))
    assert rows == [
        ["Root", "name", ""],
        ["Children", "", ""],
        ["", "", ""],
        ["", "Child1", "name"],
    ]


def test_load_rows_empty_file_gives_no_rows(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    assert load_rows(path) == []


def test_load_rows_rejects_missing_and_unknown_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_rows(tmp_path / "missing.csv")

    other = tmp_path / "tree.json"
    other.write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError):
        load_rows(other)

    legacy = tmp_path / "tree.xls"
    legacy.write_bytes(b"")
    with pytest.raises(ValueError):
        load_rows(legacy)


def test_frame_to_rows_handles_missing_values():
    frame = pd.DataFrame([["A", None], [None, " b "]])
    assert frame_to_rows(frame) == [["A", ""], ["", "b"]]


def test_remove_source_deletes_file(tmp_path):
    path = tmp_path / "consumed.csv"
    path.write_text("A,1\n", encoding="utf-8")
    remove_source(path)
    assert not path.exists()
