"""Application importing – delimited-text import."""
from ledgerport.application.importing.csv_import import (
    CsvImporter,
    parse_csv_line,
    read_file_as_text,
    split_records,
)
from ledgerport.application.importing.result import ImportResult

__all__ = ["CsvImporter", "ImportResult", "parse_csv_line", "read_file_as_text", "split_records"]
