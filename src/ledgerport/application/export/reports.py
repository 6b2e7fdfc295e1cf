"""Application export – column presets for the standard lending reports.

Each builder returns an :class:`ExportRequest` with a title and a
``Generated on <date>`` subtitle, meant for the ``excel`` format.
"""
from __future__ import annotations

from typing import Iterable

from ledgerport.application.export.columns import display_date, fixed2, optional_date
from ledgerport.application.export.request import ColumnDef, ExportRequest, Row
from ledgerport.kernel.time import Clock, SystemClock, format_display_date

__all__ = [
    "ARREARS_COLUMNS",
    "CLIENT_LIST_COLUMNS",
    "COLLECTIONS_COLUMNS",
    "LOAN_PORTFOLIO_COLUMNS",
    "REPAYMENT_SCHEDULE_COLUMNS",
    "arrears_report",
    "client_list",
    "collections_report",
    "loan_portfolio",
    "repayment_schedule",
]

LOAN_PORTFOLIO_COLUMNS = [
    ColumnDef("loanNumber", "Loan Number"),
    ColumnDef("clientName", "Client Name"),
    ColumnDef("clientCode", "Client Code"),
    ColumnDef("product", "Product"),
    ColumnDef("disbursedAmount", "Disbursed Amount", fixed2),
    ColumnDef("outstandingBalance", "Outstanding Balance", fixed2),
    ColumnDef("interestRate", "Interest Rate (%)"),
    ColumnDef("disbursementDate", "Disbursement Date", display_date),
    ColumnDef("maturityDate", "Maturity Date", display_date),
    ColumnDef("status", "Status"),
    ColumnDef("daysInArrears", "Days in Arrears"),
]

REPAYMENT_SCHEDULE_COLUMNS = [
    ColumnDef("installmentNumber", "Installment #"),
    ColumnDef("dueDate", "Due Date", display_date),
    ColumnDef("principal", "Principal", fixed2),
    ColumnDef("interest", "Interest", fixed2),
    ColumnDef("fees", "Fees", fixed2),
    ColumnDef("totalDue", "Total Due", fixed2),
    ColumnDef("amountPaid", "Amount Paid", fixed2),
    ColumnDef("balance", "Balance", fixed2),
    ColumnDef("status", "Status"),
    ColumnDef("paidDate", "Paid Date", display_date),
]

COLLECTIONS_COLUMNS = [
    ColumnDef("date", "Date", display_date),
    ColumnDef("receiptNumber", "Receipt #"),
    ColumnDef("loanNumber", "Loan #"),
    ColumnDef("clientName", "Client Name"),
    ColumnDef("amount", "Amount", fixed2),
    ColumnDef("channel", "Payment Channel"),
    ColumnDef("reference", "Reference"),
    ColumnDef("postedBy", "Posted By"),
]

ARREARS_COLUMNS = [
    ColumnDef("loanNumber", "Loan Number"),
    ColumnDef("clientName", "Client Name"),
    ColumnDef("clientPhone", "Phone"),
    ColumnDef("product", "Product"),
    ColumnDef("outstandingBalance", "Outstanding Balance", fixed2),
    ColumnDef("arrearsAmount", "Arrears Amount", fixed2),
    ColumnDef("daysInArrears", "Days in Arrears"),
    ColumnDef("lastPaymentDate", "Last Payment Date", optional_date("Never")),
    ColumnDef("nextDueDate", "Next Due Date", display_date),
    ColumnDef("assignedOfficer", "Assigned Officer"),
]

CLIENT_LIST_COLUMNS = [
    ColumnDef("clientCode", "Client Code"),
    ColumnDef("firstName", "First Name"),
    ColumnDef("lastName", "Last Name"),
    ColumnDef("idNumber", "ID Number"),
    ColumnDef("phone", "Phone"),
    ColumnDef("email", "Email"),
    ColumnDef("dateOfBirth", "Date of Birth", display_date),
    ColumnDef("gender", "Gender"),
    ColumnDef("address", "Address"),
    ColumnDef("registrationDate", "Registration Date", display_date),
    ColumnDef("status", "Status"),
]


def _report(
    filename: str,
    title: str,
    columns: list[ColumnDef],
    rows: Iterable[Row],
    clock: Clock | None,
) -> ExportRequest:
    today = (clock or SystemClock()).today()
    return ExportRequest(
        filename=filename,
        columns=columns,
        rows=rows,
        title=title,
        subtitle=f"Generated on {format_display_date(today)}",
    )


def loan_portfolio(loans: Iterable[Row], filename: str, *, clock: Clock | None = None) -> ExportRequest:
    return _report(filename, "Loan Portfolio Report", LOAN_PORTFOLIO_COLUMNS, loans, clock)


def repayment_schedule(
    schedules: Iterable[Row], loan_number: str, *, clock: Clock | None = None
) -> ExportRequest:
    return _report(
        f"repayment_schedule_{loan_number}",
        f"Repayment Schedule - {loan_number}",
        REPAYMENT_SCHEDULE_COLUMNS,
        schedules,
        clock,
    )


def collections_report(
    collections: Iterable[Row], filename: str, *, clock: Clock | None = None
) -> ExportRequest:
    return _report(filename, "Collections Report", COLLECTIONS_COLUMNS, collections, clock)


def arrears_report(arrears: Iterable[Row], filename: str, *, clock: Clock | None = None) -> ExportRequest:
    return _report(filename, "Arrears Report", ARREARS_COLUMNS, arrears, clock)


def client_list(clients: Iterable[Row], filename: str, *, clock: Clock | None = None) -> ExportRequest:
    return _report(filename, "Client List", CLIENT_LIST_COLUMNS, clients, clock)
