"""
Reporting Module

Renders account snapshots for display. The text format is meant for
people; dict, JSON and CSV carry the same fields for other tools.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Sequence, Union
import csv
import io
import json

from .accounts import AccountSnapshot, AccountType

SEPARATOR = "-" * 24


class ReportFormat(Enum):
    """Output formats for account reports"""
    TEXT = "text"
    DICT = "dict"
    JSON = "json"
    CSV = "csv"


def format_rate(rate: Decimal) -> str:
    """Format a fractional rate as a percentage, e.g. 0.05 -> '5.00%'"""
    return f"{rate * 100:.2f}%"


def format_snapshot(snapshot: AccountSnapshot) -> str:
    """Human-readable block for one account"""
    lines = [
        f"Account Number: {snapshot.account_number}",
        f"Account Holder: {snapshot.holder_name}",
        f"Balance: {snapshot.balance.format()}",
        f"Account Type: {snapshot.account_type.value}",
    ]
    if snapshot.account_type == AccountType.CHECKING:
        lines.append(f"Monthly Fee: {snapshot.details['monthly_fee'].format()}")
    elif snapshot.account_type == AccountType.SAVINGS:
        lines.append(f"Interest Rate: {format_rate(snapshot.details['interest_rate'])}")
    return "\n".join(lines)


def render_report(
    snapshots: Sequence[AccountSnapshot],
    format: ReportFormat = ReportFormat.TEXT
) -> Union[List[Dict[str, Any]], str]:
    """
    Render a report in the specified format

    Raises:
        ValueError: If the format is not supported
    """
    if format == ReportFormat.TEXT:
        return "".join(f"{format_snapshot(s)}\n{SEPARATOR}\n" for s in snapshots)

    elif format == ReportFormat.DICT:
        return [snapshot.to_dict() for snapshot in snapshots]

    elif format == ReportFormat.JSON:
        return json.dumps(render_report(snapshots, ReportFormat.DICT), indent=2)

    elif format == ReportFormat.CSV:
        rows = render_report(snapshots, ReportFormat.DICT)
        output = io.StringIO()

        if rows:
            # Checking and savings rows carry different detail columns
            headers: List[str] = []
            for row in rows:
                headers.extend(key for key in row if key not in headers)
            writer = csv.DictWriter(output, fieldnames=headers, restval="", lineterminator="\n")
            writer.writeheader()
            for row in rows:
                writer.writerow(row)

        csv_content = output.getvalue()
        output.close()
        return csv_content

    else:
        raise ValueError(f"Unsupported report format: {format}")
