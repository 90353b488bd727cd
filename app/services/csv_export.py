"""Serialize user records to CSV for the admin export."""

import csv
import io
from collections.abc import Iterable

from app.models import UserRecord

# Column order of the export; the password hash is never written.
CSV_COLUMNS = ("id", "name", "username", "role")

EXPORT_FILENAME = "users.csv"


def users_to_csv(users: Iterable[UserRecord]) -> str:
    """
    Return a CSV document with a header row and one row per user.

    Raises csv.Error if the writer rejects a row; the export endpoint maps it
    to a 500 "Export error" response.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for user in users:
        writer.writerow([getattr(user, column) for column in CSV_COLUMNS])
    return buffer.getvalue()
