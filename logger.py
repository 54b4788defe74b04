"""
Audit trail of the document actions taken in the app.

Every create or delete attempt adds one row (who, create/delete, document
type, Success/Failed) to a CSV file. The sidebar Admin Dashboard reads it back
as a DataFrame.
"""

import pandas as pd
import os
from datetime import datetime

LOG_FILE = "activity_log.csv"
LOG_COLUMNS = ["Timestamp", "User", "Action", "Document", "Status"]


def log_activity(user, action, document_type, status):
    """
    Appends an entry to the activity log.
    """
    new_entry = {
        "Timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "User": user,
        "Action": action,
        "Document": document_type,
        "Status": status,
    }

    # Header only goes in when the file is new
    file_exists = os.path.isfile(LOG_FILE)

    df = pd.DataFrame([new_entry], columns=LOG_COLUMNS)
    df.to_csv(LOG_FILE, mode='a', header=not file_exists, index=False)


def load_logs():
    """
    Reads the activity log for the Dashboard.
    """
    if os.path.exists(LOG_FILE):
        try:
            return pd.read_csv(LOG_FILE)
        except (pd.errors.EmptyDataError, pd.errors.ParserError):
            # Empty or corrupt file
            return pd.DataFrame(columns=LOG_COLUMNS)
    else:
        return pd.DataFrame(columns=LOG_COLUMNS)
