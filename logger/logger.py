import json
import os
from datetime import datetime, timezone

ACCEPTED_STATUSES = ("ACCEPTED",)
REJECTED_STATUSES = ("REJECTED", "TIMEOUT")

def utc_today():
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")

class JSONLogger:
    """
    Appends one JSON line per simulated input.

    Every run goes to ``<prefix><date>.jsonl``; accepted runs are mirrored
    to ``accepted_<date>.jsonl`` and rejected or timed out runs to
    ``rejected_<date>.jsonl``. Files roll over when the UTC date changes.
    """

    def __init__(self, output_directory="logs/", log_file_prefix="tm_runs_", machine_name=None):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        self.machine_name = machine_name
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = utc_today()
        self.current_log = self._path(f"{self.log_file_prefix}{self.today}.jsonl")

    def _path(self, filename):
        return os.path.join(self.output_directory, filename)

    def _append(self, path, record):
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(record) + "\n")

    def rotate(self):
        """Switch to the files of the current UTC date if it changed."""
        today = utc_today()
        if today != self.today:
            self.today = today
            self.current_log = self._path(f"{self.log_file_prefix}{self.today}.jsonl")

    def log_run(self, entry: dict):
        """Record one run (a ``RunResult.to_dict()`` or an INVALID entry)."""
        self.rotate()
        record = dict(entry)
        record["logged_at"] = datetime.now(timezone.utc).isoformat()
        if self.machine_name is not None:
            record["machine"] = self.machine_name

        self._append(self.current_log, record)
        status = record.get("status")
        if status in ACCEPTED_STATUSES:
            self._append(self._path(f"accepted_{self.today}.jsonl"), record)
        elif status in REJECTED_STATUSES:
            self._append(self._path(f"rejected_{self.today}.jsonl"), record)
