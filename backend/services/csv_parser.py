# backend/services/csv_parser.py

import csv
from io import StringIO
from typing import List, Dict, Any
from fastapi import UploadFile


async def parse_csv(file: UploadFile) -> List[Dict[str, Any]]:
    """
    Parse an uploaded CSV into a list of dict rows.
    Header names and cell values are stripped of surrounding whitespace.
    """
    content = await file.read()
    decoded = content.decode("utf-8-sig")
    reader = csv.DictReader(StringIO(decoded))
    rows = []
    for row in reader:
        rows.append({
            (key or "").strip(): (value or "").strip() if isinstance(value, str) else value
            for key, value in row.items()
        })
    return rows
