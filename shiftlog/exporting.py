import json
import os
from datetime import datetime

import pandas as pd

FLAT_COLUMNS = [
    "date", "startTime", "endTime", "duration", "tips", "tipsPerHour", "tipOut",
    "cashTips", "creditTips", "hourlyRate", "wage", "differential", "chump", "notes",
]


def shifts_frame(shifts):
    records = [s.to_dict() for s in shifts]
    return pd.DataFrame([{col: rec.get(col) for col in FLAT_COLUMNS} for rec in records], columns=FLAT_COLUMNS)


def save_shifts(shifts, out_dir="."):
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    json_path = os.path.join(out_dir, f"shifts_{timestamp}.json")
    xlsx_path = os.path.join(out_dir, f"shifts_{timestamp}.xlsx")

    # full records, nested structures included
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump([s.to_dict() for s in shifts], f, indent=2, ensure_ascii=False)

    # one row per shift
    shifts_frame(shifts).to_excel(xlsx_path, index=False)

    print(f"Saved {len(shifts)} shifts:")
    print(f" - JSON:  {json_path}")
    print(f" - Excel: {xlsx_path}")
    return json_path, xlsx_path
