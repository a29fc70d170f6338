# scripts/check_sources.py
from __future__ import annotations

import os
import sys
from pathlib import Path

from services.api_client import FetchError
from services.datasets import load_policy_details, load_table
from utils.loaders import load_app_settings
from utils.validators import summarize_issues

# Table kinds served as grids; policy details and analytics are documents
GRID_KINDS = ("policies", "reinsurers", "policy_transactions", "reinsurer_transactions")


def main() -> int:
    """
    Fetches every configured source, runs the payload checks and prints findings.
    Exit code is 1 when any source cannot be fetched.
    """
    root = Path(os.getenv("RECAP_ROOT", str(Path(__file__).resolve().parents[1])))
    settings = load_app_settings(root)
    failed = 0

    for kind in GRID_KINDS:
        print(f"🔄 {kind}: {settings.source_for(kind)}")
        try:
            loaded = load_table(kind, settings)
        except FetchError as err:
            failed += 1
            print(f"❌ {err} ({err.status_code or err.detail})")
            continue
        print(f"   rows={len(loaded.records)} issues={summarize_issues(loaded.issues)}")
        for issue in loaded.issues:
            print(f"   - [{issue.severity}] {issue.message}")

    policy = os.getenv("RECAP_CHECK_POLICY", "POL001")
    print(f"🔄 policy_details: {policy}")
    try:
        details = load_policy_details(policy, settings)
    except FetchError as err:
        failed += 1
        print(f"❌ {err} ({err.status_code or err.detail})")
    else:
        print(f"   reinsurer rows={len(details.reinsurer_levels)} issues={summarize_issues(details.issues)}")

    print("✅ all sources fetched" if not failed else f"\n{failed} source(s) failed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
