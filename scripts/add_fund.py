#!/usr/bin/env python3
"""
Create a fund directly in the configured database (DATABASE_URL).

There is no HTTP endpoint for creating funds, so this is how a file or
server database gets its funds.

Usage:
  python scripts/add_fund.py --name "Growth Fund"
  python scripts/add_fund.py --seed
"""
from __future__ import annotations

import argparse

from contacts_api.db.create_tables import create_all, seed_funds
from contacts_api.repositories.fund_repository import FundRepository


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a fund in the contacts database")
    ap.add_argument("--name", help="Fund name (ex.: Growth Fund)")
    ap.add_argument("--seed", action="store_true", help="Insert the default funds if the table is empty")
    args = ap.parse_args()

    create_all()
    if args.seed:
        added = seed_funds()
        print(f"{added} fund(s) seeded.")
    name = (args.name or "").strip()
    if not name:
        if not args.seed:
            raise SystemExit("Fund name is required (--name)")
        return

    repo = FundRepository()
    existing = [fund for fund in repo.list_funds() if fund.name == name]
    if existing:
        raise SystemExit(f"Fund '{name}' already exists (id={existing[0].id})")
    fund = repo.add_fund(name)
    print(f"Fund created: id={fund.id} name={fund.name}")


if __name__ == "__main__":
    main()
