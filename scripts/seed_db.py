"""
Seed script for the configured record store.

Usage:
  - Dry run (default): python scripts/seed_db.py
  - Apply to configured store: python scripts/seed_db.py --apply
  - Also run AI classification on seeded issues: python scripts/seed_db.py --apply --classify
  - Use a custom seed file: python scripts/seed_db.py --file ./issues_seed.json --apply

Behavior:
  - Loads a JSON list of issue submissions (or the built-in samples).
  - Creates each one through IssueService, so validation and defaults apply.

NOTE: The default memory backend only lives for this process, so --apply is
mainly useful with STORAGE_BACKEND=firestore set in `.env`.
"""

import argparse
import json
import os
from typing import List

from app.core.exceptions import ValidationError
from app.services.issue_service import IssueService, parse_issue_create


SAMPLE_ISSUES = [
    {
        "title": "Streetlights out on Marine Drive",
        "description": "Five consecutive streetlights have not worked for a week; the stretch is completely dark.",
        "category": "electricity",
        "priority": "medium",
        "state": "kerala",
        "district": "ernakulam",
        "location": "Marine Drive walkway, near Rainbow Bridge",
        "coordinates": {"lat": 9.9774, "lng": 76.2773},
    },
    {
        "title": "Garbage not collected",
        "description": "Waste bins overflowing at the market entrance for three days.",
        "category": "sanitation",
        "priority": "high",
        "state": "maharashtra",
        "district": "pune",
        "location": "Mandai market, gate 2",
    },
    {
        "title": "Burst water pipeline",
        "description": "Water gushing from a broken pipeline, road partially flooded.",
        "category": "water",
        "priority": "high",
        "state": "karnataka",
        "district": "bengaluru-urban",
        "location": "80 Feet Road, Koramangala 4th Block",
    },
]


def load_seed(path: str) -> List[dict]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Seed file {path} must contain a JSON list of issues")
    return data


def seed_issues(service: IssueService, issues: List[dict], apply: bool = False, classify: bool = False) -> int:
    created = 0
    for entry in issues:
        try:
            payload = parse_issue_create(entry)
        except ValidationError as e:
            print(f"Skipping invalid entry '{entry.get('title', '?')}': {e}")
            continue

        print(f"Preparing: {payload.title} [{payload.category}/{payload.priority}]")
        if not apply:
            continue

        issue = service.create_issue(payload)
        created += 1
        print(f"Wrote: issues/{issue.id}")

        if classify:
            classified = service.classify_issue(issue.id)
            if classified and classified.ai_category:
                print(f"  AI: {classified.ai_category} ({classified.ai_confidence}%)")
    return created


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--apply", action="store_true", help="Write seed to the store instead of dry-run")
    parser.add_argument("--classify", action="store_true", help="Run AI classification on each seeded issue")
    parser.add_argument("--file", help="JSON file with a list of issue submissions")
    args = parser.parse_args()

    if args.file:
        if not os.path.exists(args.file):
            print(f"Seed file not found: {args.file}")
            return
        issues = load_seed(args.file)
    else:
        issues = SAMPLE_ISSUES

    created = seed_issues(IssueService(), issues, apply=args.apply, classify=args.classify)

    if args.apply:
        print(f"Seeding completed: {created} issue(s) created.")
    else:
        print("Dry run complete. Re-run with --apply to write to the store.")


if __name__ == "__main__":
    main()
