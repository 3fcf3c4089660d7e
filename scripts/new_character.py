#!/usr/bin/env python3
"""
Create a character profile from the template (Fallback.json).

Usage:
  python scripts/new_character.py --first Aria --surname Vale [--gender 1] [--eye-color 3]
"""
from __future__ import annotations

import argparse
import sys

from customizer.core.logging_setup import configure_logging
from customizer.services.character_service import CharacterService


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a character profile")
    ap.add_argument("--first", required=True, help="First name (ex.: Aria)")
    ap.add_argument("--surname", required=True, help="Surname (ex.: Vale)")
    ap.add_argument("--gender", type=int, help="Optional gender/model id")
    ap.add_argument("--eye-color", type=int, help="Optional eye color id")
    args = ap.parse_args()

    configure_logging()
    svc = CharacterService()
    result = svc.create(args.first, args.surname)
    if args.gender is not None:
        svc.set_gender(args.first, args.surname, args.gender)
    if args.eye_color is not None:
        svc.set_eye_color(args.first, args.surname, args.eye_color)

    print("OK: character created" if result.created else "OK: character already present")
    print(f"  File: {result.path}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
