#!/usr/bin/env python3
"""
Print the options of one catalog category.

Usage:
  python scripts/list_catalog.py eye-colors [--catalog catalog.db]
  python scripts/list_catalog.py hairs --gender male
  python scripts/list_catalog.py extras --gender female --species pixie
"""
from __future__ import annotations

import argparse
import json
import sys

from customizer.core.config import get_settings
from customizer.core.logging_setup import configure_logging
from customizer.repositories.catalog_repository import CatalogRepository

CATEGORIES = ("eye-colors", "hair-colors", "hairs", "facepaints", "extras")


def main() -> None:
    ap = argparse.ArgumentParser(description="List catalog options")
    ap.add_argument("category", choices=CATEGORIES)
    ap.add_argument("--catalog", help="Catalog path (default: CATALOG_PATH)")
    ap.add_argument("--gender", help="Required for hairs and extras")
    ap.add_argument("--species", help="Required for extras")
    args = ap.parse_args()

    configure_logging()
    path = args.catalog or get_settings().catalog_path
    repo = CatalogRepository()

    if args.category in {"hairs", "extras"} and not args.gender:
        raise SystemExit("--gender is required for this category")
    if args.category == "extras" and not args.species:
        raise SystemExit("--species is required for extras")

    if args.category == "eye-colors":
        rows = repo.list_eye_colors(path)
    elif args.category == "hair-colors":
        rows = repo.list_hair_colors(path)
    elif args.category == "hairs":
        rows = repo.list_hairs(path, args.gender)
    elif args.category == "facepaints":
        rows = repo.list_facepaints(path)
    else:
        rows = repo.list_extras(path, args.gender, args.species)

    for row in rows:
        print(json.dumps(row.model_dump(), ensure_ascii=False))


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
