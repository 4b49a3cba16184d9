#!/usr/bin/env python3
"""
Table retrieval command line tool.
Ask a question against the business and FAQ tables, dump parsed records, or show the business profile.
"""

import argparse
import json
import sys
from pathlib import Path

# Add the parent directory to sys.path to import our modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from tablerag.core.config import get_business_csv_path, get_faq_csv_path
from tablerag.core.search_service import EmptyCorpusError, RetrievalService
from tablerag.core.sources import SourceUnavailableError, read_table_text
from tablerag.core.table_parser import EmptyTableError, parse_table


def cmd_query(args):
    service = RetrievalService.from_files(args.business, args.faq)
    result = service.query(args.query, k=args.k)
    print(result.answer)
    if result.sources:
        print()
        print("Sources: " + ", ".join(result.sources))
    if args.scores:
        for hit in result.hits:
            print(f"  {hit.source_label} score={hit.score:.4f}")
    return 0


def cmd_parse(args):
    try:
        records = parse_table(read_table_text(args.path))
    except EmptyTableError:
        print(f"ERROR: {args.path} contains no rows", file=sys.stderr)
        return 1
    for record in records:
        print(json.dumps(record, ensure_ascii=False))
    return 0


def cmd_profile(args):
    service = RetrievalService.from_files(args.business, args.faq)
    profile = service.profile()
    if not profile:
        print("No business record found")
        return 1
    print(json.dumps(profile.to_dict(), indent=2, ensure_ascii=False))
    return 0


def build_parser():
    p = argparse.ArgumentParser(description="TF-IDF retrieval over business and FAQ tables")
    p.add_argument("--business", default=None, help=f"Business table (default: {get_business_csv_path()})")
    p.add_argument("--faq", default=None, help=f"FAQ table (default: {get_faq_csv_path()})")
    sub = p.add_subparsers(dest="cmd", required=True)

    pq = sub.add_parser("query", help="Ask a question")
    pq.add_argument("query", help="Free text question")
    pq.add_argument("--k", type=int, default=None, help="Maximum number of results")
    pq.add_argument("--scores", action="store_true", help="Print hit scores")
    pq.set_defaults(func=cmd_query)

    pp = sub.add_parser("parse", help="Print a table's records as JSON lines")
    pp.add_argument("path", help="Table file")
    pp.set_defaults(func=cmd_parse)

    pr = sub.add_parser("profile", help="Print the primary business profile")
    pr.set_defaults(func=cmd_profile)

    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    if getattr(args, "k", None) is not None and args.k < 1:
        print("ERROR: --k must be >= 1", file=sys.stderr)
        return 2
    try:
        return args.func(args)
    except SourceUnavailableError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except (EmptyCorpusError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
