# src/chroma_compare/cli.py
import argparse
import json
import logging
import sys
from pathlib import Path


def _metrics_json(metrics) -> dict:
    from .records.model import metrics_to_dict

    return metrics_to_dict(metrics)


def _cmd_compare(args) -> int:
    from .color import classify, from_hex, make_color_data

    sample, ref_a, ref_b = (make_color_data(from_hex(h)) for h in (args.sample, args.ref_a, args.ref_b))
    result = {
        "sample": sample.hex,
        "refA": ref_a.hex,
        "refB": ref_b.hex,
        "metrics": _metrics_json(classify(sample, ref_a, ref_b)),
    }
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


def _cmd_lab(args) -> int:
    from .color import from_hex, rgb_to_lab

    lab = rgb_to_lab(from_hex(args.hex))
    print(json.dumps({"l": lab.l, "a": lab.a, "b": lab.b}, indent=2))
    return 0


def _cmd_list(args) -> int:
    from .general.utils import load_settings
    from .records import JsonFileRecordRepository, filter_records

    settings = load_settings()
    repo = JsonFileRecordRepository(args.store)
    hits = filter_records(
        repo.get_all(),
        query=args.query,
        feedback=args.feedback,
        min_score=settings["search_min_score"],
    )
    for r in hits:
        m = r.metrics
        print(f"{r.id}  {r.title}  A {m.toward_a:.1f}% / B {m.toward_b:.1f}%  [{m.separation_label}]")
    return 0


def _cmd_export(args) -> int:
    from .general.utils import load_settings
    from .records import JsonFileRecordRepository, export_csv, export_filename, export_json

    repo = JsonFileRecordRepository(args.store)
    records = repo.get_all()
    text = export_csv(records) if args.format == "csv" else export_json(records)
    out = args.out or Path(export_filename(args.format, load_settings()["export_basename"]))
    Path(out).write_text(text, encoding="utf-8")
    print(f"Exported {len(records)} records → {out}")
    return 0


def _cmd_import(args) -> int:
    from .records import JsonFileRecordRepository, import_json

    repo = JsonFileRecordRepository(args.store)
    n = import_json(repo, Path(args.file).read_text(encoding="utf-8"))
    print(f"Imported {n} records into {args.store}")
    return 0


def _cmd_recheck(args) -> int:
    from .records import JsonFileRecordRepository, recheck, recheck_all

    repo = JsonFileRecordRepository(args.store)
    if args.ids:
        wanted = set(args.ids)
        updated = [recheck(repo, r) for r in repo.get_all() if r.id in wanted]
        missing = wanted - {r.id for r in updated}
        if missing:
            print(f"Unknown record id(s): {', '.join(sorted(missing))}", file=sys.stderr)
    else:
        updated = recheck_all(repo)
    for r in updated:
        prev = r.previous_metrics
        before = f"{prev.toward_a:.1f}%" if prev else "n/a"
        print(f"{r.id}  toward A {before} → {r.metrics.toward_a:.1f}%  [{r.metrics.separation_label}]")
    return 0


def _cmd_delete(args) -> int:
    from .records import JsonFileRecordRepository, delete_record

    repo = JsonFileRecordRepository(args.store)
    missing = [rid for rid in args.ids if not delete_record(repo, rid)]
    print(f"Deleted {len(args.ids) - len(missing)} records from {args.store}")
    if missing:
        print(f"Unknown record id(s): {', '.join(missing)}", file=sys.stderr)
        return 1
    return 0


def _cmd_clear(args) -> int:
    from .records import JsonFileRecordRepository, clear_history

    if not args.yes:
        print("Refusing to clear all history without --yes", file=sys.stderr)
        return 1
    n = clear_history(JsonFileRecordRepository(args.store))
    print(f"Cleared {n} records from {args.store}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chroma-compare",
        description="Compare a sample color against two references in CIE Lab (ΔE76).",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument("--data-dir", default=None, help="Directory holding compare_settings.json")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("compare", help="Classify SAMPLE between REF_A and REF_B (hex colors)")
    p.add_argument("sample")
    p.add_argument("ref_a")
    p.add_argument("ref_b")
    p.set_defaults(func=_cmd_compare)

    p = sub.add_parser("lab", help="Print the Lab value of a hex color")
    p.add_argument("hex")
    p.set_defaults(func=_cmd_lab)

    p = sub.add_parser("list", help="List saved comparisons")
    p.add_argument("--store", required=True, help="JSON record store path")
    p.add_argument("--query", default="", help="Search title/notes")
    p.add_argument("--feedback", choices=("all", "liked", "disliked"), default="all")
    p.set_defaults(func=_cmd_list)

    p = sub.add_parser("export", help="Export saved comparisons")
    p.add_argument("--store", required=True, help="JSON record store path")
    p.add_argument("--format", choices=("csv", "json"), default="csv")
    p.add_argument("--out", default=None, help="Output file (default: <basename>_<ms>.<ext>)")
    p.set_defaults(func=_cmd_export)

    p = sub.add_parser("import", help="Import a JSON export into the store")
    p.add_argument("--store", required=True, help="JSON record store path")
    p.add_argument("file")
    p.set_defaults(func=_cmd_import)

    p = sub.add_parser("recheck", help="Recompute metrics of saved comparisons")
    p.add_argument("--store", required=True, help="JSON record store path")
    p.add_argument("ids", nargs="*", help="Record ids (default: all)")
    p.set_defaults(func=_cmd_recheck)

    p = sub.add_parser("delete", help="Delete saved comparisons by id")
    p.add_argument("--store", required=True, help="JSON record store path")
    p.add_argument("ids", nargs="+", help="Record ids")
    p.set_defaults(func=_cmd_delete)

    p = sub.add_parser("clear", help="Delete every saved comparison")
    p.add_argument("--store", required=True, help="JSON record store path")
    p.add_argument("--yes", action="store_true", help="Confirm clearing all history")
    p.set_defaults(func=_cmd_clear)

    return parser


def main(argv=None):
    """CLI: compare colors in Lab space and manage saved comparison records."""
    from .errors import ChromaCompareError
    from .general.utils import ConfigParseError, ConfigTypeError, temp_data_dir

    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        if args.data_dir:
            with temp_data_dir(args.data_dir):
                return args.func(args)
        return args.func(args)
    except (ChromaCompareError, ConfigParseError, ConfigTypeError, OSError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
