from __future__ import annotations

import argparse
import csv
import json
import statistics
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from huffpack.pipeline.config import CodecConfig
from huffpack.utils.batch import decoded_path_for, encoded_path_for

REPORT_COLUMNS = [
    "input_path",
    "status",
    "original_size_bytes",
    "encoded_size_bytes",
    "decoded_size_bytes",
    "compression_ratio",
    "success",
    "byte_errors",
]


def _byte_error_count(a: bytes, b: bytes) -> int:
    min_len = min(len(a), len(b))
    errors = sum(1 for i in range(min_len) if a[i] != b[i])
    errors += abs(len(a) - len(b))
    return errors


def _iter_files(root: Path) -> Iterable[Path]:
    return sorted(p for p in root.rglob("*") if p.is_file())


def _format_csv_value(value: object) -> object:
    if value is None:
        return ""
    return value


def generate_report(
    input_root: Path,
    output_root: Path,
    report_dir: Path,
    formats: Sequence[str] = ("csv", "json"),
    cfg: Optional[CodecConfig] = None,
) -> Dict[str, object]:
    """
    Compare a batch run's outputs with its inputs.

    Expects the layout written by `run_batch_on_folder`. Files whose encoded
    or decoded output is missing are reported with a status instead of
    failing the report.
    """
    if cfg is None:
        cfg = CodecConfig()
    input_root = input_root.resolve()
    output_root = output_root.resolve()
    report_dir = report_dir.resolve()

    rows: List[Dict[str, object]] = []
    total_original_bytes = 0
    total_encoded_bytes = 0
    success_count = 0
    ratios: List[float] = []

    for input_file in _iter_files(input_root):
        rel_path = input_file.relative_to(input_root)
        encoded_path = encoded_path_for(rel_path, output_root / "out_encoded", cfg)
        decoded_path = decoded_path_for(rel_path, output_root / "out_decoded", cfg)
        row: Dict[str, object] = {
            "input_path": str(rel_path),
            "status": "ok",
            "encoded_size_bytes": None,
            "decoded_size_bytes": None,
            "compression_ratio": None,
            "success": False,
            "byte_errors": None,
        }

        original_bytes = input_file.read_bytes()
        original_size = len(original_bytes)
        total_original_bytes += original_size
        row["original_size_bytes"] = original_size

        if encoded_path.exists():
            encoded_size = encoded_path.stat().st_size
            total_encoded_bytes += encoded_size
            row["encoded_size_bytes"] = encoded_size
            if original_size:
                ratio = encoded_size / original_size
                row["compression_ratio"] = ratio
                ratios.append(ratio)
        else:
            row["status"] = "missing_encoded"

        if decoded_path.exists():
            decoded_bytes = decoded_path.read_bytes()
            row["decoded_size_bytes"] = len(decoded_bytes)
            success = decoded_bytes == original_bytes
            row["success"] = success
            if success:
                success_count += 1
            row["byte_errors"] = _byte_error_count(original_bytes, decoded_bytes)
        elif row["status"] == "ok":
            row["status"] = "missing_decoded"

        rows.append(row)

    report_dir.mkdir(parents=True, exist_ok=True)
    formats = [fmt.lower() for fmt in formats]

    summary = {
        "total_files": len(rows),
        "success_count": success_count,
        "success_rate": (success_count / len(rows)) if rows else 0.0,
        "total_original_bytes": total_original_bytes,
        "total_encoded_bytes": total_encoded_bytes,
        "overall_ratio": (total_encoded_bytes / total_original_bytes) if total_original_bytes else 0.0,
        "median_ratio": statistics.median(ratios) if ratios else 0.0,
    }

    meta = {
        "input_root": str(input_root),
        "output_root": str(output_root),
        "report_dir": str(report_dir),
        "generated_at_utc": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }

    if "csv" in formats:
        csv_path = report_dir / "report.csv"
        with csv_path.open("w", newline="", encoding="utf-8") as csv_file:
            writer = csv.DictWriter(csv_file, fieldnames=REPORT_COLUMNS)
            writer.writeheader()
            for row in rows:
                writer.writerow({k: _format_csv_value(row.get(k)) for k in REPORT_COLUMNS})

    if "json" in formats:
        json_path = report_dir / "report.json"
        report_payload = {"meta": meta, "summary": summary, "files": rows}
        json_path.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")

    return {"meta": meta, "summary": summary, "files": rows}


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate compression reports for a batch run.",
    )
    parser.add_argument("--input-root", required=True, help="Path to original input data root.")
    parser.add_argument("--output-root", required=True, help="Path to batch output root.")
    parser.add_argument(
        "--report-dir",
        default="",
        help="Output directory for reports (default: <output-root>/report).",
    )
    parser.add_argument(
        "--formats",
        default="csv,json",
        help="Comma-separated list of formats: csv,json (default: csv,json).",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    input_root = Path(args.input_root)
    output_root = Path(args.output_root)
    report_dir = Path(args.report_dir) if args.report_dir else output_root / "report"
    formats = [fmt.strip() for fmt in args.formats.split(",") if fmt.strip()]
    generate_report(
        input_root=input_root,
        output_root=output_root,
        report_dir=report_dir,
        formats=formats,
    )
    print(f"Report written to {report_dir}")


if __name__ == "__main__":
    main()
