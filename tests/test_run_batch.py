import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from huffpack.pipeline import CodecConfig, run_batch_on_folder
from huffpack.reporting.report import generate_report


def _make_input_tree(root: Path) -> None:
    (root / "logs" / "2024").mkdir(parents=True)
    (root / "logs" / "2024" / "app.log").write_bytes(b"INFO request served\n" * 200)
    (root / "logs" / "empty.log").write_bytes(b"")
    (root / "single.bin").write_bytes(b"\x07" * 64)
    (root / "all.bin").write_bytes(bytes(range(256)))


def test_batch_roundtrip_and_report(tmp_path):
    input_root = tmp_path / "data"
    output_root = tmp_path / "out"
    _make_input_tree(input_root)
    cfg = CodecConfig(chunk_size=33)

    rows = run_batch_on_folder(input_root=input_root, output_root=output_root, cfg=cfg)

    assert len(rows) == 4
    assert all(row["status"] == "ok" for row in rows)
    assert (output_root / "out_encoded" / "logs_encoded" / "2024" / "app.log.huf").exists()
    decoded = output_root / "out_decoded" / "logs_decoded" / "2024" / "app_decoded.log"
    assert decoded.read_bytes() == (input_root / "logs" / "2024" / "app.log").read_bytes()

    report = generate_report(
        input_root=input_root,
        output_root=output_root,
        report_dir=output_root / "report",
        cfg=cfg,
    )
    summary = report["summary"]
    assert summary["total_files"] == 4
    assert summary["success_count"] == 4
    assert summary["success_rate"] == 1.0
    assert summary["total_original_bytes"] == 20 * 200 + 64 + 256

    payload = json.loads((output_root / "report" / "report.json").read_text(encoding="utf-8"))
    assert len(payload["files"]) == 4
    assert (output_root / "report" / "report.csv").exists()


def test_report_flags_missing_outputs(tmp_path):
    input_root = tmp_path / "data"
    input_root.mkdir()
    (input_root / "orphan.txt").write_bytes(b"never compressed")

    report = generate_report(
        input_root=input_root,
        output_root=tmp_path / "out",
        report_dir=tmp_path / "report",
        formats=("json",),
    )
    row = report["files"][0]
    assert row["status"] == "missing_encoded"
    assert row["success"] is False
    assert not (tmp_path / "report" / "report.csv").exists()
