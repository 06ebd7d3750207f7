import os
from pathlib import Path
from typing import Dict, List, Optional

from huffpack.errors import HuffmanError
from huffpack.pipeline.compress import compress_file
from huffpack.pipeline.config import CodecConfig
from huffpack.pipeline.decompress import decompress_file
from huffpack.utils.file_utils import add_suffix_to_top_level, suffix_filename


def encoded_path_for(rel_path: Path, out_encoded_root: Path, cfg: CodecConfig) -> Path:
    encoded_rel_dir = add_suffix_to_top_level(rel_path.parent, "_encoded")
    return out_encoded_root / encoded_rel_dir / (rel_path.name + cfg.output_suffix)


def decoded_path_for(rel_path: Path, out_decoded_root: Path, cfg: CodecConfig) -> Path:
    decoded_rel_dir = add_suffix_to_top_level(rel_path.parent, "_decoded")
    decoded_rel_file = suffix_filename(Path(rel_path.name), cfg.decoded_suffix)
    return out_decoded_root / decoded_rel_dir / decoded_rel_file.name


def run_batch_on_folder(
    input_root: Path,
    output_root: Path,
    cfg: CodecConfig | None = None,
) -> List[Dict[str, object]]:
    """
    Compress then decompress every file under `input_root`.

    Encoded files go to <output_root>/out_encoded, decoded files to
    <output_root>/out_decoded, mirroring the input tree. A failure on one
    file is recorded in its result row and the walk continues.
    """
    if cfg is None:
        cfg = CodecConfig()

    input_root = input_root.resolve()
    output_root = output_root.resolve()

    out_encoded_root = output_root / "out_encoded"
    out_decoded_root = output_root / "out_decoded"

    results: List[Dict[str, object]] = []
    for root, _, files in os.walk(input_root):
        root_path = Path(root)
        for filename in sorted(files):
            in_path = root_path / filename
            print("Processing:", in_path)
            results.append(
                process_file(
                    in_path=in_path,
                    rel_path=in_path.relative_to(input_root),
                    out_encoded_root=out_encoded_root,
                    out_decoded_root=out_decoded_root,
                    cfg=cfg,
                )
            )
    return results


def process_file(
    in_path: Path,
    rel_path: Path,
    out_encoded_root: Path,
    out_decoded_root: Path,
    cfg: CodecConfig,
) -> Dict[str, object]:
    encoded_out_path = encoded_path_for(rel_path, out_encoded_root, cfg)
    decoded_out_path = decoded_path_for(rel_path, out_decoded_root, cfg)
    encoded_out_path.parent.mkdir(parents=True, exist_ok=True)
    decoded_out_path.parent.mkdir(parents=True, exist_ok=True)

    row: Dict[str, object] = {"input_path": str(rel_path), "status": "ok", "error": None}
    try:
        stats = compress_file(in_path, encoded_out_path, cfg)
        row.update(stats.as_dict())
        decompress_file(encoded_out_path, decoded_out_path, cfg)
    except HuffmanError as exc:
        print(f"Error: {exc}")
        row["status"] = "failed"
        row["error"] = str(exc)
    return row
