import os
import sys
import time

from utils.points_io import list_point_files, read_points, extract_numeric_id, ensure_output_dir
from detectors.segment_deduplicator import check_distinct_points, find_segments
from visualization.report import print_report
from visualization.save_outputs import save_all_outputs

from config import (
    INPUT_PATTERN,
    OUTPUT_FOLDER,
    get_active_params,
)


def process_point_set(points, set_name: str, output_dir: str = OUTPUT_FOLDER):
    """
    Runs the complete pipeline for one point set:
      1. Input validation (distinct points)
      2. Slope-sort scan around every anchor
      3. Segment deduplication
      4. Console report
      5. Save all outputs (points, segments, segment map, report)

    Returns the list of segments, or None if the set was rejected.
    """

    print(f"\n=== Processing point set: {set_name} ({len(points)} points) ===")
    params = get_active_params()

    # ------------------------------
    # STEP 1 — VALIDATE INPUT
    # ------------------------------
    try:
        check_distinct_points(points)
    except ValueError as exc:
        print(f"[ERROR] {set_name}: {exc}. Skipping.")
        return None

    if len(points) < params["MIN_SEGMENT_POINTS"]:
        print(f"[WARN] Fewer than {params['MIN_SEGMENT_POINTS']} points in {set_name}; no segments possible.")

    # ------------------------------
    # STEP 2+3 — SCAN & DEDUPLICATE
    # ------------------------------
    start = time.perf_counter()
    segments = find_segments(points, params)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    # ------------------------------
    # STEP 4 — REPORT
    # ------------------------------
    print_report(segments, elapsed_ms)

    # ------------------------------
    # STEP 5 — SAVE OUTPUTS
    # ------------------------------
    save_all_outputs(
        output_dir=output_dir,
        set_id=set_name,
        points=points,
        segments=segments,
        elapsed_ms=elapsed_ms,
    )

    print(f"[OK] Finished {set_name}")
    return segments


def output_name(path: str, used) -> str:
    """
    Name for a point file's outputs: its numeric id, or the file stem
    when another file already claimed that id.
    """
    name = extract_numeric_id(path)
    if name in used:
        name = os.path.splitext(os.path.basename(path))[0]
    base, k = name, 2
    while name in used:
        name = f"{base}_{k}"
        k += 1
    used.add(name)
    return name


def main(argv=None):
    """
    Main entry point:
      - Lists point files (given paths, or INPUT_PATTERN)
      - Reads and processes each one independently
      - Saves output files

    A file that cannot be read is reported and skipped.
    """
    if argv is None:
        argv = sys.argv[1:]

    ensure_output_dir(OUTPUT_FOLDER)

    paths = list(argv) if argv else list_point_files(INPUT_PATTERN)

    if not paths:
        print(f"[ERROR] No point files matched pattern: {INPUT_PATTERN}")
        return 1

    used = set()
    for path in paths:
        name = output_name(path, used)
        try:
            points = read_points(path)
        except (ValueError, FileNotFoundError) as exc:
            print(f"[ERROR] {name}: {exc}. Skipping.")
            continue
        process_point_set(points, name)

    print("\n=== All point sets processed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
