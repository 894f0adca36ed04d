from __future__ import annotations

import json
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Tuple

from prospection.analysis import Analyzer, get_analyzer
from prospection.config import get_settings
from prospection.domain import AnalysisOptions
from prospection.workers import log_error, log_info, worker_session

WORKER = "score-texts"


def _read_texts(path: Path, limit: Optional[int]) -> Tuple[List[Tuple[int, str]], int]:
    items: List[Tuple[int, str]] = []
    skipped = 0
    with path.open(encoding="utf-8") as handle:
        for line_no, raw in enumerate(handle, start=1):
            text = raw.strip()
            if not text:
                skipped += 1
                continue
            items.append((line_no, text))
            if limit and len(items) >= limit:
                break
    return items, skipped


def _write_records(records: List[Dict[str, Any]], stream: TextIO) -> None:
    for record in records:
        stream.write(json.dumps(record, ensure_ascii=False) + "\n")


def run(
    input_path: Path,
    output_path: Optional[Path] = None,
    *,
    options: Optional[Any] = None,
    concurrency: Optional[int] = None,
    limit: Optional[int] = None,
    analyzer: Optional[Analyzer] = None,
) -> Dict[str, int]:
    """Score one text per line of ``input_path`` and emit JSON lines in input order.

    Blank lines are skipped. Results go to ``output_path`` or, when it is
    None, to stdout.
    """
    settings = get_settings()
    engine = analyzer or get_analyzer()
    opts = AnalysisOptions.coerce(options)

    with worker_session(WORKER, limit=limit) as stats:
        items, stats.skipped = _read_texts(input_path, limit)
        stats.processed = len(items)
        if not items:
            log_info(WORKER, f"No texts found in {input_path}.")
            return stats.as_dict()

        workers = max(1, concurrency or settings.default_concurrency)
        results: Dict[int, Any] = {}
        failures: Dict[int, str] = {}

        if workers == 1:
            for line_no, text in items:
                try:
                    results[line_no] = engine.analyze(text, opts)
                except Exception as exc:
                    failures[line_no] = str(exc)
                    log_error(WORKER, f"line {line_no}", exc)
        else:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                future_map = {pool.submit(engine.analyze, text, opts): line_no for line_no, text in items}
                for future in as_completed(future_map):
                    line_no = future_map[future]
                    try:
                        results[line_no] = future.result()
                    except Exception as exc:
                        failures[line_no] = str(exc)
                        log_error(WORKER, f"line {line_no}", exc)

        stats.ok = len(results)
        stats.failed = len(failures)

        records: List[Dict[str, Any]] = []
        for line_no, text in items:
            record: Dict[str, Any] = {"line": line_no, "text": text}
            if line_no in failures:
                record["error"] = failures[line_no]
            else:
                record["result"] = results.get(line_no)
            records.append(record)

        if output_path is None:
            _write_records(records, sys.stdout)
        else:
            with output_path.open("w", encoding="utf-8") as handle:
                _write_records(records, handle)
            log_info(WORKER, f"Wrote {len(records)} records to {output_path}")

    return stats.as_dict()


__all__ = ["run"]
