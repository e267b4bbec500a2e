"""Command line interface for classifying hosts against a suffix list."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List

from .config import ConfigError, load_settings
from .engine import HostClassifier
from .outputs import OutputKind, classify_host
from .report import render_report
from .rules import (
    MalformedRuleFileError,
    RuleDatabase,
    load_default,
)


def _read_hosts(args: argparse.Namespace) -> List[str]:
    hosts = list(args.hosts)
    if args.hosts_file:
        for line in args.hosts_file.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                hosts.append(line)
    return hosts


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Classify hosts against the Public Suffix List")
    parser.add_argument("hosts", nargs="*", help="Hosts to classify (an optional :port is ignored)")
    parser.add_argument(
        "--rules",
        type=Path,
        help="Path to public_suffix_list.dat (defaults to SUFFIX_LIST_PATH or ./data)",
    )
    parser.add_argument(
        "--hosts-file",
        type=Path,
        help="Read additional hosts from a file, one per line",
    )
    parser.add_argument(
        "--output",
        action="append",
        choices=[kind.value for kind in OutputKind],
        help="Only report the given result (can be repeated)",
    )
    parser.add_argument(
        "--json-output",
        type=Path,
        help="Write classification results to a JSON file",
    )
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
        rules_path = args.rules or settings.suffix_list_path
        if args.rules:
            database = RuleDatabase.from_path(rules_path)
        else:
            database = load_default(rules_path)
        hosts = _read_hosts(args)
    except (ConfigError, MalformedRuleFileError, OSError) as exc:
        print(f"[suffix-classifier] error: {exc}")
        return 2

    classifier = HostClassifier(database)
    kinds = [OutputKind(value) for value in args.output] if args.output else list(OutputKind)
    results = [classify_host(classifier, host) for host in hosts]

    print(render_report(results, kinds))

    if args.json_output:
        payload = [
            {"host": result.host, **{kind.value: result.get(kind) for kind in kinds}}
            for result in results
        ]
        args.json_output.write_text(json.dumps(payload, indent=2))

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
