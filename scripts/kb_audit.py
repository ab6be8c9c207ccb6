from __future__ import annotations

import argparse
import datetime as _dt
from collections import Counter
from pathlib import Path
import logging
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv()

from cheatsheet.config import get_settings
from cheatsheet.kb.library import Library, build_library
from cheatsheet.kb.validation import Diagnostic, DiagnosticKind
from shared.sections import SECTIONS


_RECOMMENDATIONS: dict[DiagnosticKind, str] = {
    DiagnosticKind.DUPLICATE_KEY: "Rename one of the topics so every title slugifies to a distinct key.",
    DiagnosticKind.MISSING_TITLE: "Give the topic a title with at least one letter or digit.",
    DiagnosticKind.EMPTY_CONTENT: "Expand the topic body (explanation, example, pitfalls).",
    DiagnosticKind.INVALID_PREREQUISITE: "Point the prerequisite at an existing topic key or drop it.",
}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Audit cheat-sheet content and write a markdown report.")
    parser.add_argument("--content-dir", type=Path, default=Path(settings.content_dir))
    parser.add_argument("--report", type=Path, default=Path(settings.audit_report_path))
    parser.add_argument("--min-chars", type=int, default=settings.min_content_chars)
    return parser.parse_args(argv)


def _format_diagnostic(diagnostic: Diagnostic) -> str:
    where = f"`{diagnostic.topic_key}`" if diagnostic.topic_key else "(no key)"
    return f"- {where} [{diagnostic.kind.value}]: {diagnostic.message}"


def render_report(library: Library, *, min_chars: int) -> list[str]:
    timestamp = _dt.datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S %Z")
    found = library.all_diagnostics()
    by_kind = Counter(d.kind for _, d in found)

    lines: list[str] = [
        "# Content audit",
        "",
        f"_Generated: {timestamp}_",
        "",
        "## Summary",
        f"- Sections: {len(library.indexes)}",
        f"- Topics: {sum(len(c.topics) for i in library.indexes.values() for c in i.categories)}",
        f"- Distinct topic keys: {sum(len(i.topic_index) for i in library.indexes.values())}",
        f"- Diagnostics: {len(found)}",
    ]
    lines += [f"  - {kind.value}: {by_kind[kind]}" for kind in DiagnosticKind if by_kind[kind]]
    lines.append("")

    for section, diagnostics in library.diagnostics.items():
        lines.append(f"## {SECTIONS.get(section, section)}")
        if diagnostics:
            lines += [_format_diagnostic(d) for d in diagnostics]
        else:
            lines.append("- No issues.")
        lines.append("")

    lines.append("## Recommendations")
    if by_kind:
        for kind in DiagnosticKind:
            if not by_kind[kind]:
                continue
            text = _RECOMMENDATIONS[kind]
            if kind is DiagnosticKind.EMPTY_CONTENT:
                text += f" Minimum is {min_chars} characters."
            lines.append(f"- {kind.value}: {text}")
    else:
        lines.append("- None.")
    lines.append("")
    return lines


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=get_settings().log_level)
    args = _parse_args(argv)

    try:
        library = build_library(args.content_dir, run_validation_checks=True, min_content_chars=args.min_chars)
    except (OSError, ValueError) as exc:
        lines = [
            "# Content audit",
            "",
            "## Audit failed",
            "",
            f"Could not load content: `{type(exc).__name__}`: {exc}",
            "",
            f"- content directory: `{args.content_dir}`",
            "",
        ]
        code = 2
    else:
        lines = render_report(library, min_chars=args.min_chars)
        code = 1 if library.all_diagnostics() else 0

    args.report.parent.mkdir(parents=True, exist_ok=True)
    args.report.write_text("\n".join(lines), encoding="utf-8")
    return code


if __name__ == "__main__":
    raise SystemExit(main())

# Run:
# python scripts/kb_audit.py --content-dir content --report reports/kb_audit.md
