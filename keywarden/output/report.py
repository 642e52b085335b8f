"""
Keywarden Report Generator
===========================

JSON and HTML reports for analysis results and the security report.

The JSON report is the pydantic ``model_dump(mode="json")`` of whatever is
being reported, wrapped with generation metadata. The HTML report is a
single self-contained page with inline CSS; analysed passwords appear
masked in it.
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import BaseModel

from keywarden import __version__
from keywarden.core.models import AnalysisResult, SecurityReport
from keywarden.output.findings import analysis_findings

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Keywarden Report - {title}</title>
    <style>
        :root {{
            --bg-primary: #0d1117;
            --bg-secondary: #161b22;
            --bg-tertiary: #21262d;
            --text-primary: #c9d1d9;
            --text-secondary: #8b949e;
            --accent-cyan: #58a6ff;
            --accent-green: #3fb950;
            --accent-yellow: #d29922;
            --accent-red: #f85149;
            --accent-purple: #bc8cff;
            --border: #30363d;
        }}
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg-primary);
            color: var(--text-primary);
            line-height: 1.6;
            padding: 2rem;
        }}
        .container {{ max-width: 1100px; margin: 0 auto; }}
        .header {{
            text-align: center;
            padding: 2rem;
            border: 1px solid var(--accent-cyan);
            border-radius: 8px;
            margin-bottom: 2rem;
            background: var(--bg-secondary);
        }}
        .header h1 {{ color: var(--accent-cyan); font-size: 2rem; }}
        .header .subtitle {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .section {{
            background: var(--bg-secondary);
            border: 1px solid var(--border);
            border-radius: 8px;
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }}
        .section h2 {{
            color: var(--accent-purple);
            font-size: 1.3rem;
            margin-bottom: 1rem;
            padding-bottom: 0.5rem;
            border-bottom: 1px solid var(--border);
        }}
        table {{ width: 100%; border-collapse: collapse; margin: 1rem 0; }}
        th, td {{ padding: 0.6rem 1rem; text-align: left; border: 1px solid var(--border); }}
        th {{ background: var(--bg-tertiary); color: var(--accent-cyan); }}
        .badge {{
            display: inline-block;
            padding: 0.2rem 0.6rem;
            border-radius: 4px;
            font-weight: 700;
            font-size: 0.8rem;
        }}
        .severity-info {{ background: rgba(88, 166, 255, 0.2); color: var(--accent-cyan); }}
        .severity-low {{ background: rgba(63, 185, 80, 0.2); color: var(--accent-green); }}
        .severity-medium {{ background: rgba(210, 153, 34, 0.2); color: var(--accent-yellow); }}
        .severity-high {{ background: rgba(248, 81, 73, 0.2); color: var(--accent-red); }}
        .severity-critical {{ background: rgba(248, 81, 73, 0.4); color: #ff7b72; }}
        .finding {{
            padding: 0.8rem;
            margin: 0.5rem 0;
            border-left: 4px solid var(--border);
            background: var(--bg-tertiary);
        }}
        .finding p {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .footer {{
            text-align: center;
            padding: 1.5rem;
            color: var(--text-secondary);
            font-size: 0.8rem;
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>Keywarden</h1>
            <div class="subtitle">{title}<br>Generated: {timestamp}</div>
        </div>
        {sections}
        <div class="footer">Keywarden v{version} | Password Strength Analysis Toolkit</div>
    </div>
</body>
</html>
"""


def _to_jsonable(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, (list, tuple)):
        return [_to_jsonable(item) for item in obj]
    if isinstance(obj, dict):
        return {key: _to_jsonable(value) for key, value in obj.items()}
    return obj


class KeywardenReportGenerator:
    """Writes JSON and HTML reports.

    Usage::

        reporter = KeywardenReportGenerator()
        reporter.generate_json(result, Path("analysis.json"))
        reporter.generate_html([result], Path("analysis.html"))
    """

    def to_json(self, payload: Any, *, kind: str = "analysis") -> str:
        """Serialise *payload* (models, lists of models, dicts) with metadata."""
        document = {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "keywarden",
                "kind": kind,
                "version": __version__,
            },
            "data": _to_jsonable(payload),
        }
        return json.dumps(document, indent=2, ensure_ascii=False, default=str)

    def generate_json(self, payload: Any, output_path: Path, *, kind: str = "analysis") -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(payload, kind=kind), encoding="utf-8")
        return output_path

    def generate_html(
        self,
        analyses: Sequence[AnalysisResult],
        output_path: Path,
        *,
        title: Optional[str] = None,
        security_report: Optional[SecurityReport] = None,
    ) -> Path:
        """Render analyses (and optionally a security report) to HTML."""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        sections = [self._analysis_section(a) for a in analyses]
        if security_report is not None:
            sections.append(self._report_section(security_report))
        if not sections:
            sections.append('<div class="section"><p>Nothing to report.</p></div>')

        content = _HTML_TEMPLATE.format(
            title=html.escape(title or "Password Analysis Report"),
            timestamp=timestamp,
            sections="\n".join(sections),
            version=__version__,
        )
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        return output_path

    # ------------------------------------------------------------------ #
    #  Private HTML builders
    # ------------------------------------------------------------------ #

    @staticmethod
    def _analysis_section(result: AnalysisResult) -> str:
        esc = html.escape
        rows = "".join(
            f"<tr><th>{esc(label)}</th><td>{esc(str(value))}</td></tr>"
            for label, value in (
                ("Password", result.masked),
                ("Strength", result.strength.value),
                ("Score", f"{result.score}/{result.max_score}"),
                ("Entropy", f"{result.entropy:.1f} bits"),
                ("Time to Crack", result.time_to_crack),
                ("Compromised", "Yes" if result.is_compromised else "No"),
            )
        )
        findings = "".join(
            f'<div class="finding"><span class="badge {f.severity.css_class}">'
            f"{esc(f.severity.value)}</span> <strong>{esc(f.title)}</strong>"
            f"<p>{esc(f.description)}</p>"
            + (f"<p><em>{esc(f.recommendation)}</em></p>" if f.recommendation else "")
            + "</div>"
            for f in analysis_findings(result)
        )
        recs = "".join(f"<li>{esc(r)}</li>" for r in result.recommendations)
        return (
            f'<div class="section"><h2>{esc(result.masked)}</h2>'
            f"<table>{rows}</table>{findings}"
            f"<h2>Recommendations</h2><ul>{recs}</ul></div>"
        )

    @staticmethod
    def _report_section(report: SecurityReport) -> str:
        rows = "".join(
            f"<tr><td>{html.escape(label)}</td><td>{count}</td></tr>"
            for label, count in report.strength_distribution.items()
        )
        return (
            '<div class="section"><h2>Security Report</h2>'
            f"<p>Total analysed: {report.total_analyzed} | "
            f"Compromised: {report.compromised_count} | "
            f"Average entropy: {report.average_entropy:.1f} bits</p>"
            f"<table><tr><th>Strength</th><th>Count</th></tr>{rows}</table></div>"
        )
