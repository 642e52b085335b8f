import json

from shared.console import WardenConsole
from shared.models import Finding, Severity

from keywarden.output.console import KeywardenConsoleOutput
from keywarden.output.findings import analysis_findings, strength_severity
from keywarden.output.report import KeywardenReportGenerator
from keywarden.core.models import StrengthLabel


def test_findings_for_breached_password(analyzer):
    findings = analysis_findings(analyzer.analyze("password"))
    titles = [f.title for f in findings]
    assert titles[0] == "Password Strength: Weak"
    assert "Password Found in Breach Database" in titles
    assert "Common Password" in titles
    breach = findings[titles.index("Password Found in Breach Database")]
    assert breach.severity is Severity.CRITICAL
    assert "last_seen" in breach.evidence


def test_findings_for_strong_password(analyzer):
    findings = analysis_findings(analyzer.analyze("aB3$fG7*kL9#xQ2!"))
    assert len(findings) == 1
    assert findings[0].severity is Severity.INFO


def test_strength_severity_scale():
    assert strength_severity(StrengthLabel.VERY_WEAK) is Severity.CRITICAL
    assert strength_severity(StrengthLabel.STRONG) is Severity.LOW


def test_finding_evidence_is_serialised():
    finding = Finding(severity=Severity.LOW, title="t", description="d", evidence={"a": 1})
    assert json.loads(finding.evidence) == {"a": 1}


def test_json_report_wraps_models(toolkit):
    outcome = toolkit.analyze_password("Tr0ub4dor&3")
    doc = json.loads(KeywardenReportGenerator().to_json(outcome.value, kind="analysis"))
    assert doc["report_metadata"]["tool"] == "keywarden"
    assert doc["data"]["strength"] == "Strong"


def test_html_report_includes_security_report(toolkit, tmp_path):
    toolkit.generate_password()
    report = toolkit.generate_security_report()
    analysis = toolkit.analyze_password("password").value
    path = KeywardenReportGenerator().generate_html(
        [analysis], tmp_path / "out" / "report.html", security_report=report
    )
    content = path.read_text(encoding="utf-8")
    assert "Security Report" in content
    assert "p******d" in content
    assert "severity-critical" in content


def test_console_renders_without_error(toolkit):
    console = WardenConsole()
    display = KeywardenConsoleOutput(console)
    with console.rich.capture() as capture:
        display.display_analysis(toolkit.analyze_password("[b]old[/b]").value, show_password=True)
        display.display_bulk(toolkit.check_passwords_in_bulk(["password", ""]))
        display.display_passwords(toolkit.generate_multiple_passwords(2))
        display.display_passphrase(toolkit.generate_passphrase())
        display.display_report(toolkit.generate_security_report())
    text = capture.get()
    assert "[b]old[/b]" in text
    assert "Bulk Password Check" in text
    assert "Security Report" in text
