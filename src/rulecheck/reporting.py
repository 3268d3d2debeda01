"""検証結果のコンソール出力。"""

import sys
from typing import TextIO

from rulecheck.models.validation import Finding, ValidationReport


class ConsoleReporter:
    """行単位の人間向けレポートを出力する。

    出力例:
        🔍 Validating core.mdc...
        ⚠️  core.mdc: Line 12: Unbalanced backticks
        ✅ core.mdc is valid

    JSON等の機械可読形式は持たない。
    """

    ERROR_GLYPH = "❌"
    WARNING_GLYPH = "⚠️ "

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self._stream)

    def banner(self, title: str) -> None:
        line = f"🎯 Cursor Rule Framework - {title}"
        self._print(line)
        self._print("=" * len(line) + "\n")

    def section(self, title: str) -> None:
        self._print(f"{title}\n")

    def notice(self, message: str) -> None:
        self._print(message)

    def file_started(self, name: str) -> None:
        self._print(f"🔍 Validating {name}...")

    def file_finished(self, name: str, valid: bool) -> None:
        if valid:
            self._print(f"✅ {name} is valid")
        else:
            self._print(f"{self.ERROR_GLYPH} {name} has errors")

    def finding(self, finding: Finding) -> None:
        glyph = self.ERROR_GLYPH if finding.severity == "error" else self.WARNING_GLYPH
        self._print(f"{glyph} {finding.file}: {finding.message}")

    def summary(
        self,
        report: ValidationReport,
        *,
        title: str,
        success_message: str,
        warning_hint: str,
        show_links: bool = False,
    ) -> None:
        """集計結果とエラー・警告の一覧を出力する。

        Args:
            report: 出力対象の検証結果。
            title: サマリー見出し。
            success_message: エラー・警告が0件のときに出力する一文。
            warning_hint: 警告一覧の見出しに添える補足。
            show_links: チェックしたリンク数を表示するかどうか。
        """
        heading = f"📊 {title}"
        self._print(f"\n{heading}")
        self._print("=" * len(heading))
        self._print(f"Files validated: {report.files_validated}")
        if show_links:
            self._print(f"Links checked: {len(report.links)}")
        errors = report.errors
        warnings = report.warnings
        self._print(f"Errors: {len(errors)}")
        self._print(f"Warnings: {len(warnings)}")

        if not errors and not warnings:
            self._print(success_message)
            return

        if errors:
            self._print(f"\n{self.ERROR_GLYPH} Errors (must be fixed):")
            for item in errors:
                self._print(f"  • {item.file}: {item.message}")

        if warnings:
            self._print(f"\n{self.WARNING_GLYPH} Warnings ({warning_hint}):")
            for item in warnings:
                self._print(f"  • {item.file}: {item.message}")
