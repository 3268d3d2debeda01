"""ルールファイル（.mdc）の検証ロジック。"""

import logging
import re
from pathlib import Path
from typing import Any

from rulecheck.config import ValidatorConfig
from rulecheck.models.errors import RulecheckError
from rulecheck.models.validation import ValidationReport
from rulecheck.reporting import ConsoleReporter
from rulecheck.storage.files import FileStore
from rulecheck.validators.frontmatter import split_frontmatter
from rulecheck.validators.markdown import scan_markdown

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = ("description", "globs", "alwaysApply")

# 誤記の可能性が高いglobパターン
_SUSPICIOUS_GLOB_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\*\*\*+"),
    re.compile(r"//"),
    re.compile(r"\s"),
)


class RuleValidator:
    """ルールディレクトリ内の各ルールファイルの形式と構造を検証する。"""

    def __init__(
        self,
        config: ValidatorConfig,
        store: FileStore | None = None,
        reporter: ConsoleReporter | None = None,
    ) -> None:
        self._config = config
        self._store = store or FileStore(config.root_dir)
        self._reporter = reporter or ConsoleReporter()
        self.report = ValidationReport()

    def run(self) -> ValidationReport:
        """ルールディレクトリを検証し、サマリーを出力する。"""
        self._reporter.banner("Rule Validator")
        self.validate_directory(self._config.resolve(self._config.rules_dir))
        self._reporter.summary(
            self.report,
            title="Validation Summary",
            success_message="🎉 All rules are valid!",
            warning_hint="recommended fixes",
        )
        return self.report

    def validate_directory(self, directory: Path) -> bool:
        """ディレクトリ直下の全ルールファイルを検証する。

        ディレクトリが存在しない場合は通知のみ行い、検証件数0で終了する。

        Returns:
            全ファイルにERRORが無ければTrue。
        """
        extension = self._config.rule_extension
        if not directory.is_dir():
            self._reporter.notice(f"❌ Directory {directory} does not exist")
            return True

        files = self._store.list_files(directory, extension)
        if not files:
            self._reporter.notice(f"⚠️  No {extension} files found in {directory}")
            return True

        self._reporter.notice(f"🔍 Found {len(files)} rule files to validate\n")
        results = [self.validate_rule(path) for path in files]
        return all(results)

    def validate_rule(self, path: Path) -> bool:
        """単一のルールファイルを検証する。

        Returns:
            このファイルについてERRORが記録されなければTrue。
        """
        name = path.name
        self._reporter.file_started(name)

        try:
            content = self._store.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            self._error(name, f"Failed to read file: {exc}")
            self._reporter.file_finished(name, False)
            return False

        try:
            metadata, body = split_frontmatter(content)
        except RulecheckError as exc:
            self._error(name, str(exc))
            self._reporter.file_finished(name, False)
            return False

        self._validate_metadata(name, metadata)
        self._validate_body(name, body)

        self.report.files_validated += 1
        valid = not self.report.has_errors_for(name)
        self._reporter.file_finished(name, valid)
        return valid

    def _validate_metadata(self, name: str, metadata: dict[str, Any]) -> None:
        """必須フィールドの有無と型を検証する。各違反は個別に記録し、検証を継続する。"""
        for field in REQUIRED_FIELDS:
            if field not in metadata:
                self._error(name, f"Missing required field: {field}")

        # null値は型チェックの対象外
        description = metadata.get("description")
        if description is not None:
            if not isinstance(description, str):
                self._error(name, "description must be a string")
            elif len(description) > self._config.max_description_length:
                self._warning(
                    name,
                    f"description is quite long (>{self._config.max_description_length} chars), "
                    "consider shortening",
                )

        globs = metadata.get("globs")
        if globs is not None:
            if not isinstance(globs, str):
                self._error(name, "globs must be a string")
            else:
                self._validate_globs(name, globs)

        always_apply = metadata.get("alwaysApply")
        if always_apply is not None and not isinstance(always_apply, bool):
            self._error(name, "alwaysApply must be a boolean (true/false)")

    def _validate_globs(self, name: str, globs: str) -> None:
        for pattern in _SUSPICIOUS_GLOB_PATTERNS:
            if pattern.search(globs):
                self._warning(name, f"Potentially problematic glob pattern: {globs}")
                break

    def _validate_body(self, name: str, body: str) -> None:
        if not body:
            self._error(name, "Rule content cannot be empty")
            return

        if "#" not in body:
            self._warning(name, "Rule should include markdown headings for better structure")

        if len(body) < self._config.min_rule_length:
            self._warning(name, "Rule content is quite short, consider adding more detail")

        scan = scan_markdown(body)
        for line_number in scan.unbalanced_lines:
            self._warning(name, f"Line {line_number}: Unbalanced backticks")
        if scan.unclosed_code_block:
            self._error(name, "Unclosed code block")

    def _error(self, name: str, message: str) -> None:
        logger.debug("Rule error in %s: %s", name, message)
        self._reporter.finding(self.report.add_error(name, message))

    def _warning(self, name: str, message: str) -> None:
        self._reporter.finding(self.report.add_warning(name, message))
