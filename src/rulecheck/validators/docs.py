"""プロジェクトドキュメントの構造・内容・内部リンクの検証ロジック。"""

import logging
import re
from pathlib import Path

from rulecheck.config import ValidatorConfig
from rulecheck.models.validation import LinkReference, ValidationReport
from rulecheck.reporting import ConsoleReporter
from rulecheck.storage.files import MARKDOWN_SUFFIX, FileStore
from rulecheck.validators.markdown import scan_markdown

logger = logging.getLogger(__name__)

CORE_FILES_LABEL = "Core Files"
DOCS_LABEL = "Documentation"
EXAMPLES_LABEL = "Examples"

README_NAME = "README.md"
CHANGELOG_NAME = "CHANGELOG.md"
CONTRIBUTING_NAME = "CONTRIBUTING.md"

_EXTERNAL_SCHEMES: tuple[str, ...] = ("http://", "https://")

# ルートREADMEに期待するセクション（パターン, 表示名）
_README_SECTIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (
        re.compile(r"^#\s+.*(?:cursor|rule|framework)", re.IGNORECASE | re.MULTILINE),
        "Title with keywords (Cursor, Rule, Framework)",
    ),
    (
        re.compile(r"installation|getting started|quick start", re.IGNORECASE),
        "Installation/Getting Started section",
    ),
    (re.compile(r"usage|how to|examples", re.IGNORECASE), "Usage/Examples section"),
    (re.compile(r"contributing", re.IGNORECASE), "Contributing section"),
    (re.compile(r"license", re.IGNORECASE), "License section"),
)

_CONTRIBUTING_SECTIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"getting started|development setup", re.IGNORECASE), "Development setup section"),
    (re.compile(r"pull request|contribution process", re.IGNORECASE), "Pull request process section"),
    (re.compile(r"issue|bug report", re.IGNORECASE), "Issue reporting section"),
    (re.compile(r"code of conduct", re.IGNORECASE), "Code of conduct reference"),
)

_VERSION_HEADING = re.compile(r"##\s+\[\d+\.\d+\.\d+\]")

# 見出し・短文チェックのしきい値
_HEADING_REQUIRED_LENGTH = 100
_SHORT_CONTENT_LENGTH = 50
_PLACEHOLDER_MARKERS: tuple[str, ...] = ("TODO", "placeholder")


class DocumentationValidator:
    """コアドキュメント、docsツリー、examplesのREADMEを検証する。

    検証は4つのパスで構成され、前のパスでエラーが出ても全パスを実行する。
    1. コアファイルの存在と内容
    2. docsディレクトリ配下のMarkdown
    3. examples配下の各サンプルのREADME
    4. 収集した相対リンクの解決
    """

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
        """全パスを実行し、サマリーを出力する。"""
        self._reporter.banner("Documentation Validator")
        self.validate_core_files()
        self.validate_docs_directory()
        self.validate_examples_directory()
        self.validate_internal_links()
        self._reporter.summary(
            self.report,
            title="Documentation Validation Summary",
            success_message="🎉 All documentation is valid!",
            warning_hint="recommended improvements",
            show_links=True,
        )
        return self.report

    def validate_core_files(self) -> None:
        self._reporter.section("📋 Validating core files...")
        for file_name in self._config.core_files:
            path = self._config.resolve(file_name)
            if path.is_file():
                self.validate_file(path)
            else:
                self._error(CORE_FILES_LABEL, f"Missing required file: {file_name}")

    def validate_docs_directory(self) -> None:
        self._reporter.section("📚 Validating docs directory...")
        docs_dir = self._config.resolve(self._config.docs_dir)
        if not docs_dir.is_dir():
            self._error(DOCS_LABEL, "Missing docs directory")
            return

        for path in self._store.iter_markdown_files(docs_dir):
            self.validate_file(path)

        for doc in self._config.recommended_docs:
            if not self._config.resolve(doc).exists():
                self._warning(DOCS_LABEL, f"Recommended doc missing: {doc}")

    def validate_examples_directory(self) -> None:
        self._reporter.section("🛠️  Validating examples directory...")
        examples_dir = self._config.resolve(self._config.examples_dir)
        if not examples_dir.is_dir():
            self._warning(EXAMPLES_LABEL, "Missing examples directory")
            return

        for example in self._store.list_subdirectories(examples_dir):
            readme = example / README_NAME
            if readme.is_file():
                self.validate_file(readme)
            else:
                self._warning(EXAMPLES_LABEL, f"Example {example.name} missing {README_NAME}")

    def validate_file(self, path: Path) -> None:
        """単一ファイルの汎用チェックとファイル固有のチェックを行う。"""
        name = self._store.relative_name(path)
        self._reporter.file_started(name)

        try:
            content = self._store.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            self._error(name, f"Failed to read file: {exc}")
            self._reporter.file_finished(name, False)
            return

        if not content:
            self._error(name, "File is empty")
            self._reporter.file_finished(name, False)
            return

        if path.name.endswith(MARKDOWN_SUFFIX):
            self._validate_markdown(name, content)

        if name == README_NAME:
            self._validate_readme(name, content)
        elif path.name == CHANGELOG_NAME:
            self._validate_changelog(name, content)
        elif path.name == CONTRIBUTING_NAME:
            self._validate_contributing(name, content)

        self.report.files_validated += 1
        self._reporter.file_finished(name, not self.report.has_errors_for(name))

    def validate_internal_links(self) -> None:
        """収集したリンクのうち、ローカルファイルを指すものの存在を確認する。"""
        self._reporter.section("🔗 Validating internal links...")
        for link in self.report.links:
            target = self._resolve_link(link)
            if target is None:
                continue
            if not target.exists():
                self._error(
                    link.source_file,
                    f"Broken link on line {link.line_number}: {link.target_url}",
                )

    def _resolve_link(self, link: LinkReference) -> Path | None:
        """リンク先のローカルパスを返す。検証対象外のリンクはNone。"""
        url = link.target_url
        if url.startswith(_EXTERNAL_SCHEMES):
            return None
        # mailto: などのプロトコル付きリンク
        if ":" in url:
            return None

        target = url.split("#", 1)[0]
        if not target:
            return None

        if target.startswith("/"):
            resolved = self._config.root_dir / target.lstrip("/")
        else:
            resolved = self._config.resolve(link.source_file).parent / target
        logger.debug("Resolved link %s in %s to %s", url, link.source_file, resolved)
        return resolved

    def _validate_markdown(self, name: str, content: str) -> None:
        scan = scan_markdown(content)

        for line_number in scan.unbalanced_lines:
            self._warning(name, f"Line {line_number}: Unbalanced backticks")

        for line_number, url in scan.links:
            self.report.add_link(
                LinkReference(source_file=name, target_url=url, line_number=line_number)
            )

        if scan.unclosed_code_block:
            self._error(name, "Unclosed code block")

        if not scan.has_heading and len(content) > _HEADING_REQUIRED_LENGTH:
            self._warning(name, "Document should have at least one heading")

        if len(content) < _SHORT_CONTENT_LENGTH and not any(
            marker in content for marker in _PLACEHOLDER_MARKERS
        ):
            self._warning(name, "Document content is very short")

    def _validate_readme(self, name: str, content: str) -> None:
        for pattern, section in _README_SECTIONS:
            if not pattern.search(content):
                self._warning(name, f"Missing recommended section: {section}")

        if "![" not in content:
            self._warning(name, "Consider adding badges (build status, license, etc.)")

    def _validate_changelog(self, name: str, content: str) -> None:
        if "Keep a Changelog" not in content:
            self._warning(name, "Consider following Keep a Changelog format")

        if "Semantic Versioning" not in content:
            self._warning(name, "Consider mentioning Semantic Versioning adherence")

        if not _VERSION_HEADING.search(content):
            self._warning(name, "No version entries found")

        if "[Unreleased]" not in content:
            self._warning(name, "Consider adding an [Unreleased] section for upcoming changes")

    def _validate_contributing(self, name: str, content: str) -> None:
        for pattern, section in _CONTRIBUTING_SECTIONS:
            if not pattern.search(content):
                self._warning(name, f"Consider adding: {section}")

    def _error(self, name: str, message: str) -> None:
        logger.debug("Documentation error in %s: %s", name, message)
        self._reporter.finding(self.report.add_error(name, message))

    def _warning(self, name: str, message: str) -> None:
        self._reporter.finding(self.report.add_warning(name, message))
