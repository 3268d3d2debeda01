"""検証ツールのコマンドラインエントリポイント。

各コマンドは引数を取らず、カレントディレクトリ（またはRULECHECK_ROOT_DIR）を
リポジトリルートとして検証する。ERRORが1件でもあれば終了コード1を返す。
"""

import logging
import sys
from collections.abc import Callable

from rulecheck.config import ValidatorConfig
from rulecheck.log import setup_logging
from rulecheck.models.validation import ValidationReport
from rulecheck.validators.docs import DocumentationValidator
from rulecheck.validators.rules import RuleValidator

logger = logging.getLogger(__name__)


def _run_guarded(run: Callable[[ValidatorConfig], list[ValidationReport]]) -> int:
    """検証を実行し、想定外の例外は失敗メッセージと終了コード1に変換する。"""
    try:
        config = ValidatorConfig()
        setup_logging(config.log_level)
        logger.debug("Validating repository at %s", config.root_dir)
        reports = run(config)
    except Exception as exc:
        logger.debug("Validation aborted", exc_info=True)
        print(f"❌ Validation failed: {exc}", file=sys.stderr)
        return 1
    return max(report.exit_code for report in reports)


def _rules(config: ValidatorConfig) -> list[ValidationReport]:
    return [RuleValidator(config).run()]


def _docs(config: ValidatorConfig) -> list[ValidationReport]:
    return [DocumentationValidator(config).run()]


def _all(config: ValidatorConfig) -> list[ValidationReport]:
    return [RuleValidator(config).run(), DocumentationValidator(config).run()]


def validate_rules_main() -> int:
    """validate-rules: ルールディレクトリを検証する。"""
    return _run_guarded(_rules)


def validate_docs_main() -> int:
    """validate-docs: プロジェクトドキュメントを検証する。"""
    return _run_guarded(_docs)


def main() -> int:
    """rulecheck: ルールとドキュメントを続けて検証する。"""
    return _run_guarded(_all)
