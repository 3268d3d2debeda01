"""検証ツールの設定管理。"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_CORE_FILES: list[str] = [
    "README.md",
    "CHANGELOG.md",
    "CONTRIBUTING.md",
    "CODE_OF_CONDUCT.md",
    "LICENSE",
]

DEFAULT_RECOMMENDED_DOCS: list[str] = [
    "docs/README.md",
    "docs/getting-started.md",
    "docs/rule-organization.md",
]


class ValidatorConfig(BaseSettings):
    """検証設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "RULECHECK_"}

    root_dir: Path = Field(default_factory=Path.cwd)
    rules_dir: Path = Path(".cursor") / "rules"
    rule_extension: str = ".mdc"
    docs_dir: Path = Path("docs")
    examples_dir: Path = Path("examples")

    core_files: list[str] = Field(default_factory=lambda: list(DEFAULT_CORE_FILES))
    recommended_docs: list[str] = Field(default_factory=lambda: list(DEFAULT_RECOMMENDED_DOCS))

    # ルール本文のしきい値
    max_description_length: int = 200
    min_rule_length: int = 100

    log_level: str = "WARNING"

    def resolve(self, path: Path | str) -> Path:
        """root_dirを基準にパスを解決する。絶対パスはそのまま返す。"""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.root_dir / candidate
