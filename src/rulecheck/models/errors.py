"""rulecheckのカスタム例外クラス。"""


class RulecheckError(Exception):
    """rulecheckの基底例外クラス。"""


class FrontmatterNotFoundError(RulecheckError):
    """フロントマターの区切り行が不足している場合の例外。"""

    def __init__(self) -> None:
        super().__init__("Missing YAML frontmatter")


class FrontmatterParseError(RulecheckError):
    """フロントマターをYAMLとして解釈できない場合の例外。"""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid YAML: {detail}")
        self.detail = detail
