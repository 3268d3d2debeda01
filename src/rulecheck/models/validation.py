"""検証結果関連のデータモデル。"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["error", "warning"]


class Finding(BaseModel):
    """単一の検証結果（エラーまたは警告）。"""

    model_config = ConfigDict(frozen=True)

    file: str
    message: str
    severity: Severity


class LinkReference(BaseModel):
    """Markdownから抽出したリンク参照。"""

    model_config = ConfigDict(frozen=True)

    source_file: str
    target_url: str
    line_number: int


class ValidationReport(BaseModel):
    """1回の検証実行で蓄積される結果。

    findingsは発見順、linksは重複を除いた登録順を保持する。
    """

    findings: list[Finding] = Field(default_factory=list)
    links: list[LinkReference] = Field(default_factory=list)
    files_validated: int = 0

    @property
    def errors(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == "error"]

    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == "warning"]

    @property
    def success(self) -> bool:
        """ERRORが1件もなければ成功。WARNINGは影響しない。"""
        return not self.errors

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    def add_error(self, file: str, message: str) -> Finding:
        finding = Finding(file=file, message=message, severity="error")
        self.findings.append(finding)
        return finding

    def add_warning(self, file: str, message: str) -> Finding:
        finding = Finding(file=file, message=message, severity="warning")
        self.findings.append(finding)
        return finding

    def add_link(self, link: LinkReference) -> bool:
        """リンクを登録する。既に登録済みの場合はFalseを返す。"""
        if link in self.links:
            return False
        self.links.append(link)
        return True

    def has_errors_for(self, file: str) -> bool:
        return any(f.file == file and f.severity == "error" for f in self.findings)
