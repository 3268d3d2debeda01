"""ルール本文とドキュメントで共通のMarkdown構造チェック。"""

import re

from pydantic import BaseModel, Field

CODE_FENCE = "```"

# [text](target) 形式のインラインリンク
_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


class MarkdownScan(BaseModel):
    """Markdownを1行ずつ走査した結果。"""

    has_heading: bool = False
    unbalanced_lines: list[int] = Field(default_factory=list)
    unclosed_code_block: bool = False
    links: list[tuple[int, str]] = Field(default_factory=list)


def scan_markdown(content: str) -> MarkdownScan:
    """コードフェンスの開閉を追跡しながらMarkdownを走査する。

    フェンス行自体はインラインコードとして数えない。
    リンクはフェンスの内外を問わず抽出する。

    Args:
        content: 走査対象のMarkdown本文。

    Returns:
        見出しの有無、バッククォートの不整合行、未閉鎖フェンス、リンク一覧。
    """
    scan = MarkdownScan()
    in_code_block = False

    for line_number, line in enumerate(content.split("\n"), start=1):
        stripped = line.strip()

        for match in _LINK_PATTERN.finditer(line):
            scan.links.append((line_number, match.group(2)))

        if stripped.startswith("#"):
            scan.has_heading = True

        if stripped.startswith(CODE_FENCE):
            in_code_block = not in_code_block
            continue
        if in_code_block:
            continue

        if line.count("`") % 2 != 0:
            scan.unbalanced_lines.append(line_number)

    scan.unclosed_code_block = in_code_block
    return scan
