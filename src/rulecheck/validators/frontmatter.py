"""ルールファイルのYAMLフロントマター分割・解析。"""

from typing import Any

import yaml

from rulecheck.models.errors import FrontmatterNotFoundError, FrontmatterParseError

DELIMITER = "---"


def split_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """ルールファイルをメタデータと本文に分割する。

    最初の2つの "---" 行で囲まれた部分をYAMLとして解析し、
    2つ目の区切り行以降を本文とする。本文の前後の空白は除去する。

    Raises:
        FrontmatterNotFoundError: 区切り行が2つ未満の場合。
        FrontmatterParseError: YAMLとして解析できない、またはマッピングでない場合。
    """
    lines = content.split("\n")
    delimiters = [i for i, line in enumerate(lines) if line.strip() == DELIMITER]
    if len(delimiters) < 2:
        raise FrontmatterNotFoundError()

    start, end = delimiters[0], delimiters[1]
    raw = "\n".join(lines[start + 1 : end])
    try:
        metadata = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise FrontmatterParseError(str(exc)) from exc

    # 空のフロントマターは全フィールド欠落として扱う
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise FrontmatterParseError("frontmatter must be a mapping of fields")

    body = "\n".join(lines[end + 1 :]).strip()
    return metadata, body
