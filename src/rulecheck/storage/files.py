"""リポジトリ内ファイルへの読み取り専用アクセス層。"""

import logging
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


class FileStore:
    """検証対象リポジトリのファイルを列挙・読み込みする。

    書き込み操作は持たない。列挙結果は常にソート済みで返すため、
    同じファイルツリーに対する検証結果は実行ごとに同一になる。
    """

    def __init__(self, root_dir: Path) -> None:
        self._root_dir = root_dir

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    def relative_name(self, path: Path) -> str:
        """root_dirからの相対パス（POSIX形式）を返す。root外ならファイル名のみ。"""
        try:
            return path.relative_to(self._root_dir).as_posix()
        except ValueError:
            return path.name

    def read_text(self, path: Path) -> str:
        """ファイルをUTF-8として読み込む。先頭のBOMは除去する。

        Raises:
            OSError: 読み込みに失敗した場合。
            UnicodeDecodeError: UTF-8として解釈できない場合。
        """
        return path.read_text(encoding="utf-8-sig")

    def list_files(self, directory: Path, suffix: str) -> list[Path]:
        """ディレクトリ直下で拡張子が一致するファイルを返す。"""
        if not directory.is_dir():
            return []
        return sorted(p for p in directory.iterdir() if p.is_file() and p.name.endswith(suffix))

    def iter_markdown_files(self, directory: Path) -> Iterator[Path]:
        """ディレクトリ配下のMarkdownファイルを再帰的に列挙する。"""
        for entry in sorted(directory.iterdir()):
            if entry.is_dir():
                yield from self.iter_markdown_files(entry)
            elif entry.name.endswith(MARKDOWN_SUFFIX):
                yield entry
            else:
                logger.debug("Skipping non-markdown file: %s", entry)

    def list_subdirectories(self, directory: Path) -> list[Path]:
        """ディレクトリ直下のサブディレクトリを返す。"""
        if not directory.is_dir():
            return []
        return sorted(p for p in directory.iterdir() if p.is_dir())
