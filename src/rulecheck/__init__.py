"""Cursorルールフレームワークのルール・ドキュメント検証ツール。"""

__version__ = "1.2.0"
