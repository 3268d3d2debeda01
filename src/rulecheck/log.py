"""診断ログの初期化。"""

import logging

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """rulecheckロガーを標準エラー出力向けに設定する。

    検証レポート本体は標準出力に書かれるため、ログとは混在しない。
    既存のハンドラは破棄するので、複数回呼び出しても出力は重複しない。
    """
    logger = logging.getLogger("rulecheck")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
