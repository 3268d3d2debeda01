"""rulecheckのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    from rulecheck.cli import main

    raise SystemExit(main())
