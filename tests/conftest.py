"""テスト共通フィクスチャ。"""

import io
from pathlib import Path

import pytest

from rulecheck.config import ValidatorConfig
from rulecheck.reporting import ConsoleReporter
from rulecheck.storage.files import FileStore

README = """# Cursor Rule Framework

![badge](https://img.shields.io/badge/license-MIT-green)

## Quick Start

Install the framework and read the [getting started guide](docs/getting-started.md).

## Usage

See the examples directory for complete projects.

## Contributing

Read [CONTRIBUTING.md](CONTRIBUTING.md) before opening a pull request.

## License

MIT, see [LICENSE](LICENSE).
"""

CHANGELOG = """# Changelog

All notable changes to this project will be documented in this file.

The format is based on Keep a Changelog, and this project adheres to Semantic Versioning.

## [Unreleased]

## [1.2.0] - 2025-01-15

### Added
- Rule validation scripts.
"""

CONTRIBUTING = """# Contributing

## Development Setup

Clone the repository and install the validators.

## Pull Request Process

Open a pull request against main once validation passes.

## Reporting Issues

Use the issue tracker for bug reports.

## Code of Conduct

Please follow our [Code of Conduct](CODE_OF_CONDUCT.md).
"""

CODE_OF_CONDUCT = """# Code of Conduct

Be respectful and constructive in every interaction with other contributors.
"""

LICENSE = "MIT License\n\nCopyright (c) 2025 Cursor Rule Framework contributors\n"

DOCS = {
    "docs/README.md": (
        "# Documentation\n\n"
        "Start with the [getting started guide](getting-started.md) and then read about "
        "[rule organization](rule-organization.md#layout).\n"
    ),
    "docs/getting-started.md": (
        "# Getting Started\n\n"
        "Copy the `.cursor/rules` directory into your project and run the validators.\n"
    ),
    "docs/rule-organization.md": (
        "# Rule Organization\n\n"
        "## Layout\n\n"
        "Rules live in `.cursor/rules` and each file starts with YAML frontmatter.\n\n"
        "```yaml\n"
        'description: "Example"\n'
        "```\n"
    ),
    "examples/basic/README.md": (
        "# Basic Example\n\n"
        "A minimal project showing how to organize rules. "
        "Back to the [docs](../../docs/README.md).\n"
    ),
}


def write_file(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """テスト用の空リポジトリルート。"""
    root = tmp_path / "repo"
    root.mkdir()
    return root


@pytest.fixture
def rules_dir(repo_root: Path) -> Path:
    """テスト用のルールディレクトリ。"""
    path = repo_root / ".cursor" / "rules"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def docs_repo(repo_root: Path) -> Path:
    """全チェックを通過するドキュメント一式を配置したリポジトリ。"""
    write_file(repo_root, "README.md", README)
    write_file(repo_root, "CHANGELOG.md", CHANGELOG)
    write_file(repo_root, "CONTRIBUTING.md", CONTRIBUTING)
    write_file(repo_root, "CODE_OF_CONDUCT.md", CODE_OF_CONDUCT)
    write_file(repo_root, "LICENSE", LICENSE)
    for relative, content in DOCS.items():
        write_file(repo_root, relative, content)
    return repo_root


@pytest.fixture
def config(repo_root: Path) -> ValidatorConfig:
    """テスト用ValidatorConfig。"""
    return ValidatorConfig(root_dir=repo_root)


@pytest.fixture
def stream() -> io.StringIO:
    """レポート出力先。"""
    return io.StringIO()


@pytest.fixture
def reporter(stream: io.StringIO) -> ConsoleReporter:
    """テスト用ConsoleReporter。"""
    return ConsoleReporter(stream=stream)


@pytest.fixture
def store(repo_root: Path) -> FileStore:
    """テスト用FileStore。"""
    return FileStore(repo_root)
