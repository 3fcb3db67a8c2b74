"""metadataモジュールのテスト。"""

from pathlib import Path

import pytoolkit_optional
from pytoolkit_optional.metadata import (
    DISTRIBUTION_NAME,
    NAME,
    VERSION,
    get_package_metadata,
)


class TestMetadata:
    """パッケージメタデータのテストクラス。"""

    def test_name(self) -> None:
        """パッケージ名がディストリビューション名と一致する。"""
        assert NAME == DISTRIBUTION_NAME

    def test_version_exported(self) -> None:
        """バージョンがパッケージのトップレベルから参照できる。"""
        assert pytoolkit_optional.VERSION == VERSION
        assert pytoolkit_optional.__version__ == VERSION

    def test_read_pyproject(self, tmp_path: Path) -> None:
        """pyproject.tomlの[project]セクションが読み込まれる。"""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            '[project]\nname = "sample"\nversion = "1.2.3"\n',
            encoding="utf-8",
        )

        metadata = get_package_metadata(pyproject)

        assert metadata["project"]["name"] == "sample"
        assert metadata["project"].get("version") == "1.2.3"

    def test_missing_pyproject(self, tmp_path: Path) -> None:
        """pyproject.tomlがない場合はディストリビューション名が使われる。"""
        metadata = get_package_metadata(tmp_path / "pyproject.toml")

        assert metadata["project"]["name"] == DISTRIBUTION_NAME
        assert metadata["project"].get("version")
