import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import cast

from typing_extensions import NotRequired, ReadOnly, Required, TypedDict

PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"
DISTRIBUTION_NAME = "pytoolkit-optional"


class ProjectInfo(TypedDict):
    """[project]セクションの型定義"""

    name: ReadOnly[Required[str]]
    version: ReadOnly[NotRequired[str]]
    description: ReadOnly[NotRequired[str]]
    dependencies: ReadOnly[NotRequired[list[str]]]


class PyProjectToml(TypedDict, total=False):
    """pyproject.toml全体の型定義

    https://peps.python.org/pep-0621/
    """

    project: ReadOnly[Required[ProjectInfo]]


def get_package_metadata(path: Path = PYPROJECT_PATH) -> PyProjectToml:
    """
    パッケージのメタデータを返す。

    ソースツリーに pyproject.toml がない場合（通常のインストール時）は、
    インストール済みディストリビューションのメタデータから組み立てる。
    """
    if path.is_file():
        with path.open("rb") as f:
            return cast(PyProjectToml, tomllib.load(f))

    try:
        installed_version = version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        installed_version = "unknown"
    return {"project": {"name": DISTRIBUTION_NAME, "version": installed_version}}


METADATA = get_package_metadata()
NAME = METADATA["project"]["name"]
VERSION = METADATA["project"].get("version", "unknown")
