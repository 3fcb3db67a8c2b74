"""
値の有無を明示的に表すためのモジュール。

値を保持しているか、何も保持していないかのどちらかを表すコンテナ `Optional` を提供する。
`None` を不在の目印として使わず、存在フラグと値を組で持つため、`None` や `0`、
空文字列なども「存在する値」として保持できる。
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class Optional(Generic[T]):
    """
    値を保持しているかもしれないし、していないかもしれないコンテナ。

    インスタンスは `of`、`of_nullable`、`empty` のいずれかで作成する。
    作成後に状態が変わることはない。
    """

    _value: T | None
    _present: bool
    _zero: Callable[[], T] | None = None

    @classmethod
    def of(cls, value: T) -> "Optional[T]":
        """
        値を保持するOptionalを作成する。

        Args:
            value: 保持する値。`None` は指定できない

        Raises:
            ValueError: `value` が `None` の場合
        """
        if value is None:
            raise ValueError("Called of with None, use of_nullable instead")
        return cls(value, True)

    @classmethod
    def of_nullable(
        cls,
        value: T | None,
        zero: Callable[[], T] | None = None,
    ) -> "Optional[T]":
        """
        `value` が `None` なら空の、それ以外なら値を保持するOptionalを作成する。

        Args:
            value: 保持する値、または `None`
            zero: 空の場合に `get` が返すゼロ値のファクトリ
        """
        if value is None:
            return cls.empty(zero)
        return cls(value, True)

    @classmethod
    def empty(cls, zero: Callable[[], T] | None = None) -> "Optional[T]":
        """
        空のOptionalを作成する。

        Args:
            zero: `get` が返すゼロ値のファクトリ（`str`、`int` など）
        """
        return cls(None, False, zero)

    def is_present(self) -> bool:
        return self._present

    def is_empty(self) -> bool:
        return not self._present

    def get(self) -> tuple[T | None, bool]:
        """
        値と存在有無の組を返す。

        空の場合はゼロ値（ファクトリがなければ `None`）と `False` を返す。
        存在の判定には必ず2番目の要素を使うこと。
        """
        if self._present:
            return self._value, True
        if self._zero is not None:
            return self._zero(), False
        return None, False

    def or_else(self, fallback: T) -> T:
        if self._present:
            return self._value  # type: ignore[return-value]
        return fallback

    def unwrap(self) -> T:
        if not self._present:
            raise ValueError("Called unwrap on an empty Optional")
        return self._value  # type: ignore[return-value]

    def equals(self, other: "Optional[T]") -> bool:
        """
        両方が空か、両方が値を持ちそれらが等しい場合に `True` を返す。

        リストや辞書などの比較は `==` による要素ごとの比較になる。
        組み込みコンテナと同様に、同一オブジェクトは等しいとみなす。
        """
        if not isinstance(other, Optional):
            return False
        if self._present and other._present:
            if self._value is other._value:
                return True
            return bool(self._value == other._value)
        return not self._present and not other._present

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        if self._present:
            return hash((True, self._value))
        return hash((False,))

    def __str__(self) -> str:
        if self._present:
            return f"Optional[{self._value}]"
        return "Optional.empty"

    def __repr__(self) -> str:
        if self._present:
            return f"Optional.of({self._value!r})"
        return "Optional.empty()"
