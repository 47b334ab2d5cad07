"""保護済み領域を含む作業用ドキュメント

レンダリングの各段は正規表現で書き換えを行うが、すでに描画済みの
マークアップ（メンションやインラインコードなど）は後段から見えては
ならない。作業中のテキストを「生テキスト」と「保護ノード」の列として持ち、
正規表現は保護ノードを1文字のスロットに置き換えたビューに対して実行する。
マッチ位置からノード列へ戻すので、入力中の文字と保護マーカーが
衝突することはない。
"""

from __future__ import annotations

import bisect
import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from slack_term.markdown.style import balance_backslashes

# ビュー上で保護ノード1つを表す文字（位置で対応付けるため値そのものに意味はない）
SLOT = "\x00"


@dataclass(frozen=True)
class Protected:
    """後段の変換から保護された描画済みマークアップ"""

    index: int  # 割り当て順の通し番号
    markup: str


Node = str | Protected
Group = Callable[[int], list[Node]]
Replacer = Callable[[re.Match[str], Group], Sequence[Node]]


def _merge(nodes: Iterable[Node]) -> list[Node]:
    """隣接する生テキストを連結し、空文字列を取り除く"""
    merged: list[Node] = []
    for node in nodes:
        if isinstance(node, str):
            if not node:
                continue
            if merged and isinstance(merged[-1], str):
                merged[-1] += node
                continue
        merged.append(node)
    return merged


class Fragments:
    """生テキストと保護ノードの列"""

    def __init__(self, text: str) -> None:
        self._nodes: list[Node] = _merge([text])
        self._count = 0

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    def protect(self, markup: str) -> Protected:
        """新しい保護ノードを割り当てる（列にはまだ挿入しない）"""
        node = Protected(index=self._count, markup=markup)
        self._count += 1
        return node

    def view(self) -> str:
        """保護ノードを SLOT に置き換えたテキスト"""
        return "".join(node if isinstance(node, str) else SLOT for node in self._nodes)

    def _offsets(self) -> list[int]:
        offsets = []
        pos = 0
        for node in self._nodes:
            offsets.append(pos)
            pos += len(node) if isinstance(node, str) else 1
        return offsets

    def _slice(self, offsets: list[int], start: int, end: int) -> list[Node]:
        """ビュー上の [start, end) に対応するノード列を返す"""
        if start >= end:
            return []
        result: list[Node] = []
        i = max(bisect.bisect_right(offsets, start) - 1, 0)
        while i < len(self._nodes) and offsets[i] < end:
            node = self._nodes[i]
            if isinstance(node, str):
                lo = max(start - offsets[i], 0)
                hi = min(end - offsets[i], len(node))
                result.append(node[lo:hi])
            else:
                result.append(node)
            i += 1
        return result

    def sub(self, pattern: re.Pattern[str], replace: Replacer) -> None:
        """ビューに対して pattern を適用し、マッチ箇所を replace の結果で置き換える。

        replace にはマッチと、グループ番号からそのグループ範囲のノード列を返す
        関数が渡される。保護ノードを含むグループもそのまま取り出せる。
        """
        view = self.view()
        offsets = self._offsets()
        result: list[Node] = []
        prev = 0
        matched = False
        for match in pattern.finditer(view):
            matched = True

            def group(n: int, match: re.Match[str] = match) -> list[Node]:
                if match.start(n) < 0:
                    return []
                return self._slice(offsets, *match.span(n))

            result.extend(self._slice(offsets, prev, match.start()))
            result.extend(replace(match, group))
            prev = match.end()

        if not matched:
            return
        result.extend(self._slice(offsets, prev, len(view)))
        self._nodes = _merge(result)

    def map_text(self, func: Callable[[str], str]) -> None:
        """生テキストのノードだけに func を適用する"""
        self._nodes = _merge(node if isinstance(node, Protected) else func(node) for node in self._nodes)

    @staticmethod
    def markup(nodes: Iterable[Node]) -> str:
        """ノード列を最終的なマークアップ文字列に平坦化する

        生テキストの直後にタグで始まる保護ノードが続く場合は、末尾の "\\" が
        タグを無効化しないよう balance_backslashes を通す。
        """
        nodes = list(nodes)
        parts = []
        for node, following in zip(nodes, [*nodes[1:], None]):
            if isinstance(node, Protected):
                parts.append(node.markup)
            elif isinstance(following, Protected) and following.markup.startswith("["):
                parts.append(balance_backslashes(node))
            else:
                parts.append(node)
        return "".join(parts)

    def restore(self) -> str:
        """保護ノードを描画済みマークアップに戻した最終結果を返す"""
        return self.markup(self._nodes)
