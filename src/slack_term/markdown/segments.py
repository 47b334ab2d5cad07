"""コードブロックとインラインテキストの分割"""

import re
from dataclasses import dataclass

# ```lang\ncode``` または ```code```（言語指定は開きフェンスと同じ行のみ）
CODE_BLOCK_PATTERN = re.compile(r"```(?:(\w*)\n)?(.*?)```", re.DOTALL)


@dataclass(frozen=True)
class CodeSegment:
    """フェンスで囲まれたコードブロック"""

    language: str  # 言語指定（なければ空文字列）
    code: str  # フェンスを除いた中身（改行含めそのまま）
    raw: str  # フェンスを含む元のテキスト


@dataclass(frozen=True)
class TextSegment:
    """コードブロック以外のテキスト"""

    text: str

    @property
    def raw(self) -> str:
        return self.text


Segment = CodeSegment | TextSegment


def split_code_blocks(text: str) -> list[Segment]:
    """テキストをコードブロックとそれ以外に分割する。

    分割結果の raw を順に連結すると元のテキストに戻る。
    コードブロックがなければテキスト全体を1つの TextSegment として返す。
    """
    segments: list[Segment] = []
    prev = 0
    for match in CODE_BLOCK_PATTERN.finditer(text):
        if match.start() > prev:
            segments.append(TextSegment(text[prev : match.start()]))
        segments.append(
            CodeSegment(
                language=match.group(1) or "",
                code=match.group(2),
                raw=match.group(0),
            )
        )
        prev = match.end()

    if not segments:
        return [TextSegment(text)]

    if prev < len(text):
        segments.append(TextSegment(text[prev:]))
    return segments
