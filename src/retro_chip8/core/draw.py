# retro_chip8/core/draw.py
"""
描画要求（DrawAction）の定義。
"""
from dataclasses import dataclass
from typing import Tuple

PixelRow = Tuple[bool, bool, bool, bool, bool, bool, bool, bool]


# @intent:utility_function 1バイトを8個の真偽値に展開します。最上位ビットが左端のピクセルになります。
def expand_sprite_byte(value: int) -> PixelRow:
    return tuple(bool(value & (0x80 >> bit)) for bit in range(8))


# @intent:responsibility スプライト描画命令の結果として、外部の描画担当に渡す描画要求を表します。
# @intent:rationale 呼び出し元へ所有権ごと渡すため、行をタプルで保持する不変データとします。
@dataclass(frozen=True) # 不変データ構造
class DrawAction:
    """
    スプライトの原点 (x, y) とピクセル行の列。
    x, y はレジスタ値そのもの（0-255）で、画面サイズによる折り返しは行いません。
    XOR合成や衝突判定は含まれず、スプライトバイトを真偽値へ転記しただけの値です。
    """
    x: int
    y: int
    pixels: Tuple[PixelRow, ...] = ()

    @property
    def height(self) -> int:
        return len(self.pixels)
