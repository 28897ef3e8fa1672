"""
Cafe: 咖啡馆门面（无状态）

职责：
- 生成冲煮 / 出餐的描述文本
- 提供营业状态查询（恒为营业中）

注意：serve() 只读取订单的 drink/size 生成文本，不调用 order.serve()，
也不修改订单状态；需要标记已出餐时由调用方自行调用 order.serve()。
"""
from __future__ import annotations

from .domain import CoffeeOrder


class Cafe:
    """无状态门面，不持有任何订单引用。"""

    def is_open(self) -> bool:
        return True

    def brew(self, drink: str) -> str:
        return f"Brewing {drink}..."

    def serve(self, order: CoffeeOrder) -> str:
        return f"Serving {order.drink} ({order.size})"
