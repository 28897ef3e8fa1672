"""
Domain models: 统一的咖啡订单定义

只在此处定义 CoffeeOrder，其他模块一律从这里导入，避免重复定义。
"""
from __future__ import annotations

import logging
from typing import Literal, Dict


logger = logging.getLogger(__name__)

OrderStatus = Literal["ordered", "prepared", "served"]


class CoffeeOrder:
    """咖啡订单实体

    - drink: 饮品名称，创建后只读
    - size : 杯型（small / medium / large 等，不做校验），创建后只读
    - status: 'ordered' | 'prepared' | 'served'（默认 ordered）

    状态流转：ordered --prepare--> prepared --serve--> served
    prepare()/serve() 不检查当前状态，任意时刻调用都直接覆盖 status。
    """

    def __init__(self, drink: str, size: str) -> None:
        self._drink = drink
        self._size = size
        self._status: OrderStatus = "ordered"

    def __repr__(self) -> str:
        return f"CoffeeOrder(drink={self._drink!r}, size={self._size!r}, status={self._status!r})"

    @property
    def drink(self) -> str:
        return self._drink

    @property
    def size(self) -> str:
        return self._size

    @property
    def status(self) -> OrderStatus:
        return self._status

    # -------------------- 状态流转 --------------------

    def prepare(self) -> None:
        """置为 prepared。"""
        self._set_status("prepared")

    def serve(self) -> None:
        """置为 served（允许跳过 prepare）。"""
        self._set_status("served")

    def _set_status(self, status: OrderStatus) -> None:
        logger.debug("order %s %s: %s -> %s", self._drink, self._size, self._status, status)
        self._status = status

    # -------------------- 查询 --------------------

    def is_prepared(self) -> bool:
        return self._status == "prepared"

    def is_served(self) -> bool:
        return self._status == "served"

    def to_dict(self) -> Dict[str, str]:
        """返回只读快照，供 CLI 展示。"""
        return {"drink": self._drink, "size": self._size, "status": self._status}
