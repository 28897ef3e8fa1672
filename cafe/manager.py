"""
Manager: 咖啡馆会话管理类

职责：
- 维护本次会话创建的订单（按递增 ID 保存）
- 持有一个无状态的 Cafe 门面，用于生成冲煮 / 出餐文本
- 提供 CLI 需要的入口：下单、制作、出餐、冲煮、营业查询、状态查询
"""
from __future__ import annotations

import logging
from typing import Optional, Dict, Any

from .domain import CoffeeOrder
from .service import Cafe


logger = logging.getLogger(__name__)


class Manager:
    """会话管理者。

    内部字段：
    - orders: dict[int, CoffeeOrder]
    - next_order_id: int
    - cafe: Cafe
    - history_limit: status 快照中最多展示的订单数（保留最新的），None 表示不限制
    """

    def __init__(self, history_limit: Optional[int] = 50) -> None:
        """初始化管理器，订单计数器从 1 开始。"""
        self.cafe = Cafe()
        self.orders: Dict[int, CoffeeOrder] = {}
        self.next_order_id: int = 1
        self.history_limit = history_limit

    def new_order(self, drink: str, size: str) -> dict:
        """创建新订单（唯一递增 id），返回订单字典。"""
        oid = self.next_order_id
        self.next_order_id += 1
        order = CoffeeOrder(drink, size)
        self.orders[oid] = order
        logger.debug("new order id=%s drink=%s size=%s", oid, drink, size)
        return {"ok": True, "order": {"id": oid, **order.to_dict()}}

    def prepare(self, order_id: int) -> Optional[dict]:
        """将订单置为 prepared。若订单不存在返回 None。"""
        order = self.orders.get(order_id)
        if order is None:
            return None
        order.prepare()
        return {"ok": True, "order": {"id": order_id, **order.to_dict()}}

    def serve(self, order_id: int) -> Optional[dict]:
        """标记订单已出餐，并返回门面生成的出餐文本。若订单不存在返回 None。"""
        order = self.orders.get(order_id)
        if order is None:
            return None
        order.serve()
        return {"ok": True, "data": self.cafe.serve(order), "order": {"id": order_id, **order.to_dict()}}

    def brew(self, drink: str) -> dict:
        """返回门面生成的冲煮文本。"""
        return {"ok": True, "data": self.cafe.brew(drink)}

    def status(self) -> Dict[str, Any]:
        """返回会话快照：最新 history_limit 个订单。"""
        items = list(self.orders.items())
        if self.history_limit is not None:
            items = items[-self.history_limit:] if self.history_limit > 0 else []
        return {
            "orders": [{"id": oid, **o.to_dict()} for oid, o in items],
            "total": len(self.orders),
        }

    # -------------------- CLI / CMD I/O --------------------

    def handle_cmd(self, line: str) -> Dict[str, Any]:
        """解析并执行一条命令行，返回结构化结果（不直接打印）。

        认可指令（命令词大小写不敏感，饮品名保持原样）：
        - "new <drink> <size>" / "order"  -> 新建订单（最后一个参数为杯型，其余拼成饮品名）
        - "prepare <id>" / "prep"         -> 制作订单
        - "serve <id>"                    -> 出餐并标记 served
        - "brew <drink>"                  -> 冲煮文本
        - "open" / "open?"                -> 营业状态
        - "status" / "ls"                 -> 返回订单快照
        - "clear" / "cls"                 -> 清屏
        - "exit" / "quit"                 -> 请求退出（由外层 CLI 决定是否终止进程）

        返回值格式：
          {
            "ok": bool,
            "cmd": str,
            "data": Any | None,
            "error": str | None,
          }
        - 未知命令：ok=False，并附带 error 与 usage。
        """
        parts = (line or "").split()
        if not parts:
            return {"ok": False, "cmd": "", "error": "empty command", "usage": self.help_text()}
        cmd, args = parts[0].lower(), parts[1:]
        if cmd in ("help", "h", "?"):
            return {"ok": True, "cmd": cmd, "data": self.help_text()}
        if cmd in ("new", "order"):
            if len(args) < 2:
                return {"ok": False, "cmd": cmd, "error": "usage: new <drink> <size>"}
            return {"cmd": cmd, **self.new_order(" ".join(args[:-1]), args[-1])}
        if cmd in ("prepare", "prep", "serve"):
            oid = self._parse_id(args)
            if oid is None:
                return {"ok": False, "cmd": cmd, "error": f"usage: {cmd} <id>"}
            res = self.serve(oid) if cmd == "serve" else self.prepare(oid)
            if res is None:
                return {"ok": False, "cmd": cmd, "error": f"no such order: {oid}"}
            return {"cmd": cmd, **res}
        if cmd == "brew":
            if not args:
                return {"ok": False, "cmd": cmd, "error": "usage: brew <drink>"}
            return {"cmd": cmd, **self.brew(" ".join(args))}
        if cmd in ("open", "open?"):
            return {"ok": True, "cmd": cmd, "data": "open" if self.cafe.is_open() else "closed"}
        if cmd in ("status", "ls"):
            return {"ok": True, "cmd": cmd, "data": self.status()}
        if cmd in ("clear", "cls"):
            return {"ok": True, "cmd": cmd, "data": {"clear": True}}
        if cmd in ("exit", "quit"):
            return {"ok": True, "cmd": cmd, "data": {"exit": True}}
        return {"ok": False, "cmd": cmd, "error": f"unknown command: {cmd}", "usage": self.help_text()}

    def help_text(self) -> str:
        """返回 CLI 帮助文本，供外层打印。"""
        return (
            "Commands:\n"
            "  new <drink> <size> | order - 新建订单\n"
            "  prepare <id>  | prep       - 制作订单\n"
            "  serve <id>                 - 出餐\n"
            "  brew <drink>               - 冲煮\n"
            "  open | open?               - 是否营业\n"
            "  status | ls                - 查看订单状态\n"
            "  clear | cls                - 清屏\n"
            "  help|h|?                   - 帮助\n"
            "  exit|quit                  - 退出\n"
        )

    # -------------------- 内部 --------------------

    @staticmethod
    def _parse_id(args: list[str]) -> Optional[int]:
        if len(args) != 1:
            return None
        try:
            return int(args[0])
        except ValueError:
            return None
