from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict

from .manager import Manager


def _resolve_log_level(name: str) -> int:
    # 只接受已登记的级别名，其余一律回退到 WARNING
    level = logging.getLevelName((name or "WARNING").strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def _setup_logging() -> None:
    # 日志级别只由 CLI 读取 CAFE_LOG_LEVEL，核心模块不读环境变量
    logging.basicConfig(
        level=_resolve_log_level(os.environ.get("CAFE_LOG_LEVEL", "WARNING")),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _clear_screen() -> None:
    # ANSI 清屏 + 光标归位
    print("\033[2J\033[H", end="")


def _format_table(headers: list[str], rows: list[list[str]]) -> str:
    # 简单文本表格渲染（无依赖）
    widths = [len(h) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(cell))
    def fmt_row(cols: list[str]) -> str:
        return " | ".join(col.ljust(widths[i]) for i, col in enumerate(cols))
    sep = "-+-".join("-" * w for w in widths)
    lines = [fmt_row(headers), sep]
    for r in rows:
        lines.append(fmt_row(r))
    return "\n".join(lines)


def _render_status(data: Dict[str, Any]) -> str:
    orders = data.get("orders", [])
    rows = [[str(o["id"]), o["drink"], o["size"], o["status"]] for o in orders]
    tbl = _format_table(["ID", "Drink", "Size", "Status"], rows) if rows else "<empty>"
    return f"== Orders (showing {len(orders)} of {data.get('total', len(orders))}) ==\n" + tbl


def _render_order(order: Dict[str, Any]) -> str:
    return f"#{order['id']} {order['drink']} ({order['size']}) - {order['status']}"


def print_result(res: Dict[str, Any]) -> None:
    if not isinstance(res, dict):
        print(res)
        return
    if res.get("ok") is False:
        print(f"ERR: {res.get('error')}")
        if "usage" in res:
            print(res["usage"])
        return
    data = res.get("data")
    if isinstance(data, str):
        print(data)
    elif isinstance(data, dict) and data.get("clear"):
        _clear_screen()
    elif isinstance(data, dict) and data.get("orders") is not None:
        print(_render_status(data))
    elif isinstance(data, dict) and data.get("exit"):
        return
    if "order" in res:
        print(_render_order(res["order"]))


def repl() -> None:
    mgr = Manager()
    print("Type 'help' to see commands. Type 'exit' to quit.")
    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        res = mgr.handle_cmd(line)
        data = res.get("data")
        if isinstance(data, dict) and data.get("exit"):
            break
        print_result(res)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    _setup_logging()
    if not argv:
        repl()
        return 0
    # one-shot mode: join argv to a single command
    mgr = Manager()
    res = mgr.handle_cmd(" ".join(argv))
    print_result(res)
    return 0 if res.get("ok") else 1


if __name__ == "__main__":
    raise SystemExit(main())
