"""
Unit Tests for Manager command handling
"""

import logging

import pytest

from cafe.manager import Manager


class TestManagerApi:

    def test_new_order_ids_increase(self, manager):
        first = manager.new_order("Latte", "medium")
        second = manager.new_order("Mocha", "large")
        assert first == {"ok": True, "order": {"id": 1, "drink": "Latte", "size": "medium", "status": "ordered"}}
        assert second["order"]["id"] == 2
        assert manager.next_order_id == 3

    def test_prepare(self, manager):
        manager.new_order("Latte", "medium")
        res = manager.prepare(1)
        assert res["order"]["status"] == "prepared"
        assert manager.orders[1].is_prepared()

    def test_serve_marks_served_and_describes(self, manager):
        manager.new_order("Latte", "medium")
        res = manager.serve(1)
        assert res["data"] == "Serving Latte (medium)"
        assert manager.orders[1].is_served()

    def test_unknown_id_returns_none(self, manager):
        assert manager.prepare(7) is None
        assert manager.serve(7) is None

    def test_brew(self, manager):
        assert manager.brew("Cappuccino") == {"ok": True, "data": "Brewing Cappuccino..."}

    def test_status_snapshot(self, manager):
        manager.new_order("Latte", "medium")
        manager.new_order("Espresso", "small")
        manager.serve(2)
        snap = manager.status()
        assert snap["total"] == 2
        assert [o["status"] for o in snap["orders"]] == ["ordered", "served"]

    @pytest.mark.parametrize("limit,expected_ids", [(2, [2, 3]), (0, []), (None, [1, 2, 3])])
    def test_status_history_limit(self, limit, expected_ids):
        mgr = Manager(history_limit=limit)
        for drink in ("Latte", "Mocha", "Espresso"):
            mgr.new_order(drink, "small")
        snap = mgr.status()
        assert [o["id"] for o in snap["orders"]] == expected_ids
        assert snap["total"] == 3


class TestHandleCmd:

    def test_new(self, manager):
        res = manager.handle_cmd("new Latte medium")
        assert res["ok"] is True
        assert res["cmd"] == "new"
        assert res["order"]["drink"] == "Latte"

    def test_new_multi_word_drink(self, manager):
        res = manager.handle_cmd("ORDER flat white small")
        assert res["cmd"] == "order"
        assert res["order"]["drink"] == "flat white"
        assert res["order"]["size"] == "small"

    def test_new_missing_size(self, manager):
        res = manager.handle_cmd("new Latte")
        assert res["ok"] is False
        assert "usage" in res["error"]
        assert manager.orders == {}

    def test_prepare_and_serve_flow(self, manager):
        manager.handle_cmd("new Latte medium")
        assert manager.handle_cmd("prep 1")["order"]["status"] == "prepared"
        res = manager.handle_cmd("serve 1")
        assert res["ok"] is True
        assert res["data"] == "Serving Latte (medium)"
        assert res["order"]["status"] == "served"

    @pytest.mark.parametrize("line", ["prepare", "prepare x", "serve 1 2"])
    def test_bad_id(self, manager, line):
        res = manager.handle_cmd(line)
        assert res["ok"] is False
        assert res["error"].startswith("usage:")

    def test_unknown_order(self, manager):
        res = manager.handle_cmd("serve 42")
        assert res == {"ok": False, "cmd": "serve", "error": "no such order: 42"}

    def test_brew(self, manager):
        assert manager.handle_cmd("brew Cappuccino")["data"] == "Brewing Cappuccino..."
        assert manager.handle_cmd("brew")["ok"] is False

    def test_open(self, manager):
        assert manager.handle_cmd("open?")["data"] == "open"

    def test_status(self, manager):
        manager.handle_cmd("new Latte medium")
        res = manager.handle_cmd("ls")
        assert res["data"]["total"] == 1

    @pytest.mark.parametrize("line,key", [("clear", "clear"), ("cls", "clear"), ("exit", "exit"), ("QUIT", "exit")])
    def test_control_commands(self, manager, line, key):
        assert manager.handle_cmd(line)["data"] == {key: True}

    def test_help(self, manager):
        res = manager.handle_cmd("?")
        assert res["ok"] is True
        assert "Commands:" in res["data"]

    @pytest.mark.parametrize("line", ["", "   ", None])
    def test_empty(self, manager, line):
        res = manager.handle_cmd(line)
        assert res["ok"] is False
        assert res["error"] == "empty command"
        assert "usage" in res

    def test_unknown(self, manager):
        res = manager.handle_cmd("refund 1")
        assert res["ok"] is False
        assert res["error"] == "unknown command: refund"
        assert "Commands:" in res["usage"]


class TestManagerLogging:

    def test_new_order_logs(self, manager, caplog):
        with caplog.at_level(logging.DEBUG, logger="cafe.manager"):
            manager.new_order("Latte", "medium")
        assert "new order id=1 drink=Latte size=medium" in caplog.messages
