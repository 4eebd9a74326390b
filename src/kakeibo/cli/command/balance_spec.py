"""Tests for balance command."""

from __future__ import annotations

from kakeibo.cli.command import balance


class DescribeBalanceCommand:
    def it_should_show_income_expense_and_net(self, ledger_workspace, capsys):
        rc = balance.run(workspace=ledger_workspace)

        assert rc == 0
        out = capsys.readouterr().out
        assert "+300000 yen" in out
        assert "-118000 yen" in out
        assert "+182000 yen" in out
        assert "all time" in out

    def it_should_restrict_to_a_month(self, ledger_workspace, capsys):
        rc = balance.run(workspace=ledger_workspace, year=2022, month=2)

        assert rc == 0
        out = capsys.readouterr().out
        assert "2022/2" in out
        assert "-3000 yen" in out

    def it_should_show_category_breakdown(self, ledger_workspace, capsys):
        rc = balance.run(workspace=ledger_workspace, by_category=True)

        assert rc == 0
        out = capsys.readouterr().out
        assert "By Category" in out
        assert "Hobby" in out
        assert "-8000 yen" in out

    def it_should_require_year_with_month(self, ledger_workspace, capsys):
        rc = balance.run(workspace=ledger_workspace, month=3)

        assert rc == 1
        assert "--month requires --year" in capsys.readouterr().out

    def it_should_reject_month_out_of_range(self, ledger_workspace):
        assert balance.run(workspace=ledger_workspace, year=2022, month=13) == 1

    def it_should_show_zero_balance_for_empty_ledger(self, workspace, capsys):
        workspace.data_path.write_text("[]\n", encoding="utf-8")

        rc = balance.run(workspace=workspace)

        assert rc == 0
        assert "0 item(s)" in capsys.readouterr().out

    def it_should_fail_when_ledger_missing(self, workspace):
        assert balance.run(workspace=workspace) == 1
