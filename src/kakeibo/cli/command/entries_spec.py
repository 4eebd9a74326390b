"""Tests for list command."""

from __future__ import annotations

from kakeibo.cli.command import entries
from kakeibo.model.item_io import save_items


class DescribeEntriesCommand:
    def it_should_list_items_sorted_by_date(self, workspace, sample_items, capsys):
        save_items(workspace.data_path, list(reversed(sample_items)))

        rc = entries.run(workspace=workspace)

        assert rc == 0
        out = capsys.readouterr().out
        assert out.index("2022-01-10") < out.index("2022-02-15") < out.index("2022-04-15")
        assert "+300000 yen" in out

    def it_should_filter_by_month(self, ledger_workspace, capsys):
        rc = entries.run(workspace=ledger_workspace, year=2022, month=2)

        assert rc == 0
        out = capsys.readouterr().out
        assert "2022-02-15" in out
        assert "2022-01-10" not in out

    def it_should_apply_limit(self, ledger_workspace, capsys):
        rc = entries.run(workspace=ledger_workspace, limit=2)

        assert rc == 0
        out = capsys.readouterr().out
        assert "2022-01-20" in out
        assert "2022-01-30" not in out

    def it_should_show_memo(self, workspace, sample_items, capsys):
        save_items(workspace.data_path, [sample_items[0].model_copy(update={"memo": "office"})])

        rc = entries.run(workspace=workspace)

        assert rc == 0
        assert "office" in capsys.readouterr().out

    def it_should_say_when_nothing_matches(self, ledger_workspace, capsys):
        rc = entries.run(workspace=ledger_workspace, year=1999)

        assert rc == 0
        assert "No entries to show" in capsys.readouterr().out

    def it_should_require_year_with_month(self, ledger_workspace):
        assert entries.run(workspace=ledger_workspace, month=1) == 1

    def it_should_reject_month_out_of_range(self, ledger_workspace, capsys):
        rc = entries.run(workspace=ledger_workspace, year=2022, month=13)

        assert rc == 1
        assert "--month must be between 1 and 12" in capsys.readouterr().out
