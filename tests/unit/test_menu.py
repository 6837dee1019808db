from __future__ import annotations

from pathlib import Path

from customer_usage.menu import (
    EXIT_CHOICE,
    MENU_OPTIONS,
    MenuSession,
    dispatch,
    sort_and_filter,
    view_customers,
)


def _session(test_settings, customers, source: Path | None = None) -> MenuSession:
    return MenuSession(
        source=source or Path(test_settings.data_file),
        settings=test_settings,
        customers=customers,
    )


def test_exit_choice_stops_the_loop(test_settings, sample_customers):
    assert dispatch(_session(test_settings, sample_customers), EXIT_CHOICE) is False


def test_unknown_choice_is_reported_and_loop_continues(test_settings, sample_customers, capsys):
    assert dispatch(_session(test_settings, sample_customers), "nine") is True
    assert "Invalid selection 'nine'" in capsys.readouterr().err


def test_every_option_has_a_label_and_action():
    assert EXIT_CHOICE not in MENU_OPTIONS
    for label, action in MENU_OPTIONS.values():
        assert label
        assert callable(action)


def test_sort_and_filter_sorts_working_sequence(test_settings, sample_customers, monkeypatch):
    session = _session(test_settings, sample_customers)
    monkeypatch.setattr("typer.prompt", lambda *args, **kwargs: "")

    sort_and_filter(session)

    # The working sequence keeps every customer, now ordered by usage.
    assert [c.usage for c in session.customers] == [30.8, 30.5, 8.5, 0.5]
    assert not Path(test_settings.report_file).exists()


def test_failed_action_is_reported(test_settings, sample_customers, tmp_path: Path, capsys, monkeypatch):
    session = _session(test_settings, sample_customers)
    monkeypatch.setattr("typer.prompt", lambda *args, **kwargs: str(tmp_path / "absent.bin"))

    assert dispatch(session, "5") is True
    assert "Error: Source not found" in capsys.readouterr().err
    assert session.customers == sample_customers


def test_view_highlights_at_configured_threshold(test_settings, sample_customers, monkeypatch):
    session = _session(test_settings, sample_customers)
    shown = {}
    monkeypatch.setattr(
        "customer_usage.menu.print_customers",
        lambda customers, **kwargs: shown.update(kwargs, customers=customers),
    )

    view_customers(session)

    assert shown["threshold"] == test_settings.usage_threshold
    assert shown["customers"] == sample_customers
