"""Tests for fieldlog.menu module."""

import logging

import pytest
from transitions import MachineError

from fieldlog.menu import MenuFSM, STATES, TRANSITIONS


class TestMenuStates:
    """Tests for menu state definitions."""

    def test_all_states_defined(self):
        assert set(STATES) == {"menu", "registering", "viewing", "done"}

    def test_every_transition_uses_known_states(self):
        for t in TRANSITIONS:
            assert t["source"] in STATES
            assert t["dest"] in STATES


class TestMenuFSM:
    """Tests for MenuFSM transitions."""

    def test_starts_at_menu(self):
        fsm = MenuFSM()
        assert fsm.state == "menu"
        assert not fsm.finished

    def test_register_round_trip(self):
        fsm = MenuFSM()
        fsm.register()
        assert fsm.state == "registering"
        fsm.finish()
        assert fsm.state == "menu"

    def test_view_round_trip(self):
        fsm = MenuFSM()
        fsm.view()
        assert fsm.state == "viewing"
        fsm.finish()
        assert fsm.state == "menu"

    def test_quit_from_anywhere(self):
        for trigger in (None, "register", "view"):
            fsm = MenuFSM()
            if trigger:
                getattr(fsm, trigger)()
            fsm.quit()
            assert fsm.finished

    def test_cannot_view_while_registering(self):
        fsm = MenuFSM()
        fsm.register()
        assert "view" not in fsm.machine.get_triggers(fsm.state)
        with pytest.raises(MachineError):
            fsm.view()

    def test_done_is_terminal(self):
        fsm = MenuFSM()
        fsm.quit()
        assert fsm.machine.get_triggers(fsm.state) == []

    def test_transitions_are_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="fieldlog.menu")
        fsm = MenuFSM()
        fsm.register()
        fsm.finish()
        assert "[menu] menu -> registering (register)" in caplog.text
        assert "[menu] registering -> menu (finish)" in caplog.text
