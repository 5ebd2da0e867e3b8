"""Shell menu state machine using the transitions library.

The interactive session moves between four states:

    menu --register--> registering --finish--> menu
    menu --view------> viewing     --finish--> menu
    any  --quit------> done

Usage:
    from fieldlog.menu import MenuFSM

    fsm = MenuFSM()
    fsm.register()
    fsm.finish()
    fsm.quit()
"""

import logging

from transitions import Machine

logger = logging.getLogger(__name__)


STATES = ["menu", "registering", "viewing", "done"]

TRANSITIONS = [
    {"trigger": "register", "source": "menu", "dest": "registering"},
    {"trigger": "view", "source": "menu", "dest": "viewing"},
    {"trigger": "finish", "source": "registering", "dest": "menu"},
    {"trigger": "finish", "source": "viewing", "dest": "menu"},

    # Exit from the menu, or end of input in the middle of an action
    {"trigger": "quit", "source": "menu", "dest": "done"},
    {"trigger": "quit", "source": "registering", "dest": "done"},
    {"trigger": "quit", "source": "viewing", "dest": "done"},
]


class MenuFSM:
    """Tracks where the interactive session is."""

    def __init__(self):
        self.machine = Machine(
            model=self,
            states=STATES,
            transitions=TRANSITIONS,
            initial="menu",
            auto_transitions=False,
            send_event=True,
            after_state_change="on_state_change",
        )

    def on_state_change(self, event) -> None:
        from_state = event.transition.source
        to_state = event.transition.dest
        trigger = event.event.name

        logger.debug(f"[menu] {from_state} -> {to_state} ({trigger})")

    @property
    def finished(self) -> bool:
        return self.state == "done"
