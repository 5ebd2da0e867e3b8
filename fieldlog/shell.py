"""
Interactive shell for the field log.

Reads menu choices and record fields from the user, builds records, and hands
them to a FieldLog. Everything here is prompt/print glue; the log itself does
the storing and listing.
"""

import logging
from typing import Callable, Optional, TextIO

from fieldlog.field_log import VALID_FILTERS, FieldLog
from fieldlog.lib.catalog import Catalog
from fieldlog.menu import MenuFSM
from fieldlog.records import Category, PlantRecord, make_record, parse_category

logger = logging.getLogger(__name__)

# Prompt key for the one extra field of each record kind
EXTRA_PROMPTS = {
    Category.HERB: "medicinal_prompt",
    Category.SHRUB: "stems_prompt",
    Category.BUSH: "thorns_prompt",
    Category.TREE: "height_prompt",
}


class Shell:
    """Main menu loop around a FieldLog.

    Args:
        field_log: Log that receives records and prints listings
        read: Line reader called with the prompt text (defaults to input)
        out: Where menus and messages go (defaults to the log's output)
    """

    def __init__(
        self,
        field_log: FieldLog,
        read: Optional[Callable[[str], str]] = None,
        out: Optional[TextIO] = None,
    ):
        self.field_log = field_log
        self.read = read if read is not None else input
        self._out = out

    @property
    def catalog(self) -> Catalog:
        return self.field_log.catalog

    @property
    def out(self) -> TextIO:
        if self._out is not None:
            return self._out
        return self.field_log.out

    def say(self, key: str, blank_before: bool = False) -> None:
        if blank_before:
            print(file=self.out)
        print(self.catalog.message(key), file=self.out)

    def ask(self, key: str) -> str:
        """Prompt and return the stripped reply. EOFError propagates."""
        return self.read(self.catalog.message(key)).strip()

    def ask_int(self, key: str) -> int:
        """Prompt until the reply parses as an integer."""
        while True:
            reply = self.ask(key)
            try:
                return int(reply)
            except ValueError:
                self.say("not_a_number")

    def ask_float(self, key: str) -> float:
        """Prompt until the reply parses as a number."""
        while True:
            reply = self.ask(key)
            try:
                return float(reply)
            except ValueError:
                self.say("not_a_number")

    def ask_yes_no(self, key: str) -> bool:
        """1 means yes; any other reply means no."""
        return self.ask(key) == "1"

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def choose_category(self) -> Category:
        """Show the register menu until a valid category is picked."""
        while True:
            self.say("register_header", blank_before=True)
            self.say("register_menu")
            reply = self.ask("register_prompt")
            try:
                category = parse_category(int(reply))
            except ValueError:
                category = None
            if category is not None:
                return category
            logger.debug(f"Rejected category choice {reply!r}")
            self.say("wrong_category")

    def read_extra(self, category: Category):
        key = EXTRA_PROMPTS[category]
        if category in (Category.HERB, Category.BUSH):
            return self.ask_yes_no(key)
        if category == Category.SHRUB:
            return self.ask_int(key)
        return self.ask_float(key)

    def collect_record(self) -> PlantRecord:
        """Prompt for every field of a new record and build it."""
        category = self.choose_category()
        name = self.ask("name_prompt")
        climate = self.ask("climate_prompt")
        extra = self.read_extra(category)
        return make_record(category, name, climate, extra)

    def register(self) -> None:
        self.field_log.append(self.collect_record())

    def view(self) -> None:
        """Ask for a filter and list. Bad input skips the listing."""
        self.say("filter_header", blank_before=True)
        self.say("filter_menu")
        reply = self.ask("filter_prompt")
        try:
            category = int(reply)
        except ValueError:
            category = None

        if category not in VALID_FILTERS:
            logger.debug(f"Rejected filter choice {reply!r}")
            self.say("unknown_category")
            return

        print(file=self.out)
        self.field_log.list_filtered(category)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def step(self, fsm: MenuFSM) -> None:
        """Run one pass of the main menu."""
        self.say("main_menu", blank_before=True)
        choice = self.ask("main_prompt")

        if choice == "1":
            fsm.register()
            self.register()
            fsm.finish()
        elif choice == "2":
            fsm.view()
            self.view()
            fsm.finish()
        elif choice == "3":
            self.say("goodbye")
            fsm.quit()
        else:
            self.say("invalid_option")

    def run(self) -> int:
        """Loop the main menu until the user exits or input ends."""
        self.say("title")
        fsm = MenuFSM()
        while not fsm.finished:
            try:
                self.step(fsm)
            except EOFError:
                logger.debug(f"End of input while in '{fsm.state}'")
                print(file=self.out)
                self.say("goodbye")
                fsm.quit()
        logger.info(f"Session ended with {len(self.field_log)} record(s)")
        return 0


def run_shell(
    field_log: FieldLog,
    read: Optional[Callable[[str], str]] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Run an interactive session. Factory function for cleaner imports."""
    return Shell(field_log, read=read, out=out).run()
