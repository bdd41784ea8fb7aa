"""
Interactive console channel: menu loop and booking/cancel prompts.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, TextIO
import sys

from hotel_desk import prompts
from hotel_desk.tools import (
    book_room,
    cancel_reservation,
    check_room,
    list_available_rooms,
    list_reservations,
    validate_contact,
)

logger = logging.getLogger(__name__)

EXIT_CHOICE = 5


class ConsoleChannel:
    """
    Line-based operator session.

    ``input_func`` and ``output`` default to the real console; tests pass
    scripted ones. When ``output`` is given, prompts are written there too and
    ``input_func`` is called with an empty prompt.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ) -> None:
        self._input = input_func
        self._output = output

    def _print(self, text: str = "") -> None:
        print(text, file=self._output or sys.stdout)

    def _ask(self, prompt: str) -> str:
        if self._output is None:
            return self._input(prompt)
        # Prompt goes to the same stream as the messages
        self._output.write(prompt)
        self._output.flush()
        return self._input("")

    # ------------------------------------
    # Workflows
    # ------------------------------------

    def book_room_interactive(self) -> None:
        guest_name = self._ask(prompts.GUEST_NAME_PROMPT)
        contact_info = self._ask(prompts.GUEST_CONTACT_PROMPT)

        error = validate_contact(contact_info)
        if error:
            self._print(error)
            return

        room_number = self._ask(prompts.ROOM_NUMBER_PROMPT)
        error = check_room(room_number)
        if error:
            self._print(error)
            return

        check_in_date = self._ask(prompts.CHECK_IN_PROMPT)
        check_out_date = self._ask(prompts.CHECK_OUT_PROMPT)

        self._print(book_room(
            guest_name=guest_name,
            contact_info=contact_info,
            room_number=room_number,
            check_in_date=check_in_date,
            check_out_date=check_out_date,
        ))

    def cancel_reservation_interactive(self) -> None:
        reservation_id = self._ask(prompts.CANCEL_ID_PROMPT)
        self._print(cancel_reservation(reservation_id))

    # ------------------------------------
    # Menu loop
    # ------------------------------------

    def handle_choice(self, choice: int) -> bool:
        """Runs one menu option. Returns False once the operator chose Exit."""
        if choice == 1:
            self.book_room_interactive()
        elif choice == 2:
            self.cancel_reservation_interactive()
        elif choice == 3:
            self._print(list_reservations())
        elif choice == 4:
            self._print(list_available_rooms())
        elif choice == EXIT_CHOICE:
            self._print(prompts.GOODBYE_MESSAGE)
            return False
        else:
            self._print(prompts.INVALID_CHOICE_MESSAGE)
        return True

    def run(self) -> None:
        """Shows the menu until the operator exits or input ends."""
        running = True
        while running:
            self._print(prompts.get_menu_text())
            try:
                raw_choice = self._ask(prompts.CHOICE_PROMPT)
            except (EOFError, KeyboardInterrupt):
                logger.info("Console input closed, leaving menu loop")
                self._print()
                break

            try:
                choice = int(raw_choice.strip())
            except ValueError:
                self._print(prompts.INVALID_CHOICE_MESSAGE)
                continue

            try:
                running = self.handle_choice(choice)
            except (EOFError, KeyboardInterrupt):
                logger.info("Console input closed mid-workflow, leaving menu loop")
                self._print()
                break


def run_console() -> None:
    """Run the menu loop on stdin/stdout."""
    ConsoleChannel().run()
