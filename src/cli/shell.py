"""Interactive phone book shell: line-oriented menus over PhoneBookService."""

import logging
import re
from collections.abc import Callable

from cli.flow_loader import format_message
from phonebook.application import PhoneBookService, SearchHit
from phonebook.domain import Contact, RecordNotFoundError, validate_field

logger = logging.getLogger(__name__)

NUMBER_COMMAND = "[number]"
_POSITION = re.compile(r"\d+", re.ASCII)

# Field name -> message shown when its input is replaced by a sentinel.
_INVALID_FIELD_MESSAGES = {
    "number": "wrong_number",
    "birth": "bad_birth_date",
    "gender": "wrong_gender",
}

_RECORD_TYPES = ("person", "organization")


class PhoneBookShell:
    """
    Menus: [menu] -> [list] / [search] -> [record].
    A position typed in [list] or [search] refers to the listing just shown; the shell keeps
    the chosen record itself, so later list changes cannot redirect an edit or delete.
    """

    def __init__(
        self,
        service: PhoneBookService,
        flow: dict,
        *,
        read: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self._service = service
        self._flow = flow
        self._read = read or input
        self._write = write or print

    def run(self) -> None:
        """Run the main menu until 'exit', which saves the phone book."""
        menu_id = self._flow["start_menu"]
        while True:
            command = self._ask_command(menu_id)
            if command is None:
                continue
            if command == "exit":
                self._service.save()
                return
            if command == "add":
                self._add()
            elif command == "list":
                self._list_menu()
            elif command == "search":
                self._search_menu()
            elif command == "count":
                self._say("count", count=self._service.count())
            self._write("")

    # --- helpers ---

    def _say(self, message_id: str, **template_vars: object) -> None:
        self._write(format_message(self._flow, message_id, **template_vars))

    def _ask(self, message_id: str, **template_vars: object) -> str:
        return self._read(format_message(self._flow, message_id, **template_vars))

    def _ask_command(self, menu_id: str, positions: int = 0) -> str | int | None:
        """Prompt once. Returns a command, a 1-based position, or None after an invalid entry."""
        menu = self._flow["menus"][menu_id]
        commands = menu["commands"]
        text = self._ask("menu_prompt", menu=menu_id, commands=", ".join(commands)).strip()
        if NUMBER_COMMAND in commands and _POSITION.fullmatch(text):
            if 1 <= int(text) <= positions:
                return int(text)
        if text in commands and text != NUMBER_COMMAND:
            return text
        self._say(menu.get("invalid", "invalid_action"))
        return None

    def _checked(self, field_name: str, raw: str) -> str:
        """Validate as entered so the warning appears right after the bad input."""
        return validate_field(
            field_name,
            raw,
            lambda _bad: self._say(_INVALID_FIELD_MESSAGES[field_name]),
        )

    # --- add ---

    def _add(self) -> None:
        while True:
            record_type = self._ask("type_prompt").strip()
            if record_type in _RECORD_TYPES:
                break
            self._say("choose_from_list")
        if record_type == "person":
            name = self._ask("person_name_prompt")
            surname = self._ask("person_surname_prompt")
            birth = self._checked("birth", self._ask("birth_prompt"))
            gender = self._checked("gender", self._ask("gender_prompt"))
            number = self._checked("number", self._ask("number_prompt"))
            self._service.add_person(name, surname, birth, gender, number)
        else:
            name = self._ask("organization_name_prompt")
            address = self._ask("address_prompt")
            number = self._checked("number", self._ask("number_prompt"))
            self._service.add_organization(name, address, number)
        self._say("added")

    # --- list ---

    def _list_menu(self) -> None:
        contacts = self._service.list_contacts()
        if not contacts:
            self._say("empty")
            return
        for position, contact in enumerate(contacts, start=1):
            self._say("list_item", position=position, text=contact)
        self._write("")
        while True:
            choice = self._ask_command("list", positions=len(contacts))
            if isinstance(choice, int):
                self._open_record(contacts[choice - 1])
                return
            if choice == "back":
                return

    # --- search ---

    def _search_menu(self) -> None:
        while True:
            if self._service.count() == 0:
                self._say("empty")
                return
            query = self._ask("query_prompt")
            hits = self._service.search(query)
            self._show_hits(query, hits)
            if self._search_actions(hits) != "again":
                return

    def _show_hits(self, query: str, hits: list[SearchHit]) -> None:
        if not hits:
            self._say("not_found", query=query)
            return
        self._say("found", count=len(hits))
        for position, hit in enumerate(hits, start=1):
            self._say("list_item", position=position, text=hit.label)
        self._write("")

    def _search_actions(self, hits: list[SearchHit]) -> str:
        while True:
            choice = self._ask_command("search", positions=len(hits))
            if isinstance(choice, int):
                self._open_record(hits[choice - 1].contact)
                return "menu"
            if choice in ("back", "again"):
                return choice

    # --- record ---

    def _open_record(self, contact: Contact) -> None:
        """Show one record and run the [record] menu until delete or 'menu'."""
        self._write(contact.display_contact_info())
        self._write("")
        while True:
            choice = self._ask_command("record")
            if choice is None:
                continue
            try:
                if choice == "edit":
                    self._edit(contact)
                    self._write("")
                elif choice == "delete":
                    self._service.delete(contact)
                    self._say("deleted")
                    return
                elif choice == "menu":
                    return
            except RecordNotFoundError:
                logger.warning("Record %s is no longer in the phone book", contact)
                self._say("record_gone")
                return

    def _edit(self, contact: Contact) -> None:
        fields = contact.list_of_properties()
        while True:
            field_name = self._ask("field_prompt", fields=", ".join(fields)).strip()
            if field_name in fields:
                break
            self._say("choose_from_list")
        value = self._checked(field_name, self._ask("value_prompt", field=field_name))
        self._service.edit(contact, field_name, value)
        self._say("updated")
