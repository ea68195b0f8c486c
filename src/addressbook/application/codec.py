"""Person text codec: storage lines, add-command arguments and display strings.

Storage line and add arguments share one grammar: ``NAME p/PHONE e/EMAIL``,
with the phone and email parts in either order.
"""

import re

from addressbook.application.errors import DecodeError
from addressbook.domain import Person
from addressbook.domain.entities import EMAIL_PREFIX, PHONE_PREFIX

STORAGE_FORMAT = "{name} " + PHONE_PREFIX + "{phone} " + EMAIL_PREFIX + "{email}"
DISPLAY_FORMAT = "{name}  Phone Number: {phone}  Email: {email}"

_ANY_PREFIX = re.compile(f"{re.escape(PHONE_PREFIX)}|{re.escape(EMAIL_PREFIX)}")


def _split_on_prefixes(text: str) -> list[str]:
    parts = _ANY_PREFIX.split(text.strip())
    # Trailing empty parts do not count as segments.
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def _is_extractable(text: str) -> bool:
    parts = _split_on_prefixes(text)
    return len(parts) == 3 and all(parts)


def _segment(text: str, own_index: int, other_index: int, prefix: str) -> str:
    """Slice from own prefix to the other prefix, or to the end if own comes last."""
    end = len(text) if own_index > other_index else other_index
    return text[own_index:end].strip().replace(prefix, "")


def decode_person(text: str) -> Person:
    """Decode ``NAME p/PHONE e/EMAIL`` (markers in any order) into a Person.

    Raises DecodeError when the text does not split into three non-empty
    segments, a marker is missing, or a field fails Person validation.
    """
    if not _is_extractable(text):
        raise DecodeError(f"Cannot extract name, phone and email from {text!r}.")

    phone_index = text.find(PHONE_PREFIX)
    email_index = text.find(EMAIL_PREFIX)
    if phone_index < 0 or email_index < 0:
        raise DecodeError(
            f"Both '{PHONE_PREFIX}' and '{EMAIL_PREFIX}' are required in {text!r}."
        )

    name = text[: min(phone_index, email_index)].strip()
    phone = _segment(text, phone_index, email_index, PHONE_PREFIX)
    email = _segment(text, email_index, phone_index, EMAIL_PREFIX)
    try:
        return Person(name=name, phone=phone, email=email)
    except ValueError as e:
        raise DecodeError(str(e)) from e


def decode_from_command_args(raw: str) -> Person:
    """Decode the argument string of an ``add`` command."""
    return decode_person(raw)


def decode_from_storage_line(line: str) -> Person:
    """Decode one line of the storage file."""
    return decode_person(line)


def encode_to_storage_line(person: Person) -> str:
    """Inverse of decode_from_storage_line for any valid Person."""
    return STORAGE_FORMAT.format(
        name=person.name, phone=person.phone, email=person.email
    )


def encode_to_display_string(person: Person) -> str:
    """Human-readable form. Never decoded."""
    return DISPLAY_FORMAT.format(
        name=person.name, phone=person.phone, email=person.email
    )
