"""Data transfer objects passed between the engine and its front ends."""

import re
from dataclasses import dataclass, field

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command: feedback to show, and whether to stop."""

    feedback: str
    exit_requested: bool = False


@dataclass(frozen=True)
class CommandUsage:
    """Help entry for one command word."""

    word: str
    description: str
    example: str
    parameters: str | None = None


@dataclass(frozen=True)
class MessageCatalog:
    """User-facing message templates and command usage, keyed by id / word."""

    messages: dict[str, str] = field(default_factory=dict)
    commands: dict[str, CommandUsage] = field(default_factory=dict)

    def format(self, message_id: str, **template_vars: object) -> str:
        """Fill {placeholders} of a message. Unknown ids fall back to the id itself."""
        text = self.messages.get(message_id) or message_id

        def _fill(match: re.Match) -> str:
            key = match.group(1)
            if key not in template_vars:
                return match.group(0)
            value = template_vars[key]
            return str(value) if value is not None else ""

        return _PLACEHOLDER.sub(_fill, text)

    def usage(self, word: str) -> str:
        """Usage block for one command: description, parameters, example."""
        command = self.commands[word]
        lines = [
            self.format(
                "command_help", word=command.word, description=command.description
            )
        ]
        if command.parameters:
            lines.append(
                self.format("command_help_parameters", parameters=command.parameters)
            )
        lines.append(self.format("command_help_example", example=command.example))
        return "\n".join(lines)

    def usage_for_all(self) -> str:
        return "\n".join(self.usage(word) for word in self.commands)
