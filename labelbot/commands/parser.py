"""Parser for label commands embedded in issue comments.

A label command is a bot mention followed by the ``label`` keyword and a
list of deltas, all on one line::

    @rustbot label +T-compiler -S-waiting-on-review
    @rustbot modify labels: A-diagnostics, E-easy and -I-slow.
    @rustbot label to C-bug

Bare names are additions. Fenced code blocks and quoted lines are skipped so
that quoting someone else's command does not run it again.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional

from .exceptions import CommandParseError
from .models import LabelCommand, LabelDelta


class CommandParser(ABC):
    """Interface the label handler uses to interpret comment text."""

    @abstractmethod
    def parse_label_command(
        self, body: str, bot_name: str
    ) -> Optional[LabelCommand]:
        """Extract the label command addressed to the bot, if any.

        Args:
            body: Raw comment body.
            bot_name: Login of the bot, without the leading ``@``.

        Returns:
            The parsed command, or None if the comment contains no label
            command for this bot.

        Raises:
            CommandParseError: If a label command is present but malformed.
        """
        pass


class LabelCommandParser(CommandParser):
    """Default parser for the ``@bot label ...`` command syntax."""

    KEYWORDS = ("label", "labels")
    FENCE = "```"

    # Separators between deltas: whitespace, commas, and the word "and".
    SEPARATOR_PATTERN = re.compile(r"(?:\s|,)+(?:and(?:\s|,)+)?")

    def _command_lines(self, body: str) -> list[str]:
        """Return lines that may contain commands, skipping code and quotes."""
        lines = []
        in_fence = False
        for line in body.splitlines():
            stripped = line.strip()
            if stripped.startswith(self.FENCE):
                in_fence = not in_fence
                continue
            if in_fence or stripped.startswith(">"):
                continue
            lines.append(line)
        return lines

    def _mention_pattern(self, bot_name: str) -> re.Pattern:
        return re.compile(
            rf"(?:^|(?<=\s))@{re.escape(bot_name)}(?![\w-])", re.IGNORECASE
        )

    def _strip_keyword(self, rest: str) -> Optional[str]:
        """Consume the command keyword; return the remaining text.

        Returns None if the words after the mention are not a label command.
        """
        words = rest.split(None, 2)
        if not words:
            return None
        first = words[0].lower().rstrip(":")
        if first == "modify" and len(words) > 1:
            second = words[1].lower()
            if second.rstrip(":") in self.KEYWORDS:
                remainder = words[2] if len(words) > 2 else ""
                return (":" + remainder) if second.endswith(":") else remainder
            return None
        if first not in self.KEYWORDS:
            return None
        if words[0].endswith(":"):
            return ":" + " ".join(words[1:])
        return " ".join(words[1:])

    def _parse_deltas(self, text: str, line: str) -> list[LabelDelta]:
        text = text.strip()
        if text.startswith(":"):
            text = text[1:].strip()
        elif text.lower().startswith("to ") or text.lower() == "to":
            text = text[2:].strip()

        # A period ends the command; anything after it is prose.
        end = re.search(r"\.(?:\s|$)", text)
        if end:
            text = text[: end.start()]

        deltas: list[LabelDelta] = []
        for token in self.SEPARATOR_PATTERN.split(text):
            if not token:
                continue
            if token[0] in "+-":
                name = token[1:]
                if not name:
                    raise CommandParseError(
                        f"a label name is required after '{token[0]}'", line
                    )
                if name[0] in "+-":
                    raise CommandParseError(
                        f"label name '{name}' cannot start with '{name[0]}'", line
                    )
                if token[0] == "+":
                    deltas.append(LabelDelta.add(name))
                else:
                    deltas.append(LabelDelta.remove(name))
            else:
                deltas.append(LabelDelta.add(token))

        if not deltas:
            raise CommandParseError("expected at least one label to add or remove", line)
        return deltas

    def parse_label_command(
        self, body: str, bot_name: str
    ) -> Optional[LabelCommand]:
        if not body or not bot_name:
            return None

        mention = self._mention_pattern(bot_name)
        for line in self._command_lines(body):
            for match in mention.finditer(line):
                rest = self._strip_keyword(line[match.end():])
                if rest is None:
                    continue
                return LabelCommand(deltas=self._parse_deltas(rest, line.strip()))

        return None
